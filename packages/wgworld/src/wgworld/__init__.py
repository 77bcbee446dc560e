from __future__ import annotations

from .config import WorldConfig
from .tile import Constraint, Tile
from .world import LatticeSource, World, default_world

__all__ = ["WorldConfig", "Constraint", "Tile", "LatticeSource", "World", "default_world"]
