"""worldgen - lattice value hash for 2D coherent noise.

Import one namespace:

    import worldgen as wg
    v = wg.generate_random_value(3, -7, seed=42)

Or the detailed packages:

    from worldgen import core, proc, world, viz, wf
"""
from __future__ import annotations

__version__ = "0.1.0"

import wgcore as core
import wgproc as proc
import wgworld as world
import wgviz as viz
import wgwf as wf

from wgcore import (
    generate_random_value,
    hash_lattice_array,
    hash_lattice_int,
    WorldgenError,
    NoMatchingTileError,
)
from wgproc import lattice_value, list_generators, register_all
from wgworld import Constraint, LatticeSource, Tile, World, WorldConfig, default_world
from wgviz import lattice_image

__all__ = [
    # sub-namespaces
    "core", "proc", "world", "viz", "wf",
    # convenience
    "generate_random_value", "hash_lattice_array", "hash_lattice_int",
    "lattice_value", "list_generators", "register_all",
    "Constraint", "LatticeSource", "Tile", "World", "WorldConfig", "default_world",
    "lattice_image",
    "WorldgenError", "NoMatchingTileError",
    "__version__",
]
