from __future__ import annotations

from .api import Generator, GeneratorInfo, ParamSpec
from .noise import lattice_value, value_hash2d
from .params import ParamCodec
from .registry import get, list_generators, register
from .register_all import register_all

__all__ = [
    "Generator", "GeneratorInfo", "ParamSpec", "ParamCodec",
    "lattice_value", "value_hash2d",
    "get", "list_generators", "register", "register_all",
]
