"""worldgen core: the lattice value hash and shared plumbing."""
from __future__ import annotations

__version__ = "0.1.0"

from .errors import (
    WorldgenError,
    MissingCudaError,
    UnknownGeneratorError,
    InvalidParamsError,
    NoMatchingTileError,
    OutputWriteError,
)
from .rng import (
    generate_random_value,
    hash_lattice_array,
    hash_lattice_int,
    mix_lattice,
    to_int32_signed,
    wrap32,
)

__all__ = [
    "__version__",
    "generate_random_value", "hash_lattice_array", "hash_lattice_int",
    "mix_lattice", "to_int32_signed", "wrap32",
    "WorldgenError", "MissingCudaError", "UnknownGeneratorError",
    "InvalidParamsError", "NoMatchingTileError", "OutputWriteError",
]
