from __future__ import annotations

from .api import atomic_write, chunk_name

__all__ = [
    "atomic_write",
    "chunk_name",
    # the cli submodule is not imported here (torch/PIL load on demand)
]

__version__ = "0.1.0"
