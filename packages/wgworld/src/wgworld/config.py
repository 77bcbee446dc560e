from __future__ import annotations
from dataclasses import dataclass

__all__ = ["WorldConfig"]


@dataclass(frozen=True, slots=True)
class WorldConfig:
    """
    Size and seed of a world chunk.

    Fields
    ------
    width : int, default=80
        Lattice cells per chunk row. Must be > 0.
    height : int, default=50
        Rows per chunk. Must be > 0.
    seed : int, default=0
        Seed of the world's lattice source. Any int; reduced modulo 2**32 by
        the hash.

    Notes
    -----
    Chunk (cx, cy) covers lattice x in [cx*width, (cx+1)*width) and y in
    [cy*height, (cy+1)*height). Coordinates past the int32 range wrap.
    """

    width: int = 80
    height: int = 50
    seed: int = 0

    def __post_init__(self) -> None:
        if int(self.width) <= 0:
            raise ValueError("WorldConfig.width must be > 0")
        if int(self.height) <= 0:
            raise ValueError("WorldConfig.height must be > 0")
