from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

import numpy as np

from wgcore.errors import NoMatchingTileError
from wgcore.rng import hash_lattice_array, to_int32_signed

from .config import WorldConfig
from .tile import Constraint, Tile

T = TypeVar("T")

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatticeSource:
    """Raw lattice values for one seed."""

    seed: int = 0

    def sample(self, xs, ys) -> np.ndarray:
        return hash_lattice_array(xs, ys, self.seed)


@dataclass(frozen=True)
class World(Generic[T]):
    """Map of tile values chosen by threshold constraints over lattice values.

    Tiles are tried in insertion order; the first whose constraints all hold
    for a cell wins. A tile without constraints matches everything, so it
    belongs last.
    """

    config: WorldConfig = field(default_factory=WorldConfig)
    tiles: tuple[Tile[T], ...] = ()

    @property
    def source(self) -> LatticeSource:
        return LatticeSource(self.config.seed)

    def add(self, tile: Tile[T]) -> "World[T]":
        return replace(self, tiles=self.tiles + (tile,))

    def with_size(self, width: int, height: int) -> "World[T]":
        return replace(self, config=replace(self.config, width=width, height=height))

    def coords(self, chunk_x: int = 0, chunk_y: int = 0) -> tuple[np.ndarray, np.ndarray]:
        """Lattice coordinates of a chunk as broadcastable (1,w) / (h,1) int64 arrays."""
        w, h = self.config.width, self.config.height
        # chunk origins wrap to int32 like every hash input
        x0 = to_int32_signed(int(chunk_x) * w)
        y0 = to_int32_signed(int(chunk_y) * h)
        xs = np.arange(w, dtype=np.int64) + x0
        ys = np.arange(h, dtype=np.int64) + y0
        return xs[np.newaxis, :], ys[:, np.newaxis]

    def generate(self, chunk_x: int = 0, chunk_y: int = 0) -> list[list[T]]:
        xs, ys = self.coords(chunk_x, chunk_y)
        shape = (self.config.height, self.config.width)

        # one sample per distinct source per chunk
        sampled: dict[LatticeSource, np.ndarray] = {}

        def values_for(c: Constraint) -> np.ndarray:
            src = c.source if c.source is not None else self.source
            if src not in sampled:
                sampled[src] = np.broadcast_to(src.sample(xs, ys), shape)
            return sampled[src]

        choice = np.full(shape, -1, dtype=np.int64)
        for i, tile in enumerate(self.tiles):
            ok = choice < 0
            for c in tile.constraints:
                ok &= c.satisfied_by(values_for(c))
            choice[ok] = i

        missing = np.argwhere(choice < 0)
        if missing.size:
            r, col = (int(v) for v in missing[0])
            value = float(self.source.sample(xs[0, col], ys[r, 0]))
            raise NoMatchingTileError(int(xs[0, col]), int(ys[r, 0]), value)

        log.debug("chunk (%d, %d): %dx%d cells, %d source(s)",
                  chunk_x, chunk_y, shape[1], shape[0], len(sampled))
        values = [t.value for t in self.tiles]
        return [[values[i] for i in row] for row in choice.tolist()]

    def render_ascii(self, chunk_x: int = 0, chunk_y: int = 0) -> str:
        return "\n".join("".join(str(v) for v in row) for row in self.generate(chunk_x, chunk_y))


def default_world(config: WorldConfig | None = None) -> World[str]:
    """Water / grass / mountains / hills."""
    return (
        World(config or WorldConfig())
        .add(Tile("~").when(Constraint.lt(-0.1)))
        .add(Tile(",").when(Constraint.lt(0.45)))
        .add(Tile("^").when(Constraint.gt(0.8)))
        .add(Tile("n"))
    )
