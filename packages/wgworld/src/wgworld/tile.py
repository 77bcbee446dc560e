from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

import numpy as np

T = TypeVar("T")

_KINDS = ("lt", "gt")


@dataclass(frozen=True)
class Constraint:
    """Strict threshold on a lattice value.

    `source` overrides the world's lattice source for this constraint only
    (e.g. a second seed acting as a moisture layer).
    """

    kind: str
    threshold: float
    source: Any = None  # LatticeSource | None

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"Constraint.kind must be one of {_KINDS}, got {self.kind!r}")

    @classmethod
    def lt(cls, threshold: float, source=None) -> "Constraint":
        return cls("lt", float(threshold), source)

    @classmethod
    def gt(cls, threshold: float, source=None) -> "Constraint":
        return cls("gt", float(threshold), source)

    def satisfied_by(self, values: np.ndarray) -> np.ndarray:
        if self.kind == "lt":
            return values < self.threshold
        return values > self.threshold


@dataclass(frozen=True)
class Tile(Generic[T]):
    value: T
    constraints: tuple[Constraint, ...] = ()

    def when(self, constraint: Constraint) -> "Tile[T]":
        return replace(self, constraints=self.constraints + (constraint,))
