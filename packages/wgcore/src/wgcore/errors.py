from __future__ import annotations


class WorldgenError(Exception):
    """Base class for worldgen errors."""


class MissingCudaError(WorldgenError):
    pass


class UnknownGeneratorError(WorldgenError, KeyError):
    pass


class InvalidParamsError(WorldgenError, ValueError):
    pass


class NoMatchingTileError(WorldgenError):
    """Raised when a lattice cell satisfies no tile of a world."""

    def __init__(self, x: int, y: int, value: float | None = None):
        self.x = x
        self.y = y
        self.value = value
        msg = f"No tile matches lattice cell ({x}, {y})"
        if value is not None:
            msg += f" (value={value:.6f})"
        super().__init__(msg)


class OutputWriteError(WorldgenError):
    """Raised when an artifact cannot be written to disk."""
