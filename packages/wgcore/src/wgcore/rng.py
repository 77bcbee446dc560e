from __future__ import annotations

import numpy as np

_MASK32 = 0xFFFFFFFF
_MASK31 = 0x7FFFFFFF
_SIGNBIT = 1 << 31
_MOD32 = 1 << 32

# Value hash constants (2D lattice)
_PX = 157
_PY = 31337
_PSEED = 2633
_SHIFT = 13
_A = 15731
_B = 789221
_C = 1376312579
_NORM = 1073741824.0  # 2**30


def wrap32(v: int) -> int:
    """Reduce any Python int to its unsigned 32-bit two's-complement bits."""
    return v & _MASK32


def to_int32_signed(u: int) -> int:
    """Unsigned 32-bit -> signed int32 (two's complement)."""
    u &= _MASK32
    return u - _MOD32 if (u & _SIGNBIT) else u


def mix_lattice(x: int, y: int, seed: int) -> int:
    """Steps 1-2 of the value hash, returned as a signed int32.

    The left shift is not masked before the xor, so the result is negative
    whenever bit 31 ends up set.
    """
    n = (x * _PX + y * _PY + seed * _PSEED) & _MASK31
    return to_int32_signed((n << _SHIFT) ^ n)


def hash_lattice_int(x: int, y: int, seed: int) -> int:
    """Masked 31-bit hash of lattice point (x, y) for `seed`, in [0, 2**31 - 1]."""
    n = wrap32(mix_lattice(x, y, seed))
    # Only the low 31 bits survive the final mask, so exact big-int arithmetic
    # followed by the mask equals the 32-bit wraparound result.
    return (n * (n * n * _A + _B) + _C) & _MASK31


def generate_random_value(x: int, y: int, seed: int) -> float:
    """Deterministic pseudo-random value for lattice point (x, y).

    Arguments are interpreted modulo 2**32; any int is accepted. The result
    is ``1 - h / 2**30`` for the 31-bit hash ``h``, i.e. a float in
    (-1.0, 1.0].
    """
    return 1.0 - hash_lattice_int(x, y, seed) / _NORM


def _as_u32(a) -> np.ndarray:
    if isinstance(a, int):
        # Python ints are unbounded: reduce before the int64 conversion
        a &= _MASK32
    return (np.asarray(a, dtype=np.int64) & _MASK32).astype(np.uint32)


def hash_lattice_array(xs, ys, seed) -> np.ndarray:
    """Vectorised `generate_random_value` over broadcastable integer arrays.

    `seed` may be a scalar or an array broadcastable with `xs`/`ys`.
    Arithmetic runs on uint32 so every product wraps exactly like the
    scalar version. Returns float64.
    """
    x = _as_u32(xs)
    y = _as_u32(ys)
    s = _as_u32(seed)
    with np.errstate(over="ignore"):
        n = (x * np.uint32(_PX) + y * np.uint32(_PY) + s * np.uint32(_PSEED)) & np.uint32(_MASK31)
        n = (n << np.uint32(_SHIFT)) ^ n
        t = n * n * np.uint32(_A) + np.uint32(_B)
        h = (n * t + np.uint32(_C)) & np.uint32(_MASK31)
    return 1.0 - h.astype(np.float64) / _NORM
