from __future__ import annotations

import torch

# ---------------------------------------------------------------------
# Arithmétique 32 bits sur tenseurs int64 (valeurs gardées dans [0, 2**32))
# ---------------------------------------------------------------------

_MASK32 = 0xFFFFFFFF
_MASK31 = 0x7FFFFFFF
_MASK16 = 0xFFFF
_NORM = 1073741824.0  # 2**30


def _u32(t: torch.Tensor | int, device=None) -> torch.Tensor:
    if not isinstance(t, torch.Tensor):
        # masque avant conversion: un int Python peut dépasser int64
        t = torch.tensor(int(t) & _MASK32, dtype=torch.int64, device=device)
    return t.to(torch.int64) & _MASK32


def _mul32(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """(a * b) mod 2**32 pour a, b dans [0, 2**32), sans dépasser 2**63.

    b est coupé en deux moitiés de 16 bits: chaque produit partiel reste < 2**48.
    """
    lo = a * (b & _MASK16)
    hi = ((a * (b >> 16)) & _MASK16) << 16
    return (lo + hi) & _MASK32


@torch.no_grad()
def value_hash2d(ix: torch.Tensor, iy: torch.Tensor, seed: torch.Tensor | int) -> torch.Tensor:
    """Hash 2D (ix, iy) + seed -> int64 dans [0, 2**31 - 1] (vectorisé).

    Même résultat, bit à bit, que `wgcore.rng.hash_lattice_int`.
    """
    x = _u32(ix)
    y = _u32(iy, device=x.device)
    s = _u32(seed, device=x.device)

    n = (x * 157 + y * 31337 + s * 2633) & _MASK31
    n = ((n << 13) & _MASK32) ^ n
    t = (_mul32(n, n) * 15731 + 789221) & _MASK32
    return (_mul32(n, t) + 1376312579) & _MASK31


@torch.no_grad()
def lattice_value(
    ix: torch.Tensor,
    iy: torch.Tensor,
    seed: torch.Tensor | int,
    *,
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    """Valeur de lattice calculée en float64 dans (-1, 1], puis castée en `dtype`.

    Après le cast (float32/float16), l'arrondi peut donner exactement -1:
    la plage garantie est [-1, 1].
    """
    if dtype is None:
        dtype = torch.float32
    h = value_hash2d(ix, iy, seed)
    out = 1.0 - h.to(torch.float64) / _NORM
    return out.to(dtype=dtype)
