from __future__ import annotations
import torch
from wgcore.device import get_device

def cell_index(n: int, cells: torch.Tensor, *, device=None) -> torch.Tensor:
    """Index de cellule lattice pour chaque pixel d'un axe de longueur `n`.

    cells: [B,1] int64 -> [B,n] int64, pixel k -> k*cells // n (exact, sans float).
    """
    if device is None:
        device = get_device()
    k = torch.arange(n, device=device, dtype=torch.int64).unsqueeze(0)
    return torch.div(k * cells.to(torch.int64), n, rounding_mode="floor")
