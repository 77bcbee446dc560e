from __future__ import annotations
import torch
from ..api import Generator, GeneratorInfo, ParamSpec
from ..noise import lattice_value
from ..utils import cell_index

class ValueLattice(Generator):
    """Blocky lattice tile: each lattice cell holds its raw hash value, no interpolation.

    Origins are decoded with round(); pass float32 or float64 params so large
    origins stay exact.
    """
    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name="VALUE_LATTICE",
            param_specs=(
                ParamSpec("cells", "int", (1, 256), "per tile", 1.0),
                ParamSpec("origin_x", "int", (-1_000_000, 1_000_000), "cells", 1.0),
                ParamSpec("origin_y", "int", (-1_000_000, 1_000_000), "cells", 1.0),
            ),
        )
    @torch.no_grad()
    def render(self, tiles_hw, params, seeds, *, device, dtype):
        B = params.shape[0]; h, w = tiles_hw
        p = params.to(device=device, dtype=torch.float64).round().to(torch.int64)
        cells = p[:, 0:1].clamp(min=1)
        ox = p[:, 1:2]; oy = p[:, 2:3]
        ix = (cell_index(w, cells, device=device) + ox).view(B, 1, w)
        iy = (cell_index(h, cells, device=device) + oy).view(B, h, 1)
        seed = seeds.view(B, 1, 1).to(device=device, dtype=torch.int64)
        v = lattice_value(ix, iy, seed, dtype=dtype)  # [B,h,w]
        return v.unsqueeze(1)

GEN = ValueLattice()
