from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Protocol
import torch

ParamDict = dict[str, Any]

@dataclass(frozen=True)
class ParamSpec:
    name: str
    type: str
    range: tuple[float, float] | None = None
    units: str | None = None
    quant: float | None = None

@dataclass(frozen=True)
class GeneratorInfo:
    name: str
    param_specs: tuple[ParamSpec, ...]
    deterministic: bool = True

class Generator(Protocol):
    @property
    def info(self) -> GeneratorInfo: ...
    def render(
        self,
        tiles_hw: tuple[int, int],
        params: torch.Tensor,
        seeds: torch.Tensor,
        *,
        device: torch.device,
        dtype: torch.dtype,
    ) -> torch.Tensor: ...
