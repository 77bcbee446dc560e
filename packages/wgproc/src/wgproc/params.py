from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import torch

from .api import GeneratorInfo, ParamDict, ParamSpec
from wgcore.errors import InvalidParamsError

_NUMERIC = ("float", "int")


@dataclass
class ParamCodec:
    """Dict de paramètres <-> vecteur tensorisé, dans l'ordre de `param_specs`."""

    info: GeneratorInfo

    def _specs(self) -> dict[str, ParamSpec]:
        return {p.name: p for p in self.info.param_specs}

    def validate(self, params: ParamDict) -> None:
        specs = self._specs()
        for k, v in params.items():
            p = specs.get(k)
            if p is None:
                raise InvalidParamsError(f"Unknown param '{k}' for {self.info.name}")
            if p.type in _NUMERIC:
                x = float(v)
                if p.type == "int" and not x.is_integer():
                    raise InvalidParamsError(f"{k}={v!r} is not an integer")
                if p.range is not None:
                    lo, hi = p.range
                    if not (float(lo) <= x <= float(hi)):
                        raise InvalidParamsError(f"{k}={x} not in [{lo}, {hi}]")
            elif p.type == "bool":
                bool(v)
            else:
                raise InvalidParamsError(f"Unsupported param type '{p.type}' for {k}")

        missing = [p.name for p in self.info.param_specs if p.name not in params]
        if missing:
            raise InvalidParamsError(f"Missing required param(s) {missing} for {self.info.name}")

    def to_tensor(self, params: ParamDict, device, dtype) -> torch.Tensor:
        """Encode dict -> [P] ; int -> valeur entière, bool -> 1.0 / 0.0."""
        self.validate(params)
        vec: list[float] = []
        for p in self.info.param_specs:
            v = params[p.name]
            if p.type == "bool":
                vec.append(1.0 if bool(v) else 0.0)
            elif p.type == "int":
                vec.append(float(int(v)))
            else:
                vec.append(float(v))
        return torch.tensor(vec, device=device, dtype=dtype)

    def from_tensor(self, vec: torch.Tensor) -> ParamDict:
        """Decode [P] -> dict (int arrondi, bool seuil 0.5)."""
        out: dict[str, Any] = {}
        for i, p in enumerate(self.info.param_specs):
            x = float(vec[i].item())
            if p.type == "int":
                out[p.name] = int(round(x))
            elif p.type == "bool":
                out[p.name] = x >= 0.5
            else:
                out[p.name] = x
        return out

    def mid(self) -> ParamDict:
        """Point milieu des plages (ints arrondis, bools à False)."""
        out: dict[str, Any] = {}
        for p in self.info.param_specs:
            if p.type in _NUMERIC and p.range is not None:
                lo, hi = p.range
                x = (float(lo) + float(hi)) / 2.0
                out[p.name] = int(round(x)) if p.type == "int" else x
            elif p.type == "bool":
                out[p.name] = False
            else:
                out[p.name] = 0.0
        return out

    def grid(self) -> list[ParamDict]:
        """Grille coarse: point milieu puis bornes basses. Utile pour les smoke tests."""
        mid = self.mid()
        low = dict(mid)
        for p in self.info.param_specs:
            if p.type in _NUMERIC and p.range is not None:
                lo = p.range[0]
                low[p.name] = int(lo) if p.type == "int" else float(lo)
        return [mid, low]
