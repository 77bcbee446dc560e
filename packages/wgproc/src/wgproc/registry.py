from __future__ import annotations
from .api import Generator, GeneratorInfo
from wgcore.errors import UnknownGeneratorError

_REG: dict[str, Generator] = {}

def register(gen: Generator) -> None:
    _REG[gen.info.name] = gen

def get(name: str) -> Generator:
    try:
        return _REG[name]
    except KeyError as exc:
        raise UnknownGeneratorError(f"Unknown generator: {name}") from exc

def list_generators() -> list[GeneratorInfo]:
    return [g.info for g in _REG.values()]
