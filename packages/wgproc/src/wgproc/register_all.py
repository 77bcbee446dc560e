from __future__ import annotations
from .discovery import register_from_package

def register_all(verbose: bool = False) -> list[str]:
    return register_from_package("wgproc.generators", verbose=verbose)
