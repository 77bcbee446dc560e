from __future__ import annotations
import os
from pathlib import Path

from wgcore.errors import OutputWriteError

def atomic_write(path: Path | str, data: bytes) -> None:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {path}: {exc}") from exc

def chunk_name(seed: int, chunk_x: int, chunk_y: int, width: int, height: int, ext: str = "png") -> str:
    return f"lattice__s{seed}__c{chunk_x}_{chunk_y}__{width}x{height}.{ext}"
