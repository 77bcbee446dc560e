import re
from pathlib import Path

# Constants above 2**31 must not be built as int64 tensors: the hash keeps
# its intermediates in [0, 2**32) through masks and _mul32.
PAT = re.compile(r"torch\.tensor\(0x[0-9A-Fa-f]{9,}")

ROOT = Path(__file__).resolve().parents[1] / "packages"


def test_no_wide_hex_tensor_literals():
    offenders = []
    for p in ROOT.rglob("*.py"):
        txt = p.read_text(encoding="utf-8", errors="ignore")
        for m in PAT.finditer(txt):
            offenders.append((p, m.group(0)))
    assert not offenders, f"Keep hash constants as Python ints: {offenders}"


def test_torch_hash_products_use_mul32():
    src = (ROOT / "wgproc" / "src" / "wgproc" / "noise.py").read_text(encoding="utf-8")
    assert "n * n" not in src, "n*n can exceed int64; use _mul32(n, n)"
    assert "_mul32(n, t)" in src
