from __future__ import annotations
import os

from .errors import MissingCudaError

ALLOW_CPU_ENV = "WG_ALLOW_CPU_TESTS"
_CHOICES = ("auto", "cpu", "cuda")


def cpu_allowed() -> bool:
    return os.getenv(ALLOW_CPU_ENV, "0") == "1"


def get_device(prefer: str = "auto", *, strict_gpu: bool = False):
    """Resolve a torch device.

    "cpu" and "cuda" are taken literally ("cuda" without a GPU raises
    MissingCudaError). "auto" picks CUDA when available, otherwise CPU,
    unless `strict_gpu` is set and WG_ALLOW_CPU_TESTS is not "1".
    """
    import torch

    if prefer not in _CHOICES:
        raise ValueError(f"device must be one of {_CHOICES}, got {prefer!r}")
    if prefer == "cpu":
        return torch.device("cpu")
    if torch.cuda.is_available():
        return torch.device("cuda")
    if prefer == "cuda":
        raise MissingCudaError("CUDA requested but no GPU is available")
    if strict_gpu and not cpu_allowed():
        raise MissingCudaError(f"CUDA GPU required (set {ALLOW_CPU_ENV}=1 to run on CPU)")
    return torch.device("cpu")
