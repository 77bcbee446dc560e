from __future__ import annotations
from PIL import Image
import numpy as np

def to_u8(values) -> np.ndarray:
    """[-1, 1] -> uint8 [0, 255] (clipped)."""
    arr = np.asarray(values, dtype=np.float64)
    return np.round((np.clip(arr, -1.0, 1.0) + 1.0) * 127.5).astype(np.uint8)

def lattice_image(values, scale: int = 1) -> Image.Image:
    """2D value map -> grayscale image, each cell upscaled to `scale` x `scale` pixels."""
    u8 = to_u8(values)
    if u8.ndim != 2:
        raise ValueError(f"lattice_image expects a 2D map, got shape {u8.shape}")
    if scale > 1:
        u8 = np.kron(u8, np.ones((scale, scale), dtype=np.uint8))
    return Image.fromarray(u8)

def montage(u8_batch, cols: int) -> Image.Image:
    arr = np.asarray(u8_batch)
    B, _, H, W = arr.shape
    rows = (B + cols - 1) // cols
    canvas = np.zeros((rows * H, cols * W), dtype=np.uint8)
    for i in range(B):
        r, c = divmod(i, cols)
        canvas[r*H:(r+1)*H, c*W:(c+1)*W] = arr[i, 0]
    return Image.fromarray(canvas)
