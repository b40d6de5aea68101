# weight_ocr/libs/weight_ocr/weight_ocr/resample.py
from __future__ import annotations

import numpy as np


def _sample_grid(src_size: int, dst_size: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Half-pixel-center source coordinates for each destination index.

    Returns (lo, hi, weight); lo and hi are clamped into [0, src_size-1],
    weight is measured from the clamped lo.
    """
    f = (np.arange(dst_size, dtype=np.float64) + 0.5) * (src_size / dst_size) - 0.5
    lo = np.clip(np.floor(f), 0, src_size - 1).astype(np.intp)
    hi = np.clip(lo + 1, 0, src_size - 1)
    return lo, hi, f - lo


def resize_bilinear(src: np.ndarray, dst_w: int, dst_h: int) -> np.ndarray:
    """
    Bilinear resize of an (H, W, 3) uint8 image to (dst_h, dst_w, 3).

    Each channel is interpolated on its own, rounded half up and clamped
    to [0, 255]. A non-positive target size gives an empty (0, 0, 3) array.
    """
    if dst_w <= 0 or dst_h <= 0:
        return np.zeros((0, 0, 3), dtype=np.uint8)

    src = np.asarray(src, dtype=np.uint8)
    src_h, src_w = src.shape[:2]

    y0, y1, wy = _sample_grid(src_h, dst_h)
    x0, x1, wx = _sample_grid(src_w, dst_w)
    wy = wy[:, None, None]
    wx = wx[None, :, None]

    img = src.astype(np.float64)
    top_left = img[y0][:, x0]
    top_right = img[y0][:, x1]
    bot_left = img[y1][:, x0]
    bot_right = img[y1][:, x1]

    top = top_left + (top_right - top_left) * wx
    bottom = bot_left + (bot_right - bot_left) * wx
    value = top + (bottom - top) * wy

    return np.clip(np.floor(value + 0.5), 0, 255).astype(np.uint8)
