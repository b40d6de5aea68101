# weight_ocr/libs/weight_ocr/weight_ocr/recognition.py
from __future__ import annotations
import math

import numpy as np

from .models import RgbImage
from .resample import resize_bilinear

PAD_VALUE = -1.0


def preprocess_recognition(crop: RgbImage, target_h: int, target_w: int) -> np.ndarray:
    """
    (target_h, target_w, 3) float32 recognizer input in [-1, 1].

    The crop is scaled to target_h keeping its aspect ratio, left-aligned and
    padded with -1 on the right. Width is capped at target_w, so anything
    wider is squeezed rather than split.
    """
    ratio = target_h / crop.height
    new_w = max(1, min(math.floor(crop.width * ratio), target_w))

    resized = resize_bilinear(crop.to_array(), new_w, target_h)

    tensor = np.full((target_h, target_w, 3), PAD_VALUE, dtype=np.float32)
    tensor[:, :new_w] = (resized / 127.5 - 1.0).astype(np.float32)
    return tensor
