# weight_ocr/libs/weight_ocr/weight_ocr/crop.py
from __future__ import annotations
import math

import numpy as np

from .models import Box, RgbImage


def crop_rgb(image: RgbImage, box: Box) -> RgbImage | None:
    """
    Copy the pixels under box into a new image.

    Corners are floored and clamped into the image; returns None when
    nothing is left.
    """
    x1 = min(max(math.floor(box.x1), 0), image.width)
    y1 = min(max(math.floor(box.y1), 0), image.height)
    x2 = min(max(math.floor(box.x2), 0), image.width)
    y2 = min(max(math.floor(box.y2), 0), image.height)

    if x2 - x1 <= 0 or y2 - y1 <= 0:
        return None

    region = np.ascontiguousarray(image.to_array()[y1:y2, x1:x2])
    return RgbImage.from_array(region)
