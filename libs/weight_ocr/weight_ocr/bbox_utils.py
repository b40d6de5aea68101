# weight_ocr/libs/weight_ocr/weight_ocr/bbox_utils.py
from __future__ import annotations
import math
from typing import Sequence, Union

import numpy as np

from .models import Box

BoxLike = Union[Box, Sequence[float]]

IOU_EPS = 1e-6


def _xyxy(b: BoxLike) -> Sequence[float]:
    return b.to_list() if isinstance(b, Box) else b


def area(b: BoxLike) -> float:
    """Area in pixels (0 if degenerate)."""
    x1, y1, x2, y2 = _xyxy(b)
    return max(0.0, x2 - x1) * max(0.0, y2 - y1)


def intersection_area(a: BoxLike, b: BoxLike) -> float:
    """Overlap area (0 if the boxes do not touch)."""
    ax1, ay1, ax2, ay2 = _xyxy(a)
    bx1, by1, bx2, by2 = _xyxy(b)
    w = max(0.0, min(ax2, bx2) - max(ax1, bx1))
    h = max(0.0, min(ay2, by2) - max(ay1, by1))
    return w * h


def iou(a: BoxLike, b: BoxLike) -> float:
    """Intersection-over-Union, with a small epsilon in the denominator."""
    inter = intersection_area(a, b)
    return inter / (area(a) + area(b) - inter + IOU_EPS)


def nms(boxes: Sequence[Sequence[float]], scores: Sequence[float], iou_threshold: float) -> list[int]:
    """
    Greedy non-maximum suppression.

    Returns indices of kept boxes, highest score first. A box whose IoU with
    a kept box is exactly iou_threshold survives.
    """
    if len(boxes) == 0:
        return []

    # stable: equal scores keep their input order
    order = list(np.argsort(-np.asarray(scores, dtype=np.float64), kind="stable"))
    keep: list[int] = []
    while order:
        current = int(order[0])
        keep.append(current)
        order = [i for i in order[1:] if iou(boxes[current], boxes[i]) <= iou_threshold]
    return keep


def cxcywh_to_xyxy(cx: float, cy: float, w: float, h: float) -> list[float]:
    return [cx - w / 2, cy - h / 2, cx + w / 2, cy + h / 2]


def round_half_up(v: float) -> int:
    return math.floor(v + 0.5)


def unletterbox(
    xyxy: Sequence[float],
    scale: float,
    pad_w: int,
    pad_h: int,
    width: int,
    height: int,
) -> list[float]:
    """
    Map a box from letterboxed input space back to source pixels.

    Coordinates are rounded and clamped into [0, width] x [0, height];
    the result may be degenerate.
    """
    x1, y1, x2, y2 = xyxy

    def _x(v: float) -> float:
        return float(min(max(round_half_up((v - pad_w) / scale), 0), width))

    def _y(v: float) -> float:
        return float(min(max(round_half_up((v - pad_h) / scale), 0), height))

    return [_x(x1), _y(y1), _x(x2), _y(y2)]
