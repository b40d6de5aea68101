# weight_ocr/libs/weight_ocr/weight_ocr/detection.py
"""
Detector input/output handling.

Preprocessing letterboxes the image into the square S x S input the
detector expects. Postprocessing decodes the raw candidate matrix, which
comes in one of several YOLO-style layouts:

  - [N, 5+] one row per candidate, or [4+k, N] one column per candidate
    (any matrix with <= 6 rows is read as the latter)
  - single score at attribute 4, or per-class scores at 4.. (max is taken)
  - box coords normalized to [0, 1] or in input pixels (all surviving
    coords <= 2.0 means normalized)
"""
from __future__ import annotations
import logging
import math
from typing import Sequence, Union

import numpy as np

from .bbox_utils import cxcywh_to_xyxy, nms, unletterbox
from .errors import OperatorContractError
from .models import Box, DetectionInput, RgbImage
from .operators import to_float_array
from .resample import resize_bilinear
from .shapes import OutputShape, Shape2D, Shape3DBatch1, parse_output_shape

log = logging.getLogger("weight_ocr.detection")

PAD_VALUE = 114 / 255
TRANSPOSED_MAX_ROWS = 6
NORMALIZED_MAX_COORD = 2.0
SCORE_INDEX = 4


def preprocess_detection(image: RgbImage, input_size: int) -> DetectionInput:
    """Aspect-preserving resize into a gray-padded input_size square, scaled to [0, 1]."""
    scale = min(input_size / image.width, input_size / image.height)
    new_w = max(1, math.floor(image.width * scale))
    new_h = max(1, math.floor(image.height * scale))

    resized = resize_bilinear(image.to_array(), new_w, new_h)

    # any odd remainder goes to the bottom/right
    pad_w = (input_size - new_w) // 2
    pad_h = (input_size - new_h) // 2

    tensor = np.full((input_size, input_size, 3), PAD_VALUE, dtype=np.float32)
    tensor[pad_h:pad_h + new_h, pad_w:pad_w + new_w] = (resized / 255.0).astype(np.float32)

    return DetectionInput(tensor=tensor, scale=scale, pad_w=pad_w, pad_h=pad_h)


def _candidate_matrix(raw, shape: OutputShape) -> np.ndarray:
    """(num_candidates, num_attributes) float64 view of the raw output."""
    flat = to_float_array(raw)
    if flat.size < shape.size:
        raise OperatorContractError(
            "detection",
            f"Detection output holds {flat.size} values, shape needs {shape.rows}x{shape.cols}",
        )
    matrix = flat[:shape.size].reshape(shape.rows, shape.cols).astype(np.float64)
    if shape.rows <= TRANSPOSED_MAX_ROWS:
        matrix = matrix.T
    if matrix.shape[1] <= SCORE_INDEX:
        raise OperatorContractError(
            "detection",
            f"Detection output has {matrix.shape[1]} attributes per candidate, expected at least 5",
        )
    return matrix


def postprocess_detection(
    raw,
    shape: Union[OutputShape, Sequence[int]],
    image: RgbImage,
    prep: DetectionInput,
    input_size: int,
    conf_threshold: float,
    iou_threshold: float,
) -> list[Box]:
    """
    Decode raw detector output into boxes in source-image pixels.

    Boxes come back in NMS order (highest confidence first); boxes that
    collapse after mapping back and clamping are dropped.
    """
    if not isinstance(shape, (Shape2D, Shape3DBatch1)):
        shape = parse_output_shape(shape, "detection")

    preds = _candidate_matrix(raw, shape)

    if preds.shape[1] > SCORE_INDEX + 1:
        scores = preds[:, SCORE_INDEX:].max(axis=1)
    else:
        scores = preds[:, SCORE_INDEX]

    passing = scores > conf_threshold
    coords = preds[passing, :4]
    scores = scores[passing]
    log.debug("detection: %d candidates, %d above %.2f", preds.shape[0], len(scores), conf_threshold)
    if len(scores) == 0:
        return []

    coord_scale = input_size if max(0.0, float(coords.max())) <= NORMALIZED_MAX_COORD else 1.0
    xyxy = [cxcywh_to_xyxy(*(c * coord_scale)) for c in coords]

    results: list[Box] = []
    for index in nms(xyxy, scores, iou_threshold):
        x1, y1, x2, y2 = unletterbox(
            xyxy[index], prep.scale, prep.pad_w, prep.pad_h, image.width, image.height
        )
        if x2 <= x1 or y2 <= y1:
            continue
        results.append(Box(x1=x1, y1=y1, x2=x2, y2=y2, conf=float(scores[index])))
    return results
