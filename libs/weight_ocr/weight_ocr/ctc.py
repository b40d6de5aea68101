# weight_ocr/libs/weight_ocr/weight_ocr/ctc.py
"""
Greedy CTC decoding of the recognizer output.

Class 0 is the blank; class i (i >= 1) is char_dict[i - 1]. Rows are
timesteps, columns are classes.

Some exported recognizers end with a softmax and some emit raw logits.
If every row already sums to 1 (within PROB_SUM_TOLERANCE) the argmax value
is used as the step confidence; otherwise only the argmax class probability
is recovered, as 1 / sum(exp(v - max)).
"""
from __future__ import annotations
from typing import Sequence, Union

import numpy as np

from .errors import OperatorContractError
from .models import DecodedText
from .operators import to_float_array
from .shapes import OutputShape, Shape2D, Shape3DBatch1, parse_output_shape


BLANK = 0
PROB_SUM_TOLERANCE = 0.05


def _step_confidences(logits: np.ndarray, best: np.ndarray) -> np.ndarray:
    rows = np.arange(logits.shape[0])
    max_vals = logits[rows, best]

    row_sums = logits.sum(axis=1)
    if np.all(np.abs(row_sums - 1.0) <= PROB_SUM_TOLERANCE):
        return max_vals

    denom = np.exp(logits - max_vals[:, None]).sum(axis=1)
    return np.divide(1.0, denom, out=np.zeros_like(denom), where=denom > 0)


def collapse(indices: Sequence[int], confs: Sequence[float]) -> list[tuple[int, float]]:
    """Merge consecutive repeats, then drop blanks."""
    kept: list[tuple[int, float]] = []
    prev = -1
    for idx, conf in zip(indices, confs):
        if idx != prev:
            kept.append((int(idx), float(conf)))
        prev = idx
    return [(idx, conf) for idx, conf in kept if idx != BLANK]


def ctc_greedy_decode(
    raw,
    shape: Union[OutputShape, Sequence[int]],
    char_dict: Sequence[str],
) -> DecodedText:
    if not isinstance(shape, (Shape2D, Shape3DBatch1)):
        shape = parse_output_shape(shape, "recognition")

    seq_len, num_classes = shape.rows, shape.cols
    if seq_len == 0 or num_classes == 0:
        return DecodedText()

    flat = to_float_array(raw)
    if flat.size < shape.size:
        raise OperatorContractError(
            "recognition",
            f"Recognition output holds {flat.size} values, shape needs {seq_len}x{num_classes}",
        )
    logits = flat[:shape.size].reshape(seq_len, num_classes).astype(np.float64)

    best = logits.argmax(axis=1)
    confs = _step_confidences(logits, best)

    chars: list[str] = []
    char_confs: list[float] = []
    for idx, conf in collapse(best.tolist(), confs.tolist()):
        # out-of-range classes are skipped
        if idx - 1 < len(char_dict):
            chars.append(char_dict[idx - 1])
            char_confs.append(conf)

    confidence = float(np.mean(char_confs)) if char_confs else 0.0
    return DecodedText(text="".join(chars), confidence=confidence)
