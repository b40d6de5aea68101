import math

import numpy as np
import pytest

from weight_ocr.ctc import collapse, ctc_greedy_decode
from weight_ocr.errors import UnsupportedShapeError


def _one_hot(classes, num_classes):
    out = np.zeros((len(classes), num_classes), dtype=np.float32)
    out[np.arange(len(classes)), classes] = 1.0
    return out

def test_collapse_merges_repeats_and_drops_blanks():
    kept = collapse([0, 0, 1, 1, 2, 0, 3, 3], [1.0] * 8)
    assert [idx for idx, _ in kept] == [1, 2, 3]

def test_decode_probabilities():
    probs = _one_hot([0, 0, 1, 1, 2, 0, 3, 3], 5)
    decoded = ctc_greedy_decode(probs.ravel(), (1, 8, 5), ["a", "b", "c", "d"])
    assert decoded.text == "abc"
    assert decoded.confidence == pytest.approx(1.0)

def test_repeat_split_by_blank_is_kept_twice():
    probs = _one_hot([1, 0, 1], 3)
    assert ctc_greedy_decode(probs, (3, 3), ["a", "b"]).text == "aa"

def test_confidence_is_argmax_value_for_probabilities():
    probs = np.array([[0.1, 0.8, 0.1], [0.3, 0.1, 0.6]], dtype=np.float32)
    decoded = ctc_greedy_decode(probs, (2, 3), ["x", "y"])
    assert decoded.text == "xy"
    assert decoded.confidence == pytest.approx((0.8 + 0.6) / 2)

def test_logits_use_argmax_softmax_mass():
    logits = np.array([[0.0, 2.0, 0.0]], dtype=np.float32)
    decoded = ctc_greedy_decode(logits, (1, 3), ["x", "y"])
    assert decoded.text == "x"
    assert decoded.confidence == pytest.approx(1 / (1 + 2 * math.exp(-2)))

def test_one_non_probability_row_switches_whole_sequence():
    rows = np.array([[0.1, 0.8, 0.1], [0.0, 0.0, 3.0]], dtype=np.float32)
    decoded = ctc_greedy_decode(rows, (2, 3), ["x", "y"])
    first = 1 / (2 * math.exp(-0.7) + 1)
    second = 1 / (2 * math.exp(-3) + 1)
    assert decoded.text == "xy"
    assert decoded.confidence == pytest.approx((first + second) / 2, rel=1e-5)

def test_out_of_range_class_is_skipped():
    probs = _one_hot([1, 4, 2], 5)
    assert ctc_greedy_decode(probs, (3, 5), ["a", "b"]).text == "ab"

def test_all_blank_is_empty():
    decoded = ctc_greedy_decode(_one_hot([0, 0, 0], 3), (3, 3), ["a", "b"])
    assert decoded.text == ""
    assert decoded.confidence == 0.0

def test_unsupported_shape():
    with pytest.raises(UnsupportedShapeError) as exc:
        ctc_greedy_decode(np.zeros(24), (2, 3, 4), ["a"])
    assert exc.value.operator == "recognition"
