# weight_ocr/libs/weight_ocr/weight_ocr/pipeline.py
"""
One image in, one InferenceResult out.

  detect -> boxes -> for each box, in order: crop -> recognize -> decode
  -> join fragments -> parse the weight reading

Missing or malformed operator descriptors abort the call. A box that crops
to nothing, or a recognizer call that returns no outputs, only loses that
box's fragment.
"""
from __future__ import annotations
import logging
import time
from typing import Sequence

import numpy as np

from .config import PipelineSettings, get_settings
from .crop import crop_rgb
from .ctc import ctc_greedy_decode
from .detection import postprocess_detection, preprocess_detection
from .errors import OperatorContractError
from .models import Box, InferenceResult, RgbImage, TextFragment
from .operators import Operator
from .reading import parse_weight
from .recognition import preprocess_recognition
from .shapes import OutputShape, parse_output_shape

log = logging.getLogger("weight_ocr.pipeline")


def _describe(operator: Operator, role: str) -> tuple[list[int], OutputShape]:
    """Declared input shape (NHWC, rank >= 3) and resolved output shape."""
    if not operator.inputs or not operator.outputs:
        raise OperatorContractError(role, f"{role.capitalize()} model input/output tensors are missing.")
    input_shape = [int(d) for d in operator.inputs[0].shape]
    if len(input_shape) < 3:
        dims = ", ".join(str(d) for d in input_shape)
        raise OperatorContractError(role, f"Unexpected {role} input shape: [{dims}] (expected [1, H, W, 3])")
    return input_shape, parse_output_shape(operator.outputs[0].shape, role)


def _recognize_box(
    image: RgbImage,
    box: Box,
    rec_operator: Operator,
    target_h: int,
    target_w: int,
    output_shape: OutputShape,
    char_dict: Sequence[str],
) -> TextFragment | None:
    crop = crop_rgb(image, box)
    if crop is None:
        log.debug("skip box %s: empty crop", box.to_list())
        return None

    tensor = preprocess_recognition(crop, target_h, target_w)
    outputs = rec_operator.run([tensor[np.newaxis]])
    if len(outputs) == 0:
        log.debug("skip box %s: recognizer returned no outputs", box.to_list())
        return None

    decoded = ctc_greedy_decode(outputs[0], output_shape, char_dict)
    return TextFragment(text=decoded.text, det_conf=box.conf, rec_conf=decoded.confidence)


def run_inference(
    image: RgbImage,
    det_operator: Operator,
    rec_operator: Operator,
    char_dict: Sequence[str],
    conf_threshold: float | None = None,
    iou_threshold: float | None = None,
    settings: PipelineSettings | None = None,
) -> InferenceResult:
    """
    Run detection and recognition over image and parse the reading.

    Explicit thresholds win over settings; settings default to get_settings().
    Operators are invoked sequentially: once for detection, then once per
    surviving box in box order.
    """
    started = time.perf_counter()
    settings = settings or get_settings()
    if conf_threshold is None:
        conf_threshold = settings.conf_threshold
    if iou_threshold is None:
        iou_threshold = settings.iou_threshold

    det_input_shape, det_output_shape = _describe(det_operator, "detection")
    rec_input_shape, rec_output_shape = _describe(rec_operator, "recognition")
    input_size = det_input_shape[1]
    rec_h, rec_w = rec_input_shape[1], rec_input_shape[2]
    log.debug(
        "det input %s output %s, rec input %s output %s",
        det_input_shape, det_output_shape, rec_input_shape, rec_output_shape,
    )

    prep = preprocess_detection(image, input_size)
    det_outputs = det_operator.run([prep.tensor[np.newaxis]])
    if len(det_outputs) == 0:
        raise OperatorContractError("detection", "Detection model returned no outputs.")

    boxes = postprocess_detection(
        det_outputs[0], det_output_shape, image, prep, input_size, conf_threshold, iou_threshold
    )

    texts: list[TextFragment] = []
    for box in boxes:
        fragment = _recognize_box(image, box, rec_operator, rec_h, rec_w, rec_output_shape, char_dict)
        if fragment is not None:
            texts.append(fragment)

    if texts:
        combined = settings.combined_separator.join(t.text for t in texts)
        reading = parse_weight(combined)
    else:
        combined = settings.no_detection_marker
        reading = None

    result = InferenceResult(
        boxes=boxes,
        texts=texts,
        combined=combined,
        value=reading.value if reading else None,
        unit=reading.unit if reading else None,
        rec_conf=max((t.rec_conf for t in texts), default=0.0),
        elapsed_ms=(time.perf_counter() - started) * 1000.0,
    )
    log.info(
        "inference: %d boxes, %d fragments, combined=%r in %.1f ms",
        len(boxes), len(texts), combined, result.elapsed_ms,
    )
    return result
