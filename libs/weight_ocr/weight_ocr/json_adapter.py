# weight_ocr/libs/weight_ocr/weight_ocr/json_adapter.py
from __future__ import annotations

from .models import Box, InferenceResult, TextFragment
from .confidence import parse as parse_confidence


def to_json(result: InferenceResult) -> dict:
    return {
        "boxes": [
            {"x1": b.x1, "y1": b.y1, "x2": b.x2, "y2": b.y2, "conf": b.conf}
            for b in result.boxes
        ],
        "texts": [
            {"text": t.text, "det_conf": t.det_conf, "rec_conf": t.rec_conf}
            for t in result.texts
        ],
        "combined": result.combined,
        "value": result.value,
        "unit": result.unit,
        "rec_conf": result.rec_conf,
        "elapsed_ms": result.elapsed_ms,
    }


def from_json(payload: dict) -> InferenceResult:
    """Inverse of to_json; confidences may also be percent strings ("87%")."""
    payload = payload or {}
    boxes = [
        Box(
            x1=float(b["x1"]), y1=float(b["y1"]), x2=float(b["x2"]), y2=float(b["y2"]),
            conf=parse_confidence(b.get("conf")) or 0.0,
        )
        for b in payload.get("boxes") or []
    ]
    texts = [
        TextFragment(
            text=str(t.get("text", "")),
            det_conf=parse_confidence(t.get("det_conf")) or 0.0,
            rec_conf=parse_confidence(t.get("rec_conf")) or 0.0,
        )
        for t in payload.get("texts") or []
    ]
    return InferenceResult(
        boxes=boxes,
        texts=texts,
        combined=payload.get("combined", ""),
        value=payload.get("value"),
        unit=payload.get("unit"),
        rec_conf=parse_confidence(payload.get("rec_conf")) or 0.0,
        elapsed_ms=float(payload.get("elapsed_ms", 0.0)),
    )
