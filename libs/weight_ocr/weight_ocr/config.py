# weight_ocr/libs/weight_ocr/weight_ocr/config.py
from __future__ import annotations
import os

from pydantic import BaseModel, Field

CONF_THRESHOLD_ENV = "WEIGHT_OCR_CONF_THRESHOLD"
IOU_THRESHOLD_ENV = "WEIGHT_OCR_IOU_THRESHOLD"


class PipelineSettings(BaseModel):
    conf_threshold: float = Field(default=0.25, ge=0.0, le=1.0, description="Detection confidence threshold")
    iou_threshold: float = Field(default=0.5, ge=0.0, le=1.0, description="Non-max suppression IoU threshold")
    combined_separator: str = " | "
    no_detection_marker: str = "(no detection)"


def get_settings() -> PipelineSettings:
    """Defaults, overridden by WEIGHT_OCR_* environment variables when set."""
    overrides: dict[str, float] = {}
    conf = os.getenv(CONF_THRESHOLD_ENV)
    if conf:
        overrides["conf_threshold"] = float(conf)
    iou = os.getenv(IOU_THRESHOLD_ENV)
    if iou:
        overrides["iou_threshold"] = float(iou)
    return PipelineSettings(**overrides)
