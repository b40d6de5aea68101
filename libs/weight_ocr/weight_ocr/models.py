# weight_ocr/libs/weight_ocr/weight_ocr/models.py
from __future__ import annotations
import base64
from typing import Iterable

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator


class RgbImage(BaseModel):
    """
    Packed 8-bit RGB image.

    data is row-major, channel order R,G,B, no row padding, so
    len(data) == width * height * 3.
    """
    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    data: bytes = Field(..., repr=False)

    @model_validator(mode="after")
    def _validate_size(self) -> "RgbImage":
        expected = self.width * self.height * 3
        if len(self.data) != expected:
            raise ValueError(
                f"RGB buffer holds {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height}"
            )
        return self

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "RgbImage":
        """Build from an (H, W, 3) uint8 array."""
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"expected an (H, W, 3) array, got shape {arr.shape}")
        arr = np.ascontiguousarray(arr, dtype=np.uint8)
        return cls(width=int(arr.shape[1]), height=int(arr.shape[0]), data=arr.tobytes())

    @classmethod
    def from_base64(cls, payload: str, width: int, height: int) -> "RgbImage":
        """Packed RGB as handed over by the native image decoder."""
        return cls(width=width, height=height, data=base64.b64decode(payload))

    def to_array(self) -> np.ndarray:
        """Read-only (H, W, 3) uint8 view over data."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 3)


class Box(BaseModel):
    """
    Axis-aligned detection box in source-image pixel coords.

    (x1, y1) ----
       |        |
       |        |
       ---- (x2, y2)

    Degenerate boxes are dropped upstream, so x2 > x1 and y2 > y1 always hold.
    """
    x1: float = Field(..., description="Left")
    y1: float = Field(..., description="Top")
    x2: float = Field(..., description="Right")
    y2: float = Field(..., description="Bottom")
    conf: float = Field(default=0.0, description="Detection confidence")

    @model_validator(mode="after")
    def _validate_order(self) -> "Box":
        if self.x2 <= self.x1 or self.y2 <= self.y1:
            raise ValueError(f"degenerate box {self.to_list()}")
        return self

    @classmethod
    def from_list(cls, xyxy: Iterable[float], conf: float = 0.0) -> "Box":
        x1, y1, x2, y2 = list(xyxy)
        return cls(x1=x1, y1=y1, x2=x2, y2=y2, conf=conf)

    def width(self) -> float:
        return self.x2 - self.x1

    def height(self) -> float:
        return self.y2 - self.y1

    def to_list(self) -> list[float]:
        return [self.x1, self.y1, self.x2, self.y2]


class TextFragment(BaseModel):
    """Text read from one detection box."""
    text: str
    det_conf: float
    rec_conf: float = Field(default=0.0, description="Mean per-character probability")


class DecodedText(BaseModel):
    text: str = ""
    confidence: float = 0.0


class WeightReading(BaseModel):
    """Parsed reading; both fields are None when no number was found."""
    value: str | None = None
    unit: str | None = None


class InferenceResult(BaseModel):
    boxes: list[Box] = Field(default_factory=list)
    texts: list[TextFragment] = Field(default_factory=list)
    combined: str
    value: str | None = None
    unit: str | None = None
    rec_conf: float = 0.0
    elapsed_ms: float = 0.0

    def same_reading(self, other: "InferenceResult") -> bool:
        """Equal in everything but elapsed time."""
        skip = {"elapsed_ms"}
        return self.model_dump(exclude=skip) == other.model_dump(exclude=skip)


class DetectionInput(BaseModel):
    """
    Letterboxed detector input plus what is needed to map boxes back.

    tensor is (S, S, 3) float32 in [0, 1].
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    tensor: np.ndarray
    scale: float
    pad_w: int
    pad_h: int


class TensorSpec(BaseModel):
    """Declared input/output tensor of an operator."""
    name: str = ""
    shape: tuple[int, ...]
