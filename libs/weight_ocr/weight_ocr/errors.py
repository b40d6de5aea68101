# weight_ocr/libs/weight_ocr/weight_ocr/errors.py
from __future__ import annotations


class PipelineError(Exception):
    """Base class for errors that abort an inference call."""


class OperatorContractError(PipelineError, ValueError):
    """
    An operator's descriptors or outputs do not match what the pipeline reads.

    operator is "detection" or "recognition".
    """
    def __init__(self, operator: str, message: str):
        self.operator = operator
        super().__init__(message)


class UnsupportedShapeError(OperatorContractError):
    """Output tensor rank is neither [rows, cols] nor [1, rows, cols]."""
    def __init__(self, operator: str, shape):
        self.shape = tuple(shape)
        dims = ", ".join(str(d) for d in self.shape)
        super().__init__(
            operator,
            f"Unsupported {operator} output shape: [{dims}] "
            f"(expected [rows, cols] or [1, rows, cols])",
        )
