# weight_ocr/libs/weight_ocr/weight_ocr/operators.py
"""
Boundary to the externally executed models.

The pipeline never runs a network itself. It reads the declared shapes of an
operator's first input and first output, hands it one float32 tensor and
reads back the first returned output as a flat float array.
"""
from __future__ import annotations
from typing import Any, Callable, Protocol, Sequence

import numpy as np

from .models import TensorSpec


class TensorDescriptor(Protocol):
    shape: Sequence[int]


class Operator(Protocol):
    inputs: Sequence[TensorDescriptor]
    outputs: Sequence[TensorDescriptor]

    def run(self, inputs: list[np.ndarray]) -> Sequence[Any]:
        ...


class CallableOperator:
    """
    Wrap a plain function as an operator.

    fn receives the input tensor and returns one output array, a list of
    outputs, or None (treated as "no outputs").
    """
    def __init__(
        self,
        fn: Callable[[np.ndarray], Any],
        input_shape: Sequence[int],
        output_shape: Sequence[int],
        name: str = "",
    ):
        self._fn = fn
        self.inputs = [TensorSpec(name=f"{name}_input" if name else "input", shape=tuple(input_shape))]
        self.outputs = [TensorSpec(name=f"{name}_output" if name else "output", shape=tuple(output_shape))]
        self.calls = 0

    def run(self, inputs: list[np.ndarray]) -> list[Any]:
        self.calls += 1
        out = self._fn(inputs[0])
        if out is None:
            return []
        if isinstance(out, (list, tuple)):
            return list(out)
        return [out]


def to_float_array(raw: Any) -> np.ndarray:
    """Flat float32 view of an operator output (copies only when needed)."""
    return np.asarray(raw, dtype=np.float32).reshape(-1)
