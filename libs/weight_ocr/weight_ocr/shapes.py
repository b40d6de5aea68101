# weight_ocr/libs/weight_ocr/weight_ocr/shapes.py
"""
Output shapes accepted from both operators.

Only two layouts are read: a plain matrix [rows, cols] and the same matrix
with a leading batch axis [1, rows, cols]. The shape is resolved once per
call; everything downstream only looks at rows/cols.
"""
from __future__ import annotations
from typing import Sequence, Union

from pydantic import BaseModel, ConfigDict

from .errors import UnsupportedShapeError


class _Matrix(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: int
    cols: int

    @property
    def size(self) -> int:
        return self.rows * self.cols


class Shape2D(_Matrix):
    """[rows, cols]"""


class Shape3DBatch1(_Matrix):
    """[1, rows, cols]"""


OutputShape = Union[Shape2D, Shape3DBatch1]


def parse_output_shape(dims: Sequence[int], operator: str) -> OutputShape:
    """Resolve a declared output shape, raising UnsupportedShapeError otherwise."""
    dims = [int(d) for d in dims]
    if len(dims) == 3 and dims[0] == 1:
        return Shape3DBatch1(rows=dims[1], cols=dims[2])
    if len(dims) == 2:
        return Shape2D(rows=dims[0], cols=dims[1])
    raise UnsupportedShapeError(operator, dims)
