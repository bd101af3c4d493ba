from __future__ import annotations
from typing import Literal, Tuple, Union
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[Scalar, ScalarVector]
ColorValue = Union[ColorElement, ndarray]  # Includes array support
ColorSpace = Literal["rgb", "rgba"]
RGBA = Tuple[float, float, float, float]

RGB_CHANNELS = 3
RGBA_CHANNELS = 4
