from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class, ColorUnitRGBA
from ..types.format_type import FormatType
from ..types.color_types import ColorElement, RGBA, RGB_CHANNELS, RGBA_CHANNELS

ColorInput = Union[ColorElement, ColorBase, np.ndarray]


def get_color_class(color_space: str, format_type: FormatType = FormatType.FLOAT) -> type[ColorBase]:
    """Look up the color class registered for a (space, format) pair."""
    key = (color_space.lower(), FormatType(format_type))
    if key not in rgb_tuple_to_class:
        raise ValueError(f"Unsupported color space/format combination: {key}")
    return rgb_tuple_to_class[key]


def normalize_color_input(color_input: ColorInput) -> Tuple:
    if isinstance(color_input, ColorBase):
        if color_input.is_array:
            raise ValueError("Expected a single color, got an array-valued color.")
        return tuple(color_input.value)  # type: ignore[arg-type]
    if isinstance(color_input, np.ndarray):
        if color_input.ndim != 1:
            raise ValueError("Input array must be 1-dimensional.")
        return tuple(color_input.tolist())
    if isinstance(color_input, (tuple, list)):
        return tuple(color_input)
    raise TypeError(f"Unsupported color input type: {type(color_input).__name__}")


def to_unit_rgba(color: ColorInput, format_type: FormatType = FormatType.FLOAT) -> RGBA:
    """
    Convert a single color to a unit-float RGBA tuple.

    Args:
        color: ColorBase instance, or a 3/4-channel tuple, list or 1D array
        format_type: Format of raw (non-ColorBase) input channels

    Returns:
        (r, g, b, a) floats clamped to [0, 1]; alpha is 1.0 for RGB input
    """
    if isinstance(color, ColorBase):
        source = color
    else:
        channels = normalize_color_input(color)
        if len(channels) not in (RGB_CHANNELS, RGBA_CHANNELS):
            raise ValueError(f"Expected 3 or 4 color channels, got {len(channels)}")
        space = "rgba" if len(channels) == RGBA_CHANNELS else "rgb"
        source = get_color_class(space, format_type)(channels)
    unit = ColorUnitRGBA(source)
    return tuple(float(v) for v in unit.value)  # type: ignore[return-value]
