"""
rampforge color classes
=======================

Immutable RGB and RGBA colors in integer (0-255), unit float (0-1) and
percentage (0-100) formats. Instances clamp their channels on construction
and refuse attribute assignment afterwards.

>>> from rampforge.colors import RGB, ColorUnitRGBA
>>> orange = RGB((255, 128, 0))
>>> ColorUnitRGBA(orange).value
(1.0, 0.5019607843137255, 0.0, 1.0)
"""
from .color_base import ColorBase
from .rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
    RGB,
    RGBA,
)
from .color import (
    ColorInput,
    get_color_class,
    normalize_color_input,
    to_unit_rgba,
    rgb_tuple_to_class,
)

__all__ = [
    "ColorBase",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorPercentageRGB",
    "ColorPercentageRGBA",
    "RGB",
    "RGBA",
    "ColorInput",
    "get_color_class",
    "normalize_color_input",
    "to_unit_rgba",
    "rgb_tuple_to_class",
]
