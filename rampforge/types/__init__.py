from .format_type import FormatType, channel_maxima
from .color_types import ColorValue, ColorSpace, RGBA

__all__ = [
    "FormatType",
    "channel_maxima",
    "ColorValue",
    "ColorSpace",
    "RGBA",
]
