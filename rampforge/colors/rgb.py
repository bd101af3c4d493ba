from typing import ClassVar
from ..types.format_type import FormatType, channel_maxima
from ..types.color_types import RGB_CHANNELS, RGBA_CHANNELS
from .color_base import ColorBase, build_registry


class _RGBColor(ColorBase):
    """Mode and per-channel maxima follow from num_channels and format_type."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.mode = "rgba" if cls.num_channels == RGBA_CHANNELS else "rgb"
        cls.maxima = (channel_maxima[cls.format_type],) * cls.num_channels


class ColorRGBINT(_RGBColor):
    num_channels: ClassVar[int] = RGB_CHANNELS
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorRGBAINT(_RGBColor):
    num_channels: ClassVar[int] = RGBA_CHANNELS
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitRGB(_RGBColor):
    num_channels: ClassVar[int] = RGB_CHANNELS
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorUnitRGBA(_RGBColor):
    num_channels: ClassVar[int] = RGBA_CHANNELS
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorPercentageRGB(_RGBColor):
    num_channels: ClassVar[int] = RGB_CHANNELS
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE


class ColorPercentageRGBA(_RGBColor):
    num_channels: ClassVar[int] = RGBA_CHANNELS
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE


RGB = ColorRGBINT
RGBA = ColorRGBAINT


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
