"""
rampforge - Gradient Texture Rasterization
==========================================

Render 2D RGBA gradient textures from a keyed color ramp.

Key Features
------------
- Linear gradients along any angle, vertical or horizontal reference axis
- Radial gradients with an offset center and per-channel power falloff
- Tiling, offset and repeat (wrap) or clamp sampling of the ramp
- Independently keyed color and alpha, blended or stepped
- PNG / JPG export through Pillow

Quick Start
-----------
>>> from rampforge import GradientParams, GradientRamp, rasterize
>>>
>>> ramp = GradientRamp.from_colors([(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)])
>>> params = GradientParams(resolution=(64, 64), angle=45.0, tile=2.0)
>>> texture = rasterize(params, ramp)
>>> texture.shape
(64, 64, 4)

Modules
-------
- gradients: ramp, parameters and the axis / radial rasterizers
- colors: immutable RGB / RGBA color classes
- export: PNG / JPG encoding
- errors: exception hierarchy
"""

from .colors import (
    ColorBase,
    ColorRGBINT, ColorRGBAINT,
    ColorUnitRGB, ColorUnitRGBA,
    ColorPercentageRGB, ColorPercentageRGBA,
    RGB, RGBA,
    to_unit_rgba,
)
from .errors import (
    GradientError,
    InvalidResolutionError,
    DegenerateGeometryError,
    GradientWarning,
)
from .gradients import (
    AxisKind,
    DrawMode,
    GradientParams,
    clamp_resolution,
    AlphaKey,
    ColorKey,
    GradientRamp,
    RampMode,
    PixelBuffer,
    rasterize,
    rasterize_axis,
    rasterize_radial,
)
from .export import FileType, encode_texture, save_texture, to_image
from .types.format_type import FormatType

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorBase",
    "ColorRGBINT", "ColorRGBAINT",
    "ColorUnitRGB", "ColorUnitRGBA",
    "ColorPercentageRGB", "ColorPercentageRGBA",
    "RGB", "RGBA",
    "to_unit_rgba",
    "FormatType",

    # errors
    "GradientError",
    "InvalidResolutionError",
    "DegenerateGeometryError",
    "GradientWarning",

    # gradients
    "AxisKind",
    "DrawMode",
    "GradientParams",
    "clamp_resolution",
    "AlphaKey",
    "ColorKey",
    "GradientRamp",
    "RampMode",
    "PixelBuffer",
    "rasterize",
    "rasterize_axis",
    "rasterize_radial",

    # export
    "FileType",
    "encode_texture",
    "save_texture",
    "to_image",

    # Version
    "__version__",
]
