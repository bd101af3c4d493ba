from typing import Optional

from .params import (
    AxisKind,
    DrawMode,
    GradientParams,
    MAX_FALLOFF,
    MAX_RESOLUTION,
    MIN_FALLOFF,
    MIN_RESOLUTION,
    clamp_resolution,
)
from .ramp import AlphaKey, ColorKey, GradientRamp, RampMode
from .pixel_buffer import PixelBuffer
from .geometry import wrap_positions
from .axis import _render_axis, axis_positions, rasterize_axis
from .radial import radial_positions, rasterize_radial


def rasterize(params: GradientParams, ramp: Optional[GradientRamp] = None) -> PixelBuffer:
    """Render `params` with the rasterizer selected by its draw mode."""
    if params.draw_mode is DrawMode.RADIAL:
        return rasterize_radial(params, ramp)
    return _render_axis(params, ramp, None, stacklevel=3)


__all__ = [
    "AxisKind",
    "DrawMode",
    "GradientParams",
    "MAX_FALLOFF",
    "MAX_RESOLUTION",
    "MIN_FALLOFF",
    "MIN_RESOLUTION",
    "clamp_resolution",
    "AlphaKey",
    "ColorKey",
    "GradientRamp",
    "RampMode",
    "PixelBuffer",
    "wrap_positions",
    "axis_positions",
    "rasterize_axis",
    "radial_positions",
    "rasterize_radial",
    "rasterize",
]
