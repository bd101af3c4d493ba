from __future__ import annotations

import warnings
from typing import Optional

import numpy as np

from ..errors import GradientWarning
from .geometry import (
    axis_modifiers,
    ensure_finite,
    direction_vector,
    pixel_grid,
    projection_span,
    tile_sign,
    wrap_positions,
)
from .params import AxisKind, GradientParams
from .pixel_buffer import PixelBuffer
from .ramp import GradientRamp, ensure_ramp


def _axis_positions(params: GradientParams, axis_kind: Optional[AxisKind], stacklevel: int) -> np.ndarray:
    axis_kind = AxisKind(axis_kind or params.axis_kind)
    width, height = params.resolution

    if params.tile == 0.0:
        warnings.warn(
            "tile is 0; every pixel samples the ramp at position 0",
            GradientWarning,
            stacklevel=stacklevel,
        )

    dist = projection_span(width, height, params.angle, axis_kind)
    tex_offset = params.offset * dist
    dir_x, dir_y = direction_vector(params.angle, axis_kind, tile_sign(params.tile))

    # negative direction components measure from the far edge
    x_mod, y_mod = axis_modifiers((dir_x, dir_y), width, height)

    x, y = pixel_grid(width, height)
    pixel_dist = dir_x * (x - x_mod) + dir_y * (y - y_mod)
    gradient_pos = ((pixel_dist + tex_offset) / dist) * abs(params.tile)
    ensure_finite(gradient_pos, f"angle {params.angle}, offset {params.offset}, tile {params.tile}")
    return wrap_positions(gradient_pos, params.repeat)


def _render_axis(
    params: GradientParams,
    ramp: Optional[GradientRamp],
    axis_kind: Optional[AxisKind],
    stacklevel: int,
) -> PixelBuffer:
    # stacklevel locates the public caller relative to this frame
    ramp = ensure_ramp(ramp)
    positions = _axis_positions(params, axis_kind, stacklevel + 1)
    return PixelBuffer(ramp.evaluate_array(positions))


def axis_positions(params: GradientParams, axis_kind: Optional[AxisKind] = None) -> np.ndarray:
    """
    Ramp positions of every pixel for a linear gradient, after the repeat policy.

    Returns:
        float64 array of shape (height, width)
    """
    return _axis_positions(params, axis_kind, stacklevel=3)


def rasterize_axis(
    params: GradientParams,
    ramp: Optional[GradientRamp] = None,
    axis_kind: Optional[AxisKind] = None,
) -> PixelBuffer:
    """
    Render a linear gradient along an arbitrary angle.

    Args:
        params: texture geometry; draw_mode is not consulted
        ramp: color ramp, the default white ramp when None
        axis_kind: VERTICAL (reference axis up) or HORIZONTAL (reference axis
            right); defaults to params.axis_kind

    Returns:
        PixelBuffer of params.resolution
    """
    return _render_axis(params, ramp, axis_kind, stacklevel=3)
