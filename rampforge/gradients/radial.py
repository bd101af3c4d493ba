from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np

from ..errors import DegenerateGeometryError
from .geometry import ensure_finite, pixel_grid, wrap_positions
from .params import GradientParams
from .pixel_buffer import PixelBuffer
from .ramp import GradientRamp, ensure_ramp

# half extent of a single pixel, used when the texture is one pixel wide
MIN_HALF_EXTENT = 0.5


def radial_center(params: GradientParams) -> Tuple[float, float]:
    """Center in pixel coordinates, displaced by center_offset half extents."""
    width, height = params.resolution
    half_w = (width - 1) * 0.5
    half_h = (height - 1) * 0.5
    off_x, off_y = params.center_offset
    return half_w + off_x * half_w, half_h + off_y * half_h


def local_radius(params: GradientParams) -> float:
    """Distance in pixels covered by one ramp length."""
    if not math.isfinite(params.radius) or params.radius <= 0.0:
        raise DegenerateGeometryError(f"radius must be positive and finite, got {params.radius}")

    half_w = max((params.width - 1) * 0.5, MIN_HALF_EXTENT)
    result = half_w / params.radius
    if not math.isfinite(result) or result == 0.0:
        raise DegenerateGeometryError(
            f"local radius is {result} for width {params.width} and radius {params.radius}"
        )
    return result


def radial_positions(params: GradientParams) -> np.ndarray:
    """
    Ramp positions of every pixel for a radial gradient, after the repeat policy.

    Returns:
        float64 array of shape (height, width)
    """
    radius = local_radius(params)
    cx, cy = radial_center(params)

    x, y = pixel_grid(params.width, params.height)
    pixel_dist = np.sqrt((x - cx) ** 2 + (y - cy) ** 2)

    # +1 because an even sized texture comes just short of 1 at the center edge
    gradient_pos = (pixel_dist + 1.0) / radius
    ensure_finite(gradient_pos, f"radius {params.radius}")
    return wrap_positions(gradient_pos, params.repeat)


def rasterize_radial(params: GradientParams, ramp: Optional[GradientRamp] = None) -> PixelBuffer:
    """
    Render a gradient by distance from a (possibly offset) center.

    Each evaluated channel, alpha included, is raised to params.radial_falloff.
    """
    ramp = ensure_ramp(ramp)
    colors = ramp.evaluate_array(radial_positions(params))
    colors = np.power(colors, params.radial_falloff)
    return PixelBuffer(colors)
