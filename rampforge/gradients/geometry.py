"""
Shared math for the rasterizers.

Pixel coordinates are integer (x, y) with y = 0 on the first stored row.
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from ..errors import DegenerateGeometryError
from .params import AxisKind

REFERENCE_AXES = {
    AxisKind.VERTICAL: (0.0, 1.0),
    AxisKind.HORIZONTAL: (1.0, 0.0),
}


def fold_angle(angle: float) -> float:
    """
    Reflect an angle in degrees towards the first quadrant for span computation.

    Angles beyond 90 are reflected once; spans only use |cos| of the result.
    """
    folded = abs(angle)
    if folded > 90.0:
        # flips over the x axis
        folded = 180.0 - folded
    return folded


def projection_span(width: int, height: int, angle: float, axis_kind: AxisKind) -> float:
    """
    Length of the texture measured along the gradient axis.

    The folded angle is measured from the mode's reference axis; the span is
    the smaller of the two edge projections.
    """
    folded = math.radians(fold_angle(angle))
    complement = math.radians(90.0 - fold_angle(angle))
    if AxisKind(axis_kind) is AxisKind.VERTICAL:
        along, across = height, width
    else:
        along, across = width, height

    along_dist = abs(along / math.cos(folded))
    across_dist = abs(across / math.cos(complement))
    dist = min(along_dist, across_dist)

    if not math.isfinite(dist) or dist == 0.0:
        raise DegenerateGeometryError(
            f"projected span is {dist} for {width}x{height} at angle {angle}"
        )
    return dist


def tile_sign(tile: float) -> float:
    """Sign of the tile factor, with zero mapped to +1."""
    return -1.0 if tile < 0.0 else 1.0


def direction_vector(angle: float, axis_kind: AxisKind, sign: float = 1.0) -> Tuple[float, float]:
    """Reference axis rotated by -angle degrees, scaled by sign."""
    theta = math.radians(-angle)
    ref_x, ref_y = REFERENCE_AXES[AxisKind(axis_kind)]
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return (
        (ref_x * cos_t - ref_y * sin_t) * sign,
        (ref_x * sin_t + ref_y * cos_t) * sign,
    )


def axis_modifiers(direction: Tuple[float, float], width: int, height: int) -> Tuple[float, float]:
    """Origin shift that keeps projected distances measured from the trailing edge."""
    x_mod = float(width) if direction[0] < 0.0 else 0.0
    y_mod = float(height) if direction[1] < 0.0 else 0.0
    return x_mod, y_mod


def wrap_positions(positions: NDArray, repeat: bool) -> NDArray:
    """
    Apply the repeat policy to gradient positions.

    With repeat, positions wrap into [0, 1) using a truncating remainder
    taken twice; without it they are returned unchanged and the ramp clamps.
    """
    if not repeat:
        return positions
    return np.fmod(np.fmod(positions, 1.0) + 1.0, 1.0)


def pixel_grid(width: int, height: int) -> Tuple[NDArray, NDArray]:
    """Float64 (x, y) coordinate arrays of shape (height, width)."""
    y_indices, x_indices = np.indices((height, width), dtype=np.float64)
    return x_indices, y_indices


def ensure_finite(positions: NDArray, context: str) -> NDArray:
    """Raise DegenerateGeometryError unless every position is finite."""
    if not np.all(np.isfinite(positions)):
        raise DegenerateGeometryError(f"non-finite gradient positions for {context}")
    return positions
