from __future__ import annotations

import math
import operator
import warnings
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

from boundednumbers.functions import clamp

from ..errors import DegenerateGeometryError, GradientWarning, InvalidResolutionError

MIN_RESOLUTION = 1
MAX_RESOLUTION = 8192
MIN_FALLOFF = 0.0
MAX_FALLOFF = 10.0


class DrawMode(str, Enum):
    AXIS = "axis"
    RADIAL = "radial"


class AxisKind(str, Enum):
    """Reference axis of a linear gradient: up for VERTICAL, right for HORIZONTAL."""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def clamp_resolution(width: int, height: int) -> Tuple[int, int]:
    """Clamp a requested texture size into [MIN_RESOLUTION, MAX_RESOLUTION]."""
    return (
        int(clamp(int(width), MIN_RESOLUTION, MAX_RESOLUTION)),
        int(clamp(int(height), MIN_RESOLUTION, MAX_RESOLUTION)),
    )


def _validate_resolution(resolution) -> Tuple[int, int]:
    try:
        width, height = resolution
    except (TypeError, ValueError):
        raise InvalidResolutionError(f"resolution must be a (width, height) pair, got {resolution!r}") from None

    checked = []
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool):
            raise InvalidResolutionError(f"{name} must be an integer, got {value!r}")
        try:
            value = operator.index(value)
        except TypeError:
            try:
                integral = float(value).is_integer()
            except (TypeError, ValueError, OverflowError):
                integral = False
            if not integral:
                raise InvalidResolutionError(f"{name} must be an integer, got {value!r}") from None
            value = int(value)
        if not MIN_RESOLUTION <= value <= MAX_RESOLUTION:
            raise InvalidResolutionError(
                f"{name} must be in [{MIN_RESOLUTION}, {MAX_RESOLUTION}], got {value}"
            )
        checked.append(value)
    return checked[0], checked[1]


def _finite(name: str, value) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise DegenerateGeometryError(f"{name} must be finite, got {value}")
    return value


@dataclass(frozen=True)
class GradientParams:
    """
    Geometry and sampling settings for one rasterization.

    Attributes:
        resolution: (width, height) of the texture in pixels
        draw_mode: AXIS for linear gradients, RADIAL for distance-from-center
        axis_kind: reference axis used by AXIS mode
        angle: rotation of the gradient axis in degrees
        offset: shift along the axis as a fraction of the projected span
        tile: repeat frequency; the sign flips the direction
        repeat: wrap positions into [0, 1) instead of letting the ramp clamp them
        radius: radial scale, the ramp spans half the width at radius 1
        center_offset: radial center displacement as a fraction of the half extent
        radial_falloff: per-channel exponent applied to radial output, in [0, 10]
    """
    resolution: Tuple[int, int] = (256, 256)
    draw_mode: DrawMode = DrawMode.AXIS
    axis_kind: AxisKind = AxisKind.VERTICAL
    angle: float = 0.0
    offset: float = 0.0
    tile: float = 1.0
    repeat: bool = True
    radius: float = 1.0
    center_offset: Tuple[float, float] = field(default=(0.0, 0.0))
    radial_falloff: float = 1.0

    def __post_init__(self) -> None:
        set_ = object.__setattr__
        set_(self, "resolution", _validate_resolution(self.resolution))
        set_(self, "draw_mode", DrawMode(self.draw_mode))
        set_(self, "axis_kind", AxisKind(self.axis_kind))
        set_(self, "repeat", bool(self.repeat))

        for name in ("angle", "offset", "tile", "radius"):
            set_(self, name, _finite(name, getattr(self, name)))

        cx, cy = self.center_offset
        set_(self, "center_offset", (_finite("center_offset.x", cx), _finite("center_offset.y", cy)))

        falloff = _finite("radial_falloff", self.radial_falloff)
        if not MIN_FALLOFF <= falloff <= MAX_FALLOFF:
            clamped = float(clamp(falloff, MIN_FALLOFF, MAX_FALLOFF))
            warnings.warn(
                f"radial_falloff {falloff} outside [{MIN_FALLOFF}, {MAX_FALLOFF}], using {clamped}",
                GradientWarning,
                stacklevel=3,
            )
            falloff = clamped
        set_(self, "radial_falloff", falloff)

    @property
    def width(self) -> int:
        return self.resolution[0]

    @property
    def height(self) -> int:
        return self.resolution[1]

    def with_changes(self, **changes) -> GradientParams:
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)
