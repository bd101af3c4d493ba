"""
Color ramp evaluated by the rasterizers.

Color and alpha are keyed independently, each key pinned at a position in
[0, 1]. Evaluation clamps the query position to [0, 1] and returns the
boundary key outside the keyed range.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp

from ..colors.color import ColorInput, to_unit_rgba
from ..types.color_types import RGBA
from ..types.format_type import FormatType

_clamp_unit = bound_type_to_np_function[BoundType.CLAMP]


class RampMode(str, Enum):
    BLEND = "blend"
    FIXED = "fixed"


@dataclass(frozen=True)
class ColorKey:
    position: float
    color: Tuple[float, float, float]


@dataclass(frozen=True)
class AlphaKey:
    position: float
    alpha: float


ColorKeyInput = Union[ColorKey, Tuple[float, ColorInput]]
AlphaKeyInput = Union[AlphaKey, Tuple[float, float]]


def _unit_position(position: float) -> float:
    return float(clamp(float(position), 0.0, 1.0))


def _to_color_key(key: ColorKeyInput, format_type: FormatType) -> ColorKey:
    if isinstance(key, ColorKey):
        position, color = key.position, key.color
    else:
        position, color = key
    r, g, b, _ = to_unit_rgba(color, format_type)
    return ColorKey(_unit_position(position), (r, g, b))


def _to_alpha_key(key: AlphaKeyInput) -> AlphaKey:
    if isinstance(key, AlphaKey):
        position, alpha = key.position, key.alpha
    else:
        position, alpha = key
    return AlphaKey(_unit_position(position), float(clamp(float(alpha), 0.0, 1.0)))


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


class GradientRamp:
    """
    Immutable color/alpha ramp.

    Args:
        color_keys: (position, color) pairs or ColorKey instances; only RGB is used
        alpha_keys: (position, alpha) pairs or AlphaKey instances
        mode: BLEND interpolates linearly between keys, FIXED steps to the next key
        format_type: format of raw color tuples (ColorBase inputs carry their own)
    """
    __slots__ = (
        "_color_keys", "_alpha_keys", "_mode",
        "_color_positions", "_color_values",
        "_alpha_positions", "_alpha_values",
    )

    def __init__(
        self,
        color_keys: Iterable[ColorKeyInput] = (),
        alpha_keys: Iterable[AlphaKeyInput] = (),
        mode: RampMode = RampMode.BLEND,
        format_type: FormatType = FormatType.FLOAT,
    ) -> None:
        colors = sorted(
            (_to_color_key(k, format_type) for k in color_keys),
            key=lambda k: k.position,
        )
        alphas = sorted((_to_alpha_key(k) for k in alpha_keys), key=lambda k: k.position)

        self._color_keys: Tuple[ColorKey, ...] = tuple(colors)
        self._alpha_keys: Tuple[AlphaKey, ...] = tuple(alphas)
        self._mode = RampMode(mode)

        self._color_positions = _frozen(np.array([k.position for k in colors], dtype=np.float64))
        self._color_values = _frozen(
            np.array([k.color for k in colors], dtype=np.float64).reshape(len(colors), 3)
        )
        self._alpha_positions = _frozen(np.array([k.position for k in alphas], dtype=np.float64))
        self._alpha_values = _frozen(
            np.array([k.alpha for k in alphas], dtype=np.float64).reshape(len(alphas), 1)
        )

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def default(cls) -> GradientRamp:
        """Opaque white at both ends."""
        return cls(
            color_keys=[(0.0, (1.0, 1.0, 1.0)), (1.0, (1.0, 1.0, 1.0))],
            alpha_keys=[(0.0, 1.0), (1.0, 1.0)],
        )

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[ColorInput],
        mode: RampMode = RampMode.BLEND,
        format_type: FormatType = FormatType.FLOAT,
    ) -> GradientRamp:
        """
        Spread colors evenly over [0, 1].

        Alpha keys are taken from each color's alpha channel (opaque for RGB
        input) at the same positions.
        """
        if len(colors) == 0:
            return cls(mode=mode)
        positions = np.linspace(0.0, 1.0, len(colors)) if len(colors) > 1 else np.zeros(1)
        rgba = [to_unit_rgba(c, format_type) for c in colors]
        return cls(
            color_keys=[(float(p), c[:3]) for p, c in zip(positions, rgba)],
            alpha_keys=[(float(p), c[3]) for p, c in zip(positions, rgba)],
            mode=mode,
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def color_keys(self) -> Tuple[ColorKey, ...]:
        return self._color_keys

    @property
    def alpha_keys(self) -> Tuple[AlphaKey, ...]:
        return self._alpha_keys

    @property
    def mode(self) -> RampMode:
        return self._mode

    @property
    def is_empty(self) -> bool:
        return not self._color_keys and not self._alpha_keys

    # ------------------ EVALUATION ------------------
    def _sample_keys(self, t: NDArray, positions: NDArray, values: NDArray) -> NDArray:
        if self._mode is RampMode.FIXED:
            idx = np.searchsorted(positions, t, side="left")
            idx = np.minimum(idx, len(positions) - 1)
            return values[idx]
        channels = [np.interp(t, positions, values[:, ch]) for ch in range(values.shape[1])]
        return np.stack(channels, axis=-1)

    def evaluate_array(self, positions: NDArray) -> NDArray:
        """
        Evaluate the ramp at every entry of an array of positions.

        Returns:
            float64 array of shape positions.shape + (4,)
        """
        t = np.asarray(positions, dtype=np.float64)
        t = _clamp_unit(t, 0.0, 1.0)

        if self._color_keys:
            rgb = self._sample_keys(t, self._color_positions, self._color_values)
        else:
            rgb = np.zeros(t.shape + (3,), dtype=np.float64)

        if self._alpha_keys:
            alpha = self._sample_keys(t, self._alpha_positions, self._alpha_values)
        else:
            # opaque unless the whole ramp is empty
            fill = 1.0 if self._color_keys else 0.0
            alpha = np.full(t.shape + (1,), fill, dtype=np.float64)

        return np.concatenate([rgb, alpha], axis=-1)

    def evaluate(self, position: Union[float, NDArray]) -> Union[RGBA, NDArray]:
        """
        Evaluate the ramp.

        A scalar position gives an (r, g, b, a) tuple, an array gives an
        array with a trailing channel axis of length 4.
        """
        if np.ndim(position) == 0:
            rgba = self.evaluate_array(np.array([position], dtype=np.float64))[0]
            return tuple(float(v) for v in rgba)  # type: ignore[return-value]
        return self.evaluate_array(position)

    def sample(self, steps: int) -> NDArray:
        """Evaluate at `steps` evenly spaced positions over [0, 1]; shape (steps, 4)."""
        if steps < 1:
            raise ValueError(f"steps must be positive, got {steps}")
        return self.evaluate_array(np.linspace(0.0, 1.0, steps))

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradientRamp):
            return NotImplemented
        return (
            self._mode == other._mode
            and self._color_keys == other._color_keys
            and self._alpha_keys == other._alpha_keys
        )

    def __hash__(self) -> int:
        return hash((self._mode, self._color_keys, self._alpha_keys))

    def __repr__(self) -> str:
        return (
            f"GradientRamp(color_keys={len(self._color_keys)}, "
            f"alpha_keys={len(self._alpha_keys)}, mode={self._mode.value!r})"
        )


def ensure_ramp(ramp: Optional[GradientRamp]) -> GradientRamp:
    """Return `ramp`, or the default white ramp when None."""
    if ramp is None:
        return GradientRamp.default()
    if not isinstance(ramp, GradientRamp):
        raise TypeError(f"Expected GradientRamp, got {type(ramp).__name__}")
    return ramp
