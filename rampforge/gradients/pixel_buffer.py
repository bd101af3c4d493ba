from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from ..types.format_type import FormatType, channel_maxima, default_format_dtypes


class PixelBuffer:
    """
    Rendered RGBA texture.

    `value` is a read-only float32 array of shape (height, width, 4) with
    channels in [0, 1]. Row 0 holds y = 0 of the gradient coordinates, which
    is the bottom row of the texture (bottom-left origin). Use `top_down()`
    for the row order image files use.
    """
    __slots__ = ("_value",)

    origin = "bottom-left"

    def __init__(self, value: NDArray) -> None:
        arr = np.asarray(value)
        if arr.ndim != 3 or arr.shape[-1] != 4:
            raise ValueError(f"PixelBuffer expects shape (height, width, 4), got {arr.shape}")
        arr = np.clip(arr, 0.0, 1.0).astype(default_format_dtypes[FormatType.FLOAT])
        arr.setflags(write=False)
        self._value = arr

    @property
    def value(self) -> NDArray:
        return self._value

    @property
    def width(self) -> int:
        return self._value.shape[1]

    @property
    def height(self) -> int:
        return self._value.shape[0]

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self._value.shape  # type: ignore[return-value]

    def albedo(self) -> NDArray:
        """RGB channels, shape (height, width, 3)."""
        return self._value[..., :3]

    def alpha(self) -> NDArray:
        """Alpha channel, shape (height, width)."""
        return self._value[..., 3]

    def top_down(self) -> NDArray:
        """Rows reordered so the top row of the texture comes first."""
        return self._value[::-1]

    def to_uint8(self, top_down: bool = False) -> NDArray:
        """
        Channels scaled to 0-255 and rounded.

        Rows keep the bottom-left origin unless top_down is set.
        """
        values = self.top_down() if top_down else self._value
        scaled = np.round(values.astype(np.float64) * channel_maxima[FormatType.INT])
        return scaled.astype(default_format_dtypes[FormatType.INT])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return bool(np.array_equal(self._value, other._value))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
