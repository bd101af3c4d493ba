from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Union
from ..types.format_type import FormatType, channel_maxima, format_classes, default_format_dtypes
from ..types.color_types import ColorElement, ColorValue, ColorSpace, Scalar
from numpy import ndarray
import numpy as np


def _rescale(value: ColorValue, from_format: FormatType, to_format: FormatType) -> np.ndarray:
    """Rescale channel values between formats, as float64."""
    arr = np.asarray(value, dtype=np.float64)
    if from_format == to_format:
        return arr
    return arr / float(channel_maxima[from_format]) * float(channel_maxima[to_format])


def _match_channels(arr: np.ndarray, num_channels: int, alpha_max: Scalar) -> np.ndarray:
    """Drop or append an alpha channel so the last axis has num_channels entries."""
    have = arr.shape[-1]
    if have == num_channels:
        return arr
    if have == 4 and num_channels == 3:
        return arr[..., :3]
    if have == 3 and num_channels == 4:
        alpha = np.full(arr.shape[:-1] + (1,), float(alpha_max))
        return np.concatenate([arr, alpha], axis=-1)
    raise ValueError(f"Cannot map {have} channels onto {num_channels}")


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorValue, ColorBase]) -> None:
        is_array = isinstance(value, ndarray)

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                is_array = value.is_array
                value = value.value
            else:
                converted = _rescale(value.value, value.format_type, self.format_type)
                converted = _match_channels(
                    converted, self.num_channels, channel_maxima[self.format_type]
                )
                if value.is_array:
                    value = converted
                    is_array = True
                else:
                    value = tuple(converted.tolist())
                    is_array = False

        # ---- Handle array input ----
        if is_array:
            arr = cast(ndarray, value)

            if not np.issubdtype(arr.dtype, np.number):
                raise TypeError(f"{self.mode} expects a numeric array, got {arr.dtype}")

            if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
                raise ValueError(
                    f"{self.mode} expects last dimension to be {self.num_channels}, "
                    f"got shape {arr.shape}"
                )

            arr = np.clip(arr, 0, np.array(self.maxima))

            target_dtype = default_format_dtypes[self.format_type]
            if self.format_type == FormatType.INT and not np.issubdtype(arr.dtype, np.integer):
                arr = np.round(arr)
            if arr.dtype != target_dtype:
                arr = arr.astype(target_dtype)

            value = arr

        # ---- Handle scalar/tuple input ----
        else:
            if not isinstance(value, (tuple, list)):
                raise TypeError(
                    f"{self.mode} expects a {self.num_channels}-channel tuple, got {type(value).__name__}"
                )
            if len(value) != self.num_channels:
                raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value")

            cast_type = format_classes[self.format_type]
            if cast_type is int:
                value = tuple(int(round(float(v))) for v in cast(Tuple[Any, ...], value))
            else:
                value = tuple(cast_type(v) for v in cast(Tuple[Any, ...], value))

            value = tuple(
                max(0, min(v, m)) for v, m in zip(value, cast(Tuple[Scalar, ...], self.maxima))
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if (self.mode, self.format_type) != (other.mode, other.format_type):
            return False
        return bool(np.array_equal(np.asarray(self._value), np.asarray(other.value)))

    def __hash__(self) -> int:
        if self.is_array:
            raise TypeError(f"unhashable array-valued {self.__class__.__name__}")
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
