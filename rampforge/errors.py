"""Exceptions and warnings raised by the rasterizers."""


class GradientError(ValueError):
    """Base class for invalid gradient inputs."""


class InvalidResolutionError(GradientError):
    """Width or height outside the supported texture size."""


class DegenerateGeometryError(GradientError):
    """A parameter makes the projected span or radius zero or non-finite."""


class GradientWarning(UserWarning):
    """A parameter was coerced to a usable value."""
