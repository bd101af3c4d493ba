import pytest

from rampforge.gradients import GradientRamp


@pytest.fixture
def black_white():
    """Opaque black at 0 to opaque white at 1."""
    return GradientRamp(
        color_keys=[(0.0, (0.0, 0.0, 0.0)), (1.0, (1.0, 1.0, 1.0))],
        alpha_keys=[(0.0, 1.0), (1.0, 1.0)],
    )


@pytest.fixture
def rainbow():
    """Three color keys with a fading alpha."""
    return GradientRamp(
        color_keys=[
            (0.0, (1.0, 0.0, 0.0)),
            (0.5, (0.0, 1.0, 0.0)),
            (1.0, (0.0, 0.0, 1.0)),
        ],
        alpha_keys=[(0.0, 1.0), (1.0, 0.25)],
    )
