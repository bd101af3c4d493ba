import numpy as np
import pytest

from rampforge.errors import GradientWarning
from rampforge.gradients import (
    AxisKind,
    DrawMode,
    GradientParams,
    GradientRamp,
    axis_positions,
    rasterize,
    rasterize_axis,
)


def _red(buffer):
    return buffer.value[..., 0]


def test_vertical_rows_increase_columns_equal(black_white):
    params = GradientParams(resolution=(4, 4), angle=0.0, tile=1.0, offset=0.0, repeat=False)
    out = rasterize_axis(params, black_white, AxisKind.VERTICAL)

    assert out.shape == (4, 4, 4)
    red = _red(out)
    assert np.allclose(red[:, 0], [0.0, 0.25, 0.5, 0.75])
    assert np.all(np.diff(red[:, 0]) > 0)
    for row in red:
        assert np.all(row == row[0])
    assert np.all(out.alpha() == 1.0)


def test_horizontal_columns_increase(black_white):
    params = GradientParams(resolution=(4, 2), axis_kind=AxisKind.HORIZONTAL, repeat=False)
    red = _red(rasterize_axis(params, black_white))
    assert np.allclose(red, [[0.0, 0.25, 0.5, 0.75]] * 2)


def test_explicit_axis_kind_overrides_params(black_white):
    params = GradientParams(resolution=(4, 2), axis_kind=AxisKind.VERTICAL, repeat=False)
    horizontal = rasterize_axis(params, black_white, AxisKind.HORIZONTAL)
    assert np.allclose(_red(horizontal)[0], [0.0, 0.25, 0.5, 0.75])


def test_angle_180_runs_the_ramp_the_other_way(black_white):
    base = GradientParams(resolution=(4, 4), repeat=False)
    up = _red(rasterize_axis(base, black_white))
    down = _red(rasterize_axis(base.with_changes(angle=180.0), black_white))

    assert np.allclose(down, 1.0 - up, atol=1e-6)
    assert np.all(np.diff(down[:, 0]) < 0)


def test_negative_tile_matches_half_turn(black_white):
    base = GradientParams(resolution=(6, 5), repeat=False)
    flipped_tile = rasterize_axis(base.with_changes(tile=-1.0), black_white)
    half_turn = rasterize_axis(base.with_changes(angle=180.0), black_white)
    assert np.allclose(flipped_tile.value, half_turn.value, atol=1e-6)


def test_horizontal_quarter_turn_matches_vertical_half_turn(rainbow):
    base = GradientParams(resolution=(5, 5), repeat=False)
    horizontal = rasterize_axis(base.with_changes(angle=90.0), rainbow, AxisKind.HORIZONTAL)
    vertical = rasterize_axis(base.with_changes(angle=180.0), rainbow, AxisKind.VERTICAL)
    assert np.allclose(horizontal.value, vertical.value, atol=1e-6)


def test_tile_repeats_the_ramp():
    params = GradientParams(resolution=(1, 4), tile=2.0, repeat=True)
    positions = axis_positions(params)
    assert np.allclose(positions[:, 0], [0.0, 0.5, 0.0, 0.5])


def test_offset_shifts_positions():
    params = GradientParams(resolution=(1, 4), offset=0.25, repeat=False)
    assert np.allclose(axis_positions(params)[:, 0], [0.25, 0.5, 0.75, 1.0])


def test_clamp_policy_leaves_positions_unclamped(black_white):
    params = GradientParams(resolution=(3, 8), tile=3.0, offset=-0.5, repeat=False)
    positions = axis_positions(params)
    assert positions.min() < 0.0
    assert positions.max() > 1.0

    out = rasterize_axis(params, black_white)
    assert np.all(_red(out)[positions <= 0.0] == 0.0)
    assert np.all(_red(out)[positions >= 1.0] == 1.0)


@pytest.mark.parametrize("angle", [-725.0, -135.0, -90.0, -45.0, 0.0, 30.0, 89.9, 90.0, 181.0, 300.0])
@pytest.mark.parametrize("tile", [-2.5, 0.75, 4.0])
def test_repeat_positions_in_unit_interval(angle, tile):
    params = GradientParams(resolution=(7, 5), angle=angle, tile=tile, offset=0.3, repeat=True)
    positions = axis_positions(params)
    assert positions.shape == (5, 7)
    assert np.all((positions >= 0.0) & (positions < 1.0))


@pytest.mark.parametrize("axis_kind", list(AxisKind))
@pytest.mark.parametrize("angle", [0.0, 33.0, 90.0, 135.0, -200.0])
@pytest.mark.parametrize("repeat", [True, False])
def test_buffers_are_complete_and_bounded(rainbow, axis_kind, angle, repeat):
    params = GradientParams(resolution=(9, 6), angle=angle, tile=1.5, offset=-0.2, repeat=repeat)
    out = rasterize_axis(params, rainbow, axis_kind)
    assert out.shape == (6, 9, 4)
    assert np.all(np.isfinite(out.value))
    assert np.all((out.value >= 0.0) & (out.value <= 1.0))


def test_rasterize_is_idempotent(rainbow):
    params = GradientParams(resolution=(16, 9), angle=37.0, tile=-1.3, offset=0.1)
    first = rasterize_axis(params, rainbow)
    second = rasterize_axis(params, rainbow)
    assert first.value.tobytes() == second.value.tobytes()


def test_single_pixel_samples_ramp_start(rainbow):
    for axis_kind in AxisKind:
        out = rasterize_axis(GradientParams(resolution=(1, 1)), rainbow, axis_kind)
        assert out.shape == (1, 1, 4)
        assert np.allclose(out.value[0, 0], rainbow.evaluate(0.0))


def test_zero_tile_collapses_to_ramp_start(rainbow):
    params = GradientParams(resolution=(5, 5), angle=20.0, tile=0.0, offset=0.4)
    with pytest.warns(GradientWarning):
        out = rasterize_axis(params, rainbow)
    assert np.allclose(out.value, np.broadcast_to(rainbow.evaluate(0.0), out.shape))


@pytest.mark.parametrize("render", [rasterize_axis, rasterize, axis_positions])
def test_zero_tile_warning_points_at_caller(render):
    params = GradientParams(resolution=(3, 3), tile=0.0)
    with pytest.warns(GradientWarning) as record:
        render(params)
    assert record[0].filename == __file__


def test_default_ramp_when_none():
    out = rasterize_axis(GradientParams(resolution=(2, 2)))
    assert np.all(out.value == 1.0)


def test_dispatch_uses_axis_rasterizer(black_white):
    params = GradientParams(resolution=(4, 4), draw_mode=DrawMode.AXIS, repeat=False)
    assert rasterize(params, black_white) == rasterize_axis(params, black_white)


def test_wrong_ramp_type():
    with pytest.raises(TypeError):
        rasterize_axis(GradientParams(resolution=(2, 2)), [(0.0, (1.0, 1.0, 1.0))])


def test_empty_ramp_renders_transparent_black():
    out = rasterize_axis(GradientParams(resolution=(3, 3)), GradientRamp())
    assert not out.value.any()
