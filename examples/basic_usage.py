"""Basic rampforge usage examples.

Run directly with:
    python examples/basic_usage.py [output_dir]
"""
import sys
from pathlib import Path

from rampforge import (
    AxisKind,
    ColorRGBINT,
    DrawMode,
    FileType,
    GradientParams,
    GradientRamp,
    RampMode,
    clamp_resolution,
    rasterize,
    rasterize_axis,
    save_texture,
)
from rampforge.types.format_type import FormatType


def demonstrate_ramps() -> GradientRamp:
    # Color and alpha are keyed separately.
    sunset = GradientRamp(
        color_keys=[
            (0.0, (255, 94, 58)),
            (0.6, (255, 149, 0)),
            (1.0, ColorRGBINT((82, 45, 128))),
        ],
        alpha_keys=[(0.0, 1.0), (0.8, 1.0), (1.0, 0.0)],
        format_type=FormatType.INT,
    )
    print("Sunset at 0.3:", sunset.evaluate(0.3))

    bands = GradientRamp.from_colors(
        [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)],
        mode=RampMode.FIXED,
    )
    print("Stepped ramp strip:", bands.sample(6)[:, :3].round(2).tolist())
    return sunset


def demonstrate_textures(ramp: GradientRamp, out_dir: Path) -> None:
    width, height = clamp_resolution(256, 10_000)

    diagonal = GradientParams(resolution=(width, height), angle=45.0, tile=3.0, repeat=True)
    stripes = rasterize_axis(diagonal, ramp, AxisKind.HORIZONTAL)
    print("Diagonal stripes:", stripes)

    glow = GradientParams(
        resolution=(256, 256),
        draw_mode=DrawMode.RADIAL,
        radius=1.5,
        center_offset=(0.25, -0.25),
        radial_falloff=2.0,
        repeat=False,
    )
    spot = rasterize(glow, ramp)
    print("Radial glow alpha range:", float(spot.alpha().min()), float(spot.alpha().max()))

    out_dir.mkdir(parents=True, exist_ok=True)
    print("Wrote", save_texture(stripes, out_dir / "stripes", FileType.JPG))
    print("Wrote", save_texture(spot, out_dir / "glow.png"))


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("gradients_out")
    demonstrate_textures(demonstrate_ramps(), target)
