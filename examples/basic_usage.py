"""Basic Chromatone usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromatone import (
    BLACK,
    WHITE,
    Color,
    FormatType,
    color_scale,
    color_stop,
    contrast,
    convert,
    css_linear_gradient,
    mix,
    named_color,
    sample_colors,
    text_color,
)
from chromatone.colors import blend
from chromatone.gradients import combine_scales, reverse_scale


def demonstrate_colors() -> None:
    # Build colors from different models and convert between them.
    accent = Color.rgb(255, 128, 64)
    print("HSLA:", tuple(round(float(v), 3) for v in accent))
    print("Hex:", accent.to_hex(), "CSS:", accent.css_hsla())
    print("Lab:", tuple(round(v, 2) for v in accent.to_lab()))

    converted = convert((255, 128, 64), "rgb", "hsv", input_type="int", output_type=FormatType.PERCENTAGE)
    print("RGB -> HSV (percentage):", converted)

    teal = named_color("teal")
    print("Contrast teal/white:", round(contrast(teal, WHITE), 2))
    print("Text color on teal:", text_color(teal).to_hex())

    # The color spaces disagree on what "half way" means.
    red, blue = Color.rgb(255, 0, 0), Color.rgb(0, 0, 255)
    for space in ("rgb", "hsl", "lab", "lch"):
        print(f"mix red/blue in {space}:", mix(space, red, blue, 0.5).to_hex())

    print("multiply:", blend("multiply", accent, teal).to_hex())


def demonstrate_scales() -> None:
    red, blue, yellow = named_color("red"), named_color("blue"), named_color("yellow")
    scale = color_scale("hsl", red, [color_stop(blue, 0.3)], yellow)
    print("Samples:", [c.to_hex() for c in sample_colors(scale, 6)])
    print("CSS:", css_linear_gradient(scale, 90))

    # Hard edge between two scales at 0.5.
    grays = color_scale("rgb", BLACK, [], WHITE)
    combined = combine_scales(0.5, reverse_scale(grays), scale)
    print("Combined samples:", [c.to_hex() for c in sample_colors(combined, 5)])


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_scales()
