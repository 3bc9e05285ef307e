"""Reference values shared by the tests."""

# 8-bit RGB -> (hue, saturation, lightness)
samples_rgb_hsl = {
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (0, 255, 255): (180.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (128, 0, 0): (0.0, 1.0, 64 / 255),
    (255, 128, 0): (30.12, 1.0, 0.5),
    (51, 102, 153): (210.0, 0.5, 0.4),
}

# (hue, saturation, value) -> (hue, saturation, lightness)
samples_hsv_hsl = {
    (0.0, 1.0, 1.0): (0.0, 1.0, 0.5),
    (120.0, 1.0, 0.5): (120.0, 1.0, 0.25),
    (240.0, 0.5, 1.0): (240.0, 1.0, 0.75),
    (60.0, 0.0, 1.0): (60.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (300.0, 0.5, 0.5): (300.0, 1.0 / 3.0, 0.375),
}

# 8-bit RGB -> CIE Lab (D65)
samples_rgb_lab = {
    (255, 0, 0): (53.24, 80.09, 67.20),
    (0, 255, 0): (87.73, -86.18, 83.18),
    (0, 0, 255): (32.30, 79.19, -107.86),
    (255, 255, 255): (100.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

hex_samples = {
    "#000000": (0, 0, 0),
    "#ffffff": (255, 255, 255),
    "#FF0000": (255, 0, 0),
    "#00ff00": (0, 255, 0),
    "#abc": (170, 187, 204),
    "#ABC": (170, 187, 204),
    "#1e90ff": (30, 144, 255),
}

invalid_hex = ["", "#", "#12", "#1234", "#12345", "#1234567", "#ggg", "ffffff", "#ff00zz", " #ffffff"]


def channels_close(c1, c2, tol=1):
    """True if two colors differ by at most ``tol`` in every 8-bit channel."""
    r1, g1, b1, a1 = c1.to_rgba()
    r2, g2, b2, a2 = c2.to_rgba()
    return (
        abs(r1 - r2) <= tol
        and abs(g1 - g2) <= tol
        and abs(b1 - b2) <= tol
        and abs(a1 - a2) < 1e-9
    )
