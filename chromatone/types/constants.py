"""
Process-wide constants.

Everything here is plain immutable data: the D65 reference white, the
sRGB <-> XYZ matrices and the thresholds used by the metrics and scales.
"""
import numpy as np

# Illuminant D65 reference white
D65_XN = 0.95047
D65_YN = 1.0
D65_ZN = 1.08883
D65 = (D65_XN, D65_YN, D65_ZN)

# Linear sRGB -> XYZ (D65)
RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])
RGB_TO_XYZ.setflags(write=False)

# XYZ (D65) -> linear sRGB
XYZ_TO_RGB = np.array([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.204, 1.057],
])
XYZ_TO_RGB.setflags(write=False)

# sRGB companding breakpoints
SRGB_COMPAND_CUT = 0.0031308
SRGB_DECOMPAND_CUT = 0.04045
# WCAG 2.0 relative luminance uses the older breakpoint
WCAG_DECOMPAND_CUT = 0.03928

# CIE Lab
LAB_DELTA = 6.0 / 29.0
LAB_CUT = LAB_DELTA ** 3

# Perceived brightness weights (W3C AERT), summed then divided by 1000
BRIGHTNESS_WEIGHTS = np.array([299.0, 587.0, 114.0])
BRIGHTNESS_WEIGHTS.setflags(write=False)
# Relative luminance weights (WCAG 2.0)
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])
LUMINANCE_WEIGHTS.setflags(write=False)

CONTRAST_OFFSET = 0.05
READABLE_CONTRAST = 4.5
LIGHT_BRIGHTNESS = 0.5

# Color scales
DEFAULT_EPSILON = 1e-6
MIN_CSS_STOPS = 10
MANY_STOPS_WARNING = 1000
