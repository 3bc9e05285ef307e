"""
X11 named colors, as listed by CSS3 (https://www.w3.org/TR/css3-color/#svg-color).

Black and white are listed too (the constants live in ``chromatone.colors``)
so every CSS color keyword can be looked up by name.
"""
from typing import Dict, Optional

from ..colors.color import Color
from ..types.color_types import IntTriple

X11_COLORS: Dict[str, IntTriple] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "aliceblue": (240, 248, 255),
    "antiquewhite": (250, 235, 215),
    "aqua": (0, 255, 255),
    "aquamarine": (127, 255, 212),
    "azure": (240, 255, 255),
    "beige": (245, 245, 220),
    "bisque": (255, 228, 196),
    "blanchedalmond": (255, 235, 205),
    "blue": (0, 0, 255),
    "blueviolet": (138, 43, 226),
    "brown": (165, 42, 42),
    "burlywood": (222, 184, 135),
    "cadetblue": (95, 158, 160),
    "chartreuse": (127, 255, 0),
    "chocolate": (210, 105, 30),
    "coral": (255, 127, 80),
    "cornflowerblue": (100, 149, 237),
    "cornsilk": (255, 248, 220),
    "crimson": (220, 20, 60),
    "cyan": (0, 255, 255),
    "darkblue": (0, 0, 139),
    "darkcyan": (0, 139, 139),
    "darkgoldenrod": (184, 134, 11),
    "darkgray": (169, 169, 169),
    "darkgreen": (0, 100, 0),
    "darkgrey": (169, 169, 169),
    "darkkhaki": (189, 183, 107),
    "darkmagenta": (139, 0, 139),
    "darkolivegreen": (85, 107, 47),
    "darkorange": (255, 140, 0),
    "darkorchid": (153, 50, 204),
    "darkred": (139, 0, 0),
    "darksalmon": (233, 150, 122),
    "darkseagreen": (143, 188, 143),
    "darkslateblue": (72, 61, 139),
    "darkslategray": (47, 79, 79),
    "darkslategrey": (47, 79, 79),
    "darkturquoise": (0, 206, 209),
    "darkviolet": (148, 0, 211),
    "deeppink": (255, 20, 147),
    "deepskyblue": (0, 191, 255),
    "dimgray": (105, 105, 105),
    "dimgrey": (105, 105, 105),
    "dodgerblue": (30, 144, 255),
    "firebrick": (178, 34, 34),
    "floralwhite": (255, 250, 240),
    "forestgreen": (34, 139, 34),
    "fuchsia": (255, 0, 255),
    "gainsboro": (220, 220, 220),
    "ghostwhite": (248, 248, 255),
    "gold": (255, 215, 0),
    "goldenrod": (218, 165, 32),
    "gray": (128, 128, 128),
    "green": (0, 128, 0),
    "greenyellow": (173, 255, 47),
    "grey": (128, 128, 128),
    "honeydew": (240, 255, 240),
    "hotpink": (255, 105, 180),
    "indianred": (205, 92, 92),
    "indigo": (75, 0, 130),
    "ivory": (255, 255, 240),
    "khaki": (240, 230, 140),
    "lavender": (230, 230, 250),
    "lavenderblush": (255, 240, 245),
    "lawngreen": (124, 252, 0),
    "lemonchiffon": (255, 250, 205),
    "lightblue": (173, 216, 230),
    "lightcoral": (240, 128, 128),
    "lightcyan": (224, 255, 255),
    "lightgoldenrodyellow": (250, 250, 210),
    "lightgray": (211, 211, 211),
    "lightgreen": (144, 238, 144),
    "lightgrey": (211, 211, 211),
    "lightpink": (255, 182, 193),
    "lightsalmon": (255, 160, 122),
    "lightseagreen": (32, 178, 170),
    "lightskyblue": (135, 206, 250),
    "lightslategray": (119, 136, 153),
    "lightslategrey": (119, 136, 153),
    "lightsteelblue": (176, 196, 222),
    "lightyellow": (255, 255, 224),
    "lime": (0, 255, 0),
    "limegreen": (50, 205, 50),
    "linen": (250, 240, 230),
    "magenta": (255, 0, 255),
    "maroon": (128, 0, 0),
    "mediumaquamarine": (102, 205, 170),
    "mediumblue": (0, 0, 205),
    "mediumorchid": (186, 85, 211),
    "mediumpurple": (147, 112, 219),
    "mediumseagreen": (60, 179, 113),
    "mediumslateblue": (123, 104, 238),
    "mediumspringgreen": (0, 250, 154),
    "mediumturquoise": (72, 209, 204),
    "mediumvioletred": (199, 21, 133),
    "midnightblue": (25, 25, 112),
    "mintcream": (245, 255, 250),
    "mistyrose": (255, 228, 225),
    "moccasin": (255, 228, 181),
    "navajowhite": (255, 222, 173),
    "navy": (0, 0, 128),
    "oldlace": (253, 245, 230),
    "olive": (128, 128, 0),
    "olivedrab": (107, 142, 35),
    "orange": (255, 165, 0),
    "orangered": (255, 69, 0),
    "orchid": (218, 112, 214),
    "palegoldenrod": (238, 232, 170),
    "palegreen": (152, 251, 152),
    "paleturquoise": (175, 238, 238),
    "palevioletred": (219, 112, 147),
    "papayawhip": (255, 239, 213),
    "peachpuff": (255, 218, 185),
    "peru": (205, 133, 63),
    "pink": (255, 192, 203),
    "plum": (221, 160, 221),
    "powderblue": (176, 224, 230),
    "purple": (128, 0, 128),
    "red": (255, 0, 0),
    "rosybrown": (188, 143, 143),
    "royalblue": (65, 105, 225),
    "saddlebrown": (139, 69, 19),
    "salmon": (250, 128, 114),
    "sandybrown": (244, 164, 96),
    "seagreen": (46, 139, 87),
    "seashell": (255, 245, 238),
    "sienna": (160, 82, 45),
    "silver": (192, 192, 192),
    "skyblue": (135, 206, 235),
    "slateblue": (106, 90, 205),
    "slategray": (112, 128, 144),
    "slategrey": (112, 128, 144),
    "snow": (255, 250, 250),
    "springgreen": (0, 255, 127),
    "steelblue": (70, 130, 180),
    "tan": (210, 180, 140),
    "teal": (0, 128, 128),
    "thistle": (216, 191, 216),
    "tomato": (255, 99, 71),
    "turquoise": (64, 224, 208),
    "violet": (238, 130, 238),
    "wheat": (245, 222, 179),
    "whitesmoke": (245, 245, 245),
    "yellow": (255, 255, 0),
    "yellowgreen": (154, 205, 50),
}


def named_color(name: str) -> Optional[Color]:
    """
    Look up a color by its CSS/X11 name (case-insensitive).

    Returns:
        The color, or None if the name is unknown
    """
    rgb = X11_COLORS.get(name.strip().lower())
    if rgb is None:
        return None
    return Color.rgb(*rgb)


ALICEBLUE = Color.rgb(240, 248, 255)
ANTIQUEWHITE = Color.rgb(250, 235, 215)
AQUA = Color.rgb(0, 255, 255)
AQUAMARINE = Color.rgb(127, 255, 212)
AZURE = Color.rgb(240, 255, 255)
BEIGE = Color.rgb(245, 245, 220)
BISQUE = Color.rgb(255, 228, 196)
BLANCHEDALMOND = Color.rgb(255, 235, 205)
BLUE = Color.rgb(0, 0, 255)
BLUEVIOLET = Color.rgb(138, 43, 226)
BROWN = Color.rgb(165, 42, 42)
BURLYWOOD = Color.rgb(222, 184, 135)
CADETBLUE = Color.rgb(95, 158, 160)
CHARTREUSE = Color.rgb(127, 255, 0)
CHOCOLATE = Color.rgb(210, 105, 30)
CORAL = Color.rgb(255, 127, 80)
CORNFLOWERBLUE = Color.rgb(100, 149, 237)
CORNSILK = Color.rgb(255, 248, 220)
CRIMSON = Color.rgb(220, 20, 60)
CYAN = Color.rgb(0, 255, 255)
DARKBLUE = Color.rgb(0, 0, 139)
DARKCYAN = Color.rgb(0, 139, 139)
DARKGOLDENROD = Color.rgb(184, 134, 11)
DARKGRAY = Color.rgb(169, 169, 169)
DARKGREEN = Color.rgb(0, 100, 0)
DARKGREY = Color.rgb(169, 169, 169)
DARKKHAKI = Color.rgb(189, 183, 107)
DARKMAGENTA = Color.rgb(139, 0, 139)
DARKOLIVEGREEN = Color.rgb(85, 107, 47)
DARKORANGE = Color.rgb(255, 140, 0)
DARKORCHID = Color.rgb(153, 50, 204)
DARKRED = Color.rgb(139, 0, 0)
DARKSALMON = Color.rgb(233, 150, 122)
DARKSEAGREEN = Color.rgb(143, 188, 143)
DARKSLATEBLUE = Color.rgb(72, 61, 139)
DARKSLATEGRAY = Color.rgb(47, 79, 79)
DARKSLATEGREY = Color.rgb(47, 79, 79)
DARKTURQUOISE = Color.rgb(0, 206, 209)
DARKVIOLET = Color.rgb(148, 0, 211)
DEEPPINK = Color.rgb(255, 20, 147)
DEEPSKYBLUE = Color.rgb(0, 191, 255)
DIMGRAY = Color.rgb(105, 105, 105)
DIMGREY = Color.rgb(105, 105, 105)
DODGERBLUE = Color.rgb(30, 144, 255)
FIREBRICK = Color.rgb(178, 34, 34)
FLORALWHITE = Color.rgb(255, 250, 240)
FORESTGREEN = Color.rgb(34, 139, 34)
FUCHSIA = Color.rgb(255, 0, 255)
GAINSBORO = Color.rgb(220, 220, 220)
GHOSTWHITE = Color.rgb(248, 248, 255)
GOLD = Color.rgb(255, 215, 0)
GOLDENROD = Color.rgb(218, 165, 32)
GRAY = Color.rgb(128, 128, 128)
GREEN = Color.rgb(0, 128, 0)
GREENYELLOW = Color.rgb(173, 255, 47)
GREY = Color.rgb(128, 128, 128)
HONEYDEW = Color.rgb(240, 255, 240)
HOTPINK = Color.rgb(255, 105, 180)
INDIANRED = Color.rgb(205, 92, 92)
INDIGO = Color.rgb(75, 0, 130)
IVORY = Color.rgb(255, 255, 240)
KHAKI = Color.rgb(240, 230, 140)
LAVENDER = Color.rgb(230, 230, 250)
LAVENDERBLUSH = Color.rgb(255, 240, 245)
LAWNGREEN = Color.rgb(124, 252, 0)
LEMONCHIFFON = Color.rgb(255, 250, 205)
LIGHTBLUE = Color.rgb(173, 216, 230)
LIGHTCORAL = Color.rgb(240, 128, 128)
LIGHTCYAN = Color.rgb(224, 255, 255)
LIGHTGOLDENRODYELLOW = Color.rgb(250, 250, 210)
LIGHTGRAY = Color.rgb(211, 211, 211)
LIGHTGREEN = Color.rgb(144, 238, 144)
LIGHTGREY = Color.rgb(211, 211, 211)
LIGHTPINK = Color.rgb(255, 182, 193)
LIGHTSALMON = Color.rgb(255, 160, 122)
LIGHTSEAGREEN = Color.rgb(32, 178, 170)
LIGHTSKYBLUE = Color.rgb(135, 206, 250)
LIGHTSLATEGRAY = Color.rgb(119, 136, 153)
LIGHTSLATEGREY = Color.rgb(119, 136, 153)
LIGHTSTEELBLUE = Color.rgb(176, 196, 222)
LIGHTYELLOW = Color.rgb(255, 255, 224)
LIME = Color.rgb(0, 255, 0)
LIMEGREEN = Color.rgb(50, 205, 50)
LINEN = Color.rgb(250, 240, 230)
MAGENTA = Color.rgb(255, 0, 255)
MAROON = Color.rgb(128, 0, 0)
MEDIUMAQUAMARINE = Color.rgb(102, 205, 170)
MEDIUMBLUE = Color.rgb(0, 0, 205)
MEDIUMORCHID = Color.rgb(186, 85, 211)
MEDIUMPURPLE = Color.rgb(147, 112, 219)
MEDIUMSEAGREEN = Color.rgb(60, 179, 113)
MEDIUMSLATEBLUE = Color.rgb(123, 104, 238)
MEDIUMSPRINGGREEN = Color.rgb(0, 250, 154)
MEDIUMTURQUOISE = Color.rgb(72, 209, 204)
MEDIUMVIOLETRED = Color.rgb(199, 21, 133)
MIDNIGHTBLUE = Color.rgb(25, 25, 112)
MINTCREAM = Color.rgb(245, 255, 250)
MISTYROSE = Color.rgb(255, 228, 225)
MOCCASIN = Color.rgb(255, 228, 181)
NAVAJOWHITE = Color.rgb(255, 222, 173)
NAVY = Color.rgb(0, 0, 128)
OLDLACE = Color.rgb(253, 245, 230)
OLIVE = Color.rgb(128, 128, 0)
OLIVEDRAB = Color.rgb(107, 142, 35)
ORANGE = Color.rgb(255, 165, 0)
ORANGERED = Color.rgb(255, 69, 0)
ORCHID = Color.rgb(218, 112, 214)
PALEGOLDENROD = Color.rgb(238, 232, 170)
PALEGREEN = Color.rgb(152, 251, 152)
PALETURQUOISE = Color.rgb(175, 238, 238)
PALEVIOLETRED = Color.rgb(219, 112, 147)
PAPAYAWHIP = Color.rgb(255, 239, 213)
PEACHPUFF = Color.rgb(255, 218, 185)
PERU = Color.rgb(205, 133, 63)
PINK = Color.rgb(255, 192, 203)
PLUM = Color.rgb(221, 160, 221)
POWDERBLUE = Color.rgb(176, 224, 230)
PURPLE = Color.rgb(128, 0, 128)
RED = Color.rgb(255, 0, 0)
ROSYBROWN = Color.rgb(188, 143, 143)
ROYALBLUE = Color.rgb(65, 105, 225)
SADDLEBROWN = Color.rgb(139, 69, 19)
SALMON = Color.rgb(250, 128, 114)
SANDYBROWN = Color.rgb(244, 164, 96)
SEAGREEN = Color.rgb(46, 139, 87)
SEASHELL = Color.rgb(255, 245, 238)
SIENNA = Color.rgb(160, 82, 45)
SILVER = Color.rgb(192, 192, 192)
SKYBLUE = Color.rgb(135, 206, 235)
SLATEBLUE = Color.rgb(106, 90, 205)
SLATEGRAY = Color.rgb(112, 128, 144)
SLATEGREY = Color.rgb(112, 128, 144)
SNOW = Color.rgb(255, 250, 250)
SPRINGGREEN = Color.rgb(0, 255, 127)
STEELBLUE = Color.rgb(70, 130, 180)
TAN = Color.rgb(210, 180, 140)
TEAL = Color.rgb(0, 128, 128)
THISTLE = Color.rgb(216, 191, 216)
TOMATO = Color.rgb(255, 99, 71)
TURQUOISE = Color.rgb(64, 224, 208)
VIOLET = Color.rgb(238, 130, 238)
WHEAT = Color.rgb(245, 222, 179)
WHITESMOKE = Color.rgb(245, 245, 245)
YELLOW = Color.rgb(255, 255, 0)
YELLOWGREEN = Color.rgb(154, 205, 50)
