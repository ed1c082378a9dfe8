"""Conversion module"""
from __future__ import annotations

__all__ = ['ConvertColour']

from typing import Final, Tuple

from .misc import clamp_value
from .types import Tup3, Tup3Str


class ConvertColour:
    """
    Colour conversion class

    RGB values are normalised in the range 0.0 - 1.0 unless stated otherwise,
    hues are in degrees.
    """

    RGB_MAX: Final[int] = 255
    HUE_SECTOR: Final[float] = 60.
    HUE_MAX: Final[float] = 360.

    @classmethod
    def hue(cls, r: float, g: float, b: float, cmax: float, delta: float) -> float:
        """
        Hue shared by the HSL and HSV decompositions

        :param r:           Red value
        :param g:           Green value
        :param b:           Blue value
        :param cmax:        Biggest value among r, g and b
        :param delta:       cmax minus the smallest value among r, g and b
        :return:            Hue in degrees in the range 0.0 - 360.0 (exclusive)
        """
        if delta == 0:
            return 0.
        if cmax == r:
            h = cls.HUE_SECTOR * (((g - b) / delta) % 6)
        elif cmax == g:
            h = cls.HUE_SECTOR * ((b - r) / delta + 2)
        else:
            h = cls.HUE_SECTOR * ((r - g) / delta + 4)
        if h < 0:
            h += cls.HUE_MAX
        return h % cls.HUE_MAX

    @classmethod
    def sector(cls, h: float, c: float, x: float) -> Tuple[float, float, float]:
        """
        Place chroma and the intermediate value on the channels selected by the hue

        :param h:           Hue in degrees
        :param c:           Chroma
        :param x:           Intermediate value
        :return:            Tuple of r, g and b before the lightness or value offset
        """
        h %= cls.HUE_MAX
        if 0 <= h and h < 60:
            return c, x, 0.
        if 60 <= h and h < 120:
            return x, c, 0.
        if 120 <= h and h < 180:
            return 0., c, x
        if 180 <= h and h < 240:
            return 0., x, c
        if 240 <= h and h < 300:
            return x, 0., c
        return c, 0., x

    @classmethod
    def _intermediate(cls, h: float, c: float) -> float:
        return c * (1 - abs((h / cls.HUE_SECTOR) % 2 - 1))

    # -------------------------------------------------------------------------
    # ---------------------------- RGB Conversions ----------------------------
    # -------------------------------------------------------------------------
    @staticmethod
    def byte_to_hex(v: int) -> str:
        return format(v, '02x')

    @staticmethod
    def hex_to_byte(h: str) -> int:
        return int(h, 16)

    @classmethod
    def rgb_to_hex(cls, r: int, g: int, b: int) -> Tup3Str:
        """RGB values in the range 0 - 255 to three two-digit hexadecimal strings"""
        return cls.byte_to_hex(r), cls.byte_to_hex(g), cls.byte_to_hex(b)

    @classmethod
    def hex_to_rgb(cls, r: str, g: str, b: str) -> Tup3[int]:
        """Three hexadecimal strings to RGB values in the range 0 - 255"""
        return cls.hex_to_byte(r), cls.hex_to_byte(g), cls.hex_to_byte(b)

    @staticmethod
    def rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
        # http://www.rapidtables.com/convert/color/rgb-to-cmyk.htm
        k = 1 - max(r, g, b)
        if k == 1:
            return 0., 0., 0., 1.
        c, m, y = ((1 - v - k) / (1 - k) for v in (r, g, b))
        return (
            clamp_value(c, 0., 1.), clamp_value(m, 0., 1.),
            clamp_value(y, 0., 1.), clamp_value(k, 0., 1.)
        )

    @staticmethod
    def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Tup3[float]:
        # http://www.rapidtables.com/convert/color/cmyk-to-rgb.htm
        return (1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)

    @classmethod
    def rgb_to_hsl(cls, r: float, g: float, b: float) -> Tup3[float]:
        # http://www.rapidtables.com/convert/color/rgb-to-hsl.htm
        cmax, cmin = max(r, g, b), min(r, g, b)
        delta = cmax - cmin
        h = cls.hue(r, g, b, cmax, delta)
        l = (cmax + cmin) / 2
        s = 0. if delta == 0 else delta / (1 - abs(2 * l - 1))
        return h, clamp_value(s, 0., 1.), clamp_value(l, 0., 1.)

    @classmethod
    def rgb_to_hsv(cls, r: float, g: float, b: float) -> Tup3[float]:
        # http://www.rapidtables.com/convert/color/rgb-to-hsv.htm
        cmax, cmin = max(r, g, b), min(r, g, b)
        delta = cmax - cmin
        h = cls.hue(r, g, b, cmax, delta)
        s = 0. if cmax == 0 else delta / cmax
        return h, clamp_value(s, 0., 1.), clamp_value(cmax, 0., 1.)

    # -------------------------------------------------------------------------
    # ------------------------ Hue based Conversions --------------------------
    # -------------------------------------------------------------------------
    @classmethod
    def hsl_to_rgb(cls, h: float, s: float, l: float) -> Tup3[float]:
        # http://www.rapidtables.com/convert/color/hsl-to-rgb.htm
        c = (1 - abs(2 * l - 1)) * s
        x = cls._intermediate(h, c)
        m = l - c / 2
        r, g, b = cls.sector(h, c, x)
        return (
            clamp_value(r + m, 0., 1.), clamp_value(g + m, 0., 1.), clamp_value(b + m, 0., 1.)
        )

    @classmethod
    def hsv_to_rgb(cls, h: float, s: float, v: float) -> Tup3[float]:
        # http://www.rapidtables.com/convert/color/hsv-to-rgb.htm
        c = s * v
        x = cls._intermediate(h, c)
        m = v - c
        r, g, b = cls.sector(h, c, x)
        return (
            clamp_value(r + m, 0., 1.), clamp_value(g + m, 0., 1.), clamp_value(b + m, 0., 1.)
        )

    # -------------------------------------------------------------------------
    # ----------------------------- 8 bit helpers -----------------------------
    # -------------------------------------------------------------------------
    @classmethod
    def normalise(cls, r: int, g: int, b: int) -> Tup3[float]:
        """RGB values in the range 0 - 255 to the range 0.0 - 1.0"""
        return r / cls.RGB_MAX, g / cls.RGB_MAX, b / cls.RGB_MAX

    @classmethod
    def denormalise(cls, r: float, g: float, b: float) -> Tup3[int]:
        """RGB values in the range 0.0 - 1.0 to the nearest integers in the range 0 - 255"""
        return round(r * cls.RGB_MAX), round(g * cls.RGB_MAX), round(b * cls.RGB_MAX)

    @classmethod
    def whole_hue(cls, h: float) -> int:
        """Round a hue to whole degrees in the range 0 - 359"""
        return round(h) % int(cls.HUE_MAX)
