"""Color space conversions from 8-bit sRGB.

Provides:
    - sRGB -> CIE L*a*b* (D65, 2 degree observer)
    - L*a*b* -> LCh (cylindrical form, hue in degrees)
    - sRGB -> OKLCH (OKLab basis)
    - WCAG relative luminance
    - LCh -> L*a*b* -> linear RGB -> 8-bit sRGB (inverse path for tone solving)

Invariants:
    - Hue values are normalized into [0, 360)
    - CIE LCh and OKLCH share a shape but not a scale; they are distinct types
      so they cannot be averaged or diffed against each other by accident
    - Relative luminance uses the WCAG threshold 0.03928, the Lab path uses
      the IEC threshold 0.04045
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

__all__ = [
    "Lab",
    "Lch",
    "Oklch",
    "rgb_to_xyz",
    "rgb_to_lab",
    "lab_to_lch",
    "rgb_to_oklch",
    "relative_luminance",
    "lch_to_lab",
    "lab_to_linear_rgb",
    "linear_to_srgb8",
]

Lab = Tuple[float, float, float]

# Reference white (D65)
XN, YN, ZN = 0.95047, 1.0, 1.08883

_SRGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)
_XYZ_TO_SRGB = (
    (3.2406, -1.5372, -0.4986),
    (-0.9689, 1.8758, 0.0415),
    (0.0557, -0.2040, 1.0570),
)

_OKLAB_M1 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)
_OKLAB_M2 = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

_EPSILON = 0.008856
_KAPPA_SLOPE = 7.787


@dataclass(frozen=True)
class Lch:
    l: float
    c: float
    h: float

    def to_dict(self) -> Dict[str, float]:
        return {"L": self.l, "C": self.c, "H": self.h}


@dataclass(frozen=True)
class Oklch:
    l: float
    c: float
    h: float

    def to_dict(self) -> Dict[str, float]:
        return {"L": self.l, "C": self.c, "H": self.h}


def _srgb_channel_to_linear(c: int) -> float:
    v = c / 255.0
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


def _mat_mul(m: Tuple[Tuple[float, float, float], ...], v: Tuple[float, float, float]):
    return tuple(row[0] * v[0] + row[1] * v[1] + row[2] * v[2] for row in m)


def _hue_degrees(b: float, a: float) -> float:
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360.0
    # -1e-15 + 360 rounds to exactly 360.0
    if h >= 360.0:
        h -= 360.0
    return h


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    lin = (_srgb_channel_to_linear(r), _srgb_channel_to_linear(g), _srgb_channel_to_linear(b))
    x, y, z = _mat_mul(_SRGB_TO_XYZ, lin)
    return x, y, z


def _f(t: float) -> float:
    return t ** (1.0 / 3.0) if t > _EPSILON else _KAPPA_SLOPE * t + 16.0 / 116.0


def rgb_to_lab(r: int, g: int, b: int) -> Lab:
    x, y, z = rgb_to_xyz(r, g, b)
    fx = _f(x / XN)
    fy = _f(y / YN)
    fz = _f(z / ZN)
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def lab_to_lch(lab: Lab) -> Lch:
    l, a, b = lab
    return Lch(l=l, c=math.hypot(a, b), h=_hue_degrees(b, a))


def rgb_to_oklch(r: int, g: int, b: int) -> Oklch:
    lin = (_srgb_channel_to_linear(r), _srgb_channel_to_linear(g), _srgb_channel_to_linear(b))
    lms = _mat_mul(_OKLAB_M1, lin)
    # cube root of non-negative LMS responses
    lms_ = tuple(math.copysign(abs(v) ** (1.0 / 3.0), v) for v in lms)
    ok_l, ok_a, ok_b = _mat_mul(_OKLAB_M2, lms_)
    return Oklch(l=ok_l, c=math.hypot(ok_a, ok_b), h=_hue_degrees(ok_b, ok_a))


def relative_luminance(r: int, g: int, b: int) -> float:
    def channel(c: int) -> float:
        v = c / 255.0
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


# Inverse path -------------------------------------------------------------
def lch_to_lab(lch: Lch) -> Lab:
    rad = math.radians(lch.h)
    return lch.l, lch.c * math.cos(rad), lch.c * math.sin(rad)


def _f_inv(t: float) -> float:
    cube = t * t * t
    return cube if cube > _EPSILON else (t - 16.0 / 116.0) / _KAPPA_SLOPE


def lab_to_linear_rgb(lab: Lab) -> Tuple[float, float, float]:
    """Convert L*a*b* to linear (unclamped) sRGB; channels may leave [0, 1]."""
    l, a, b = lab
    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    xyz = (XN * _f_inv(fx), YN * _f_inv(fy), ZN * _f_inv(fz))
    r, g, bl = _mat_mul(_XYZ_TO_SRGB, xyz)
    return r, g, bl


def linear_to_srgb8(rgb: Tuple[float, float, float]) -> Tuple[int, int, int]:
    def encode(c: float) -> int:
        c = min(1.0, max(0.0, c))
        v = 12.92 * c if c <= 0.0031308 else 1.055 * c ** (1.0 / 2.4) - 0.055
        return int(round(v * 255.0))

    r, g, b = rgb
    return encode(r), encode(g), encode(b)
