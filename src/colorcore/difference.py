"""Perceptual color difference over L*a*b* pairs.

Provides:
    - delta_e76: CIE76, plain Euclidean distance in L*a*b*
    - delta_e2000: CIEDE2000 (Sharma, Wu & Dalal 2005)

Both are symmetric and return 0.0 for identical coordinates. CIEDE2000 is
checked against the 34 reference pairs published with the Sharma paper.
"""

from __future__ import annotations

import math

from .spaces import Lab

__all__ = ["delta_e76", "delta_e2000"]

_25_POW_7 = 25.0**7


def delta_e76(lab1: Lab, lab2: Lab) -> float:
    l1, a1, b1 = lab1
    l2, a2, b2 = lab2
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def _hue_prime(b: float, a_prime: float) -> float:
    if b == 0 and a_prime == 0:
        return 0.0
    h = math.degrees(math.atan2(b, a_prime))
    return h + 360.0 if h < 0 else h


def delta_e2000(
    lab1: Lab,
    lab2: Lab,
    kl: float = 1.0,
    kc: float = 1.0,
    kh: float = 1.0,
) -> float:
    """Compute the CIEDE2000 color difference.

    Parameters
    ----------
    lab1, lab2 : tuple[float, float, float]
        L*a*b* coordinates.
    kl, kc, kh : float
        Parametric weighting factors for lightness, chroma and hue (default 1).
    """
    l1, a1, b1 = lab1
    l2, a2, b2 = lab2

    # Chroma adjustment of a*
    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    c_bar_7 = ((c1 + c2) / 2.0) ** 7
    g = 0.5 * (1.0 - math.sqrt(c_bar_7 / (c_bar_7 + _25_POW_7)))
    a1p = (1.0 + g) * a1
    a2p = (1.0 + g) * a2
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)
    h1p = _hue_prime(b1, a1p)
    h2p = _hue_prime(b2, a2p)

    # Differences
    dlp = l2 - l1
    dcp = c2p - c1p
    chroma_product = c1p * c2p
    if chroma_product == 0:
        dhp = 0.0
    else:
        dhp = h2p - h1p
        if dhp > 180.0:
            dhp -= 360.0
        elif dhp < -180.0:
            dhp += 360.0
    dHp = 2.0 * math.sqrt(chroma_product) * math.sin(math.radians(dhp) / 2.0)

    # Means
    l_bar_p = (l1 + l2) / 2.0
    c_bar_p = (c1p + c2p) / 2.0
    h_sum = h1p + h2p
    if chroma_product == 0:
        h_bar_p = h_sum
    elif abs(h1p - h2p) <= 180.0:
        h_bar_p = h_sum / 2.0
    elif h_sum < 360.0:
        h_bar_p = (h_sum + 360.0) / 2.0
    else:
        h_bar_p = (h_sum - 360.0) / 2.0

    # Weighting functions
    t = (
        1.0
        - 0.17 * math.cos(math.radians(h_bar_p - 30.0))
        + 0.24 * math.cos(math.radians(2.0 * h_bar_p))
        + 0.32 * math.cos(math.radians(3.0 * h_bar_p + 6.0))
        - 0.20 * math.cos(math.radians(4.0 * h_bar_p - 63.0))
    )
    d_theta = 30.0 * math.exp(-(((h_bar_p - 275.0) / 25.0) ** 2))
    c_bar_p_7 = c_bar_p**7
    rc = 2.0 * math.sqrt(c_bar_p_7 / (c_bar_p_7 + _25_POW_7))
    l_dev_sq = (l_bar_p - 50.0) ** 2
    sl = 1.0 + (0.015 * l_dev_sq) / math.sqrt(20.0 + l_dev_sq)
    sc = 1.0 + 0.045 * c_bar_p
    sh = 1.0 + 0.015 * c_bar_p * t
    rt = -math.sin(math.radians(2.0 * d_theta)) * rc

    dl_term = dlp / (kl * sl)
    dc_term = dcp / (kc * sc)
    dh_term = dHp / (kh * sh)
    return math.sqrt(dl_term**2 + dc_term**2 + dh_term**2 + rt * dc_term * dh_term)
