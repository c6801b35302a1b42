"""Hex string, RGB triple and packed integer conversions.

Public API:
    hex_to_rgb("#3d8bfd") -> (61, 139, 253)
    rgb_to_hex(61, 139, 253) -> "#3d8bfd"
    rgb_to_argb / argb_to_rgb / hex_to_argb / argb_to_hex
    is_valid_hex / normalize_hex / random_hex

Accepted hex input is an optional leading '#' followed by exactly six hex
digits (case-insensitive). Output hex is always lowercase ``#rrggbb`` except
for ``random_hex`` which keeps the uppercase form used for generated seeds.
"""

from __future__ import annotations

import random as _random
import re
from typing import Optional, Tuple

from .errors import InvalidColorFormat

__all__ = [
    "RGB",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_argb",
    "argb_to_rgb",
    "hex_to_argb",
    "argb_to_hex",
    "is_valid_hex",
    "normalize_hex",
    "random_hex",
]

RGB = Tuple[int, int, int]

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def hex_to_rgb(value: str) -> RGB:
    if not isinstance(value, str):
        raise InvalidColorFormat(value, "expected a string")
    m = _HEX_PATTERN.fullmatch(value)
    if m is None:
        raise InvalidColorFormat(value)
    return int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16)


def _check_channel(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
        raise InvalidColorFormat(c, "channel must be an int in 0-255")
    return c


def rgb_to_hex(r: int, g: int, b: int) -> str:
    r, g, b = _check_channel(r), _check_channel(g), _check_channel(b)
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_argb(r: int, g: int, b: int) -> int:
    """Pack channels into an opaque 0xFFRRGGBB integer."""
    r, g, b = _check_channel(r), _check_channel(g), _check_channel(b)
    return (0xFF << 24) | (r << 16) | (g << 8) | b


def argb_to_rgb(argb: int) -> RGB:
    return (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF


def hex_to_argb(value: str) -> int:
    return rgb_to_argb(*hex_to_rgb(value))


def argb_to_hex(argb: int) -> str:
    return rgb_to_hex(*argb_to_rgb(argb))


def is_valid_hex(value: object) -> bool:
    return isinstance(value, str) and _HEX_PATTERN.fullmatch(value) is not None


def normalize_hex(value: str) -> str:
    return rgb_to_hex(*hex_to_rgb(value))


def random_hex(rng: Optional[_random.Random] = None) -> str:
    rng = rng or _random.Random()
    return f"#{rng.randrange(0x1000000):06X}"
