"""Dominant color sampling from raster images.

Downscales the image to a small grid and returns the most frequent pixel
color (histogram mode). Ties resolve to the color encountered first in
row-major order. This is a coarse seed picker, not a quantizer: photos with
gradients produce whichever grid cell color repeats most.

Public API:
- dominant_color_from_pixels(pixels) -> "#rrggbb"
- sample_dominant_color(source, grid=16) -> "#rrggbb"
"""

from __future__ import annotations

import io
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Tuple, Union

from PIL import Image

from colorcore.codec import rgb_to_hex
from config import settings

__all__ = ["ImageSource", "dominant_color_from_pixels", "sample_dominant_color"]

_logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, Image.Image]


def dominant_color_from_pixels(pixels: Iterable[Tuple[int, ...]]) -> str:
    counts: Counter[Tuple[int, int, int]] = Counter()
    for px in pixels:
        counts[(px[0], px[1], px[2])] += 1
    if not counts:
        return "#000000"
    # Counter.most_common keeps first-seen order among equal counts
    (r, g, b), _count = counts.most_common(1)[0]
    return rgb_to_hex(r, g, b)


def _open(source: ImageSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, bytes):
        return Image.open(io.BytesIO(source))
    path = Path(source).resolve()
    _logger.info("Loading image: %s", path)
    return Image.open(path)


def sample_dominant_color(source: ImageSource, grid: int = settings.SAMPLE_GRID) -> str:
    img = _open(source)
    small = img.convert("RGB").resize((grid, grid))
    raw = small.tobytes()
    color = dominant_color_from_pixels(raw[i : i + 3] for i in range(0, len(raw), 3))
    _logger.debug("Dominant color %s from %dx%d grid", color, grid, grid)
    return color
