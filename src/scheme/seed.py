"""Seed color resolution.

A theme starts from one seed color, picked by precedence:
    1. dominant color of an image, when one is given
    2. a random color, when requested
    3. the explicit hex color

Optional hue/chroma/tone overrides are applied through an ``HctSolver`` by
reading the seed's coordinates, replacing the overridden ones and solving back
to a color.
"""

from __future__ import annotations

import logging
import random as _random
from typing import Optional

from colorcore.codec import hex_to_rgb, random_hex
from colorcore.errors import MissingInput
from colorcore.tone_roles import HctSolver
from config import settings
from imaging.dominant_color import ImageSource, sample_dominant_color

from .lch_scheme import LchToneSolver

__all__ = ["resolve_seed", "apply_overrides"]

_logger = logging.getLogger(__name__)


def resolve_seed(
    color: Optional[str] = None,
    *,
    image: Optional[ImageSource] = None,
    random: bool = False,
    rng: Optional[_random.Random] = None,
    grid: int = settings.SAMPLE_GRID,
) -> str:
    if image is not None:
        seed = sample_dominant_color(image, grid=grid)
        _logger.info("Using dominant image color as seed: %s", seed)
        return seed
    if random:
        seed = random_hex(rng)
        _logger.info("Generated random seed color: %s", seed)
        return seed
    if not color:
        raise MissingInput("No input color or image provided.")
    hex_to_rgb(color)
    return color if color.startswith("#") else f"#{color}"


def apply_overrides(
    seed: str,
    *,
    hue: Optional[float] = None,
    chroma: Optional[float] = None,
    tone: Optional[float] = None,
    solver: Optional[HctSolver] = None,
) -> str:
    if hue is None and chroma is None and tone is None:
        return seed
    solver = solver or LchToneSolver()
    h, c, t = solver.hct(seed)
    adjusted = solver.from_hct(
        h if hue is None else hue,
        c if chroma is None else chroma,
        t if tone is None else tone,
    )
    _logger.info("Applied seed overrides %s -> %s", seed, adjusted)
    return adjusted
