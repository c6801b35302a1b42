"""Seed scheme backed by CIE LCh tone solving.

A drop-in implementation of the ``SeedScheme`` and ``HctSolver`` capabilities
that uses CIE L* as the tone axis (HCT defines tone as L*), CIE LCh hue and
chroma in place of CAM16 hue/chroma.

Approach:
 - ``from_hct`` keeps L* equal to the requested tone and bisects chroma down
   until the color fits sRGB. Chroma 0 (a gray of that L*) always fits, so
   the solver is total and relative luminance is monotonic in tone.
 - Core palettes follow the Material baseline derivation from the seed hue:
   primary keeps at least chroma 48, secondary 16, tertiary is rotated 60
   degrees at chroma 24, neutrals carry 4 and 8, error is fixed at 25/84.
 - Canonical role tones follow the Material baseline light/dark schemes.

Values are on the LCh scale, so hue/chroma differ numerically from a CAM16
HCT implementation; tone matches.
"""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

from colorcore.codec import hex_to_rgb, rgb_to_hex
from colorcore.spaces import Lch, lab_to_lch, lab_to_linear_rgb, lch_to_lab, linear_to_srgb8, rgb_to_lab
from colorcore.tone_roles import PALETTE_FAMILIES

__all__ = ["SCHEME_TONES", "LchToneSolver", "LchSeedScheme"]

# role -> (palette family, light tone, dark tone)
SCHEME_TONES: Mapping[str, Tuple[str, int, int]] = {
    "primary": ("primary", 40, 80),
    "onPrimary": ("primary", 100, 20),
    "primaryContainer": ("primary", 90, 30),
    "onPrimaryContainer": ("primary", 10, 90),
    "secondary": ("secondary", 40, 80),
    "onSecondary": ("secondary", 100, 20),
    "secondaryContainer": ("secondary", 90, 30),
    "onSecondaryContainer": ("secondary", 10, 90),
    "tertiary": ("tertiary", 40, 80),
    "onTertiary": ("tertiary", 100, 20),
    "tertiaryContainer": ("tertiary", 90, 30),
    "onTertiaryContainer": ("tertiary", 10, 90),
    "error": ("error", 40, 80),
    "onError": ("error", 100, 20),
    "errorContainer": ("error", 90, 30),
    "onErrorContainer": ("error", 10, 80),
    "background": ("neutral", 99, 10),
    "onBackground": ("neutral", 10, 90),
    "surface": ("neutral", 99, 10),
    "onSurface": ("neutral", 10, 90),
    "surfaceVariant": ("neutralVariant", 90, 30),
    "onSurfaceVariant": ("neutralVariant", 30, 80),
    "outline": ("neutralVariant", 50, 60),
    "shadow": ("neutral", 0, 0),
    "scrim": ("neutral", 0, 0),
    "inverseSurface": ("neutral", 20, 90),
    "inverseOnSurface": ("neutral", 95, 20),
    "inversePrimary": ("primary", 80, 40),
}

_GAMUT_EPS = 1e-3


def _in_gamut(rgb: Tuple[float, float, float]) -> bool:
    return all(-_GAMUT_EPS <= c <= 1.0 + _GAMUT_EPS for c in rgb)


class LchToneSolver:
    """Hue/chroma/tone solver on the CIE LCh cylinder."""

    def __init__(self, iterations: int = 24) -> None:
        self.iterations = iterations

    def hct(self, color: str) -> Tuple[float, float, float]:
        lch = lab_to_lch(rgb_to_lab(*hex_to_rgb(color)))
        return lch.h, lch.c, lch.l

    def from_hct(self, hue: float, chroma: float, tone: float) -> str:
        tone = min(100.0, max(0.0, float(tone)))
        # L* 0 and 100 admit no chroma
        if tone == 0.0:
            return "#000000"
        if tone == 100.0:
            return "#ffffff"
        chroma = max(0.0, float(chroma))
        return rgb_to_hex(*linear_to_srgb8(self._fit(hue % 360.0, chroma, tone)))

    def _linear(self, hue: float, chroma: float, tone: float) -> Tuple[float, float, float]:
        return lab_to_linear_rgb(lch_to_lab(Lch(l=tone, c=chroma, h=hue)))

    def _fit(self, hue: float, chroma: float, tone: float) -> Tuple[float, float, float]:
        candidate = self._linear(hue, chroma, tone)
        if _in_gamut(candidate):
            return candidate
        lo, hi = 0.0, chroma
        best = self._linear(hue, 0.0, tone)
        for _ in range(self.iterations):
            mid = (lo + hi) / 2.0
            trial = self._linear(hue, mid, tone)
            if _in_gamut(trial):
                lo, best = mid, trial
            else:
                hi = mid
        return best


class LchSeedScheme:
    """Material baseline scheme derived from a seed color."""

    def __init__(self, seed: str, solver: LchToneSolver | None = None) -> None:
        self.solver = solver or LchToneSolver()
        self.seed = seed
        hue, chroma, _tone = self.solver.hct(seed)
        self._palettes: Dict[str, Tuple[float, float]] = {
            "primary": (hue, max(48.0, chroma)),
            "secondary": (hue, 16.0),
            "tertiary": ((hue + 60.0) % 360.0, 24.0),
            "neutral": (hue, 4.0),
            "neutralVariant": (hue, 8.0),
            "error": (25.0, 84.0),
        }

    def palette_key(self, family: str) -> Tuple[float, float]:
        if family not in PALETTE_FAMILIES:
            raise KeyError(f"Unknown palette family: {family}")
        return self._palettes[family]

    def tone(self, family: str, t: float) -> str:
        hue, chroma = self.palette_key(family)
        return self.solver.from_hct(hue, chroma, t)

    def scheme(self, light: bool) -> Dict[str, str]:
        return {
            role: self.tone(family, light_tone if light else dark_tone)
            for role, (family, light_tone, dark_tone) in SCHEME_TONES.items()
        }
