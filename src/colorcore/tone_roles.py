"""Tone role derivation for Material 3 themes.

Turns a seed-derived scheme (canonical light/dark role colors plus per-family
tone lookup) into the complete role set, including the surface elevation
roles that the baseline scheme does not carry.

Capabilities consumed:
    SeedScheme  - ``scheme(light)`` canonical role colors and
                  ``tone(family, t)`` palette lookup for t in [0, 100]
    HctSolver   - ``hct(color)`` -> (hue, chroma, tone) and
                  ``from_hct(hue, chroma, tone)`` -> hex

Any HCT implementation (or a substitute with a lightness-like tone axis) can
back these; this module never computes color appearance internals itself.

The ``TONE_OFFSETS`` table is literal Material Design 3 data. Changing a value
is a compatibility break for every exported token set.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import Dict, Iterator, Mapping, Protocol, Tuple, runtime_checkable

from .codec import hex_to_rgb

__all__ = [
    "PALETTE_FAMILIES",
    "THEME_ROLES",
    "TONE_OFFSETS",
    "CANONICAL_ROLES",
    "RAMP_ROLES",
    "RAMP_TONES",
    "SeedScheme",
    "HctSolver",
    "ToneRoleSet",
    "map_tone_roles",
    "map_theme",
    "tonal_ramp",
    "tonal_ramps",
]

PALETTE_FAMILIES: Tuple[str, ...] = (
    "primary",
    "secondary",
    "tertiary",
    "neutral",
    "neutralVariant",
    "error",
)

# Emission order of a theme; formatters keep it as-is.
THEME_ROLES: Tuple[str, ...] = (
    "primary",
    "onPrimary",
    "primaryContainer",
    "onPrimaryContainer",
    "secondary",
    "onSecondary",
    "secondaryContainer",
    "onSecondaryContainer",
    "tertiary",
    "onTertiary",
    "tertiaryContainer",
    "onTertiaryContainer",
    "error",
    "onError",
    "errorContainer",
    "onErrorContainer",
    "background",
    "onBackground",
    "surface",
    "onSurface",
    "surfaceVariant",
    "onSurfaceVariant",
    "outline",
    "outlineVariant",
    "shadow",
    "scrim",
    "inverseSurface",
    "inverseOnSurface",
    "inversePrimary",
    "surfaceTint",
    "surfaceDim",
    "surfaceBright",
    "surfaceContainerLowest",
    "surfaceContainerLow",
    "surfaceContainer",
    "surfaceContainerHigh",
    "surfaceContainerHighest",
)

# role -> (palette family, light tone, dark tone)
TONE_OFFSETS: Mapping[str, Tuple[str, int, int]] = {
    "outlineVariant": ("neutralVariant", 80, 30),
    "surfaceTint": ("neutral", 40, 80),
    "surfaceDim": ("neutral", 87, 6),
    "surfaceBright": ("neutral", 98, 24),
    "surfaceContainerLowest": ("neutral", 100, 4),
    "surfaceContainerLow": ("neutral", 96, 10),
    "surfaceContainer": ("neutral", 94, 12),
    "surfaceContainerHigh": ("neutral", 92, 17),
    "surfaceContainerHighest": ("neutral", 90, 22),
}

CANONICAL_ROLES: Tuple[str, ...] = tuple(r for r in THEME_ROLES if r not in TONE_OFFSETS)

RAMP_ROLES: Tuple[str, ...] = (
    "primary",
    "secondary",
    "tertiary",
    "error",
    "background",
    "surface",
)
RAMP_TONES: Tuple[int, ...] = tuple(range(0, 101, 10))


@runtime_checkable
class SeedScheme(Protocol):  # pragma: no cover - structural
    def scheme(self, light: bool) -> Mapping[str, str]: ...

    def tone(self, family: str, t: float) -> str: ...


@runtime_checkable
class HctSolver(Protocol):  # pragma: no cover - structural
    def hct(self, color: str) -> Tuple[float, float, float]: ...

    def from_hct(self, hue: float, chroma: float, tone: float) -> str: ...


class ToneRoleSet(MappingABC):
    """Immutable role -> hex mapping for one light/dark variant."""

    __slots__ = ("_colors", "_light")

    def __init__(self, colors: Mapping[str, str], *, light: bool) -> None:
        self._colors: Dict[str, str] = dict(colors)
        self._light = light

    @property
    def light(self) -> bool:
        return self._light

    @property
    def variant(self) -> str:
        return "light" if self._light else "dark"

    def __getitem__(self, role: str) -> str:
        return self._colors[role]

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        return f"ToneRoleSet({self.variant}, {len(self)} roles)"

    def to_dict(self) -> Dict[str, str]:
        return dict(self._colors)


def _checked(color: str) -> str:
    # Oracle output passes through unchanged once it is a valid hex color.
    hex_to_rgb(color)
    return color if color.startswith("#") else f"#{color}"


def map_tone_roles(scheme: SeedScheme, light: bool) -> ToneRoleSet:
    base = scheme.scheme(light)
    colors: Dict[str, str] = {}
    for role in THEME_ROLES:
        offset = TONE_OFFSETS.get(role)
        if offset is not None:
            family, light_tone, dark_tone = offset
            value = scheme.tone(family, light_tone if light else dark_tone)
        else:
            try:
                value = base[role]
            except KeyError:
                raise KeyError(f"Scheme is missing canonical role: {role}") from None
        colors[role] = _checked(value)
    return ToneRoleSet(colors, light=light)


def map_theme(scheme: SeedScheme) -> Dict[str, ToneRoleSet]:
    return {
        "light": map_tone_roles(scheme, True),
        "dark": map_tone_roles(scheme, False),
    }


def tonal_ramp(solver: HctSolver, color: str) -> Tuple[str, ...]:
    """Sweep tone 0..100 (step 10) at the hue/chroma of ``color``."""
    hue, chroma, _tone = solver.hct(color)
    return tuple(solver.from_hct(hue, chroma, t) for t in RAMP_TONES)


def tonal_ramps(solver: HctSolver, roles: Mapping[str, str]) -> Dict[str, Tuple[str, ...]]:
    return {role: tonal_ramp(solver, roles[role]) for role in RAMP_ROLES}
