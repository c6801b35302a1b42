"""Material theme service facade.

Glue between seed resolution, the tone role engine and the record shapes the
CLI prints. Functions here return plain data (``ToneRoleSet`` / dict / tuple);
formatting is left to ``formatting``.

Public API:
- generate_theme(seed, variant="both", ...) -> {"light"?: ToneRoleSet, "dark"?: ToneRoleSet}
- generate_palette(seed, variant="both", ...) -> {"light"?: {role: ramp}, "dark"?: {...}}
- color_info(color, extended=False, distance=None) -> ordered dict record
- contrast_report(colors, backgrounds=None) -> list[ContrastResult]

The ``hct`` record field holds whatever the solver reports. With the default
``LchToneSolver`` tone is L* while hue and chroma are on the CIE LCh scale,
not CAM16.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from colorcore.codec import hex_to_rgb, normalize_hex
from colorcore.contrast import ContrastResult, contrast_against, evaluate_contrast
from colorcore.difference import delta_e76, delta_e2000
from colorcore.errors import MissingInput
from colorcore.spaces import lab_to_lch, relative_luminance, rgb_to_lab, rgb_to_oklch
from colorcore.tone_roles import HctSolver, SeedScheme, ToneRoleSet, map_tone_roles, tonal_ramps
from config import settings
from scheme import LchSeedScheme, LchToneSolver, apply_overrides

__all__ = [
    "VARIANTS",
    "generate_theme",
    "generate_palette",
    "color_info",
    "contrast_report",
]

_logger = logging.getLogger(__name__)

VARIANTS: Dict[str, Tuple[str, ...]] = {
    "light": ("light",),
    "dark": ("dark",),
    "both": ("light", "dark"),
}

SchemeFactory = Callable[[str, HctSolver], SeedScheme]


def _default_factory(seed: str, solver: HctSolver) -> SeedScheme:
    return LchSeedScheme(seed, solver=solver)  # type: ignore[arg-type]


def _variants(variant: str) -> Tuple[str, ...]:
    try:
        return VARIANTS[variant]
    except KeyError:
        raise ValueError(f"Unknown theme variant: {variant!r}") from None


def _role_sets(
    seed: str,
    variant: str,
    hue: Optional[float],
    chroma: Optional[float],
    tone: Optional[float],
    solver: Optional[HctSolver],
    scheme_factory: Optional[SchemeFactory],
) -> Tuple[HctSolver, Dict[str, ToneRoleSet]]:
    names = _variants(variant)
    solver = solver or LchToneSolver()
    seed = apply_overrides(normalize_hex(seed), hue=hue, chroma=chroma, tone=tone, solver=solver)
    scheme = (scheme_factory or _default_factory)(seed, solver)
    _logger.debug("Seed scheme built from %s", seed)
    return solver, {name: map_tone_roles(scheme, name == "light") for name in names}


def generate_theme(
    seed: str,
    variant: str = "both",
    *,
    hue: Optional[float] = None,
    chroma: Optional[float] = None,
    tone: Optional[float] = None,
    solver: Optional[HctSolver] = None,
    scheme_factory: Optional[SchemeFactory] = None,
) -> Dict[str, ToneRoleSet]:
    _logger.info("Generating theme...")
    _solver, roles = _role_sets(seed, variant, hue, chroma, tone, solver, scheme_factory)
    return roles


def generate_palette(
    seed: str,
    variant: str = "both",
    *,
    hue: Optional[float] = None,
    chroma: Optional[float] = None,
    tone: Optional[float] = None,
    solver: Optional[HctSolver] = None,
    scheme_factory: Optional[SchemeFactory] = None,
) -> Dict[str, Dict[str, Tuple[str, ...]]]:
    """Tonal ramps (tones 0..100 step 10) for the ramp roles of each variant."""
    _logger.info("Generating palette...")
    solver, roles = _role_sets(seed, variant, hue, chroma, tone, solver, scheme_factory)
    return {name: tonal_ramps(solver, role_set) for name, role_set in roles.items()}


def color_info(
    color: str,
    extended: bool = False,
    distance: Optional[str] = None,
    solver: Optional[HctSolver] = None,
) -> Dict[str, Any]:
    solver = solver or LchToneSolver()
    hex_value = normalize_hex(color)
    hue, chroma, tone = solver.hct(hex_value)
    places = settings.HCT_DECIMALS
    info: Dict[str, Any] = {
        "hex": hex_value,
        "hct": {
            # rounding can land on 360.0
            "hue": round(hue, places) % 360.0,
            "chroma": round(chroma, places),
            "tone": round(tone, places),
        },
    }
    rgb = hex_to_rgb(hex_value)
    lab = rgb_to_lab(*rgb)
    if extended:
        info["extended"] = {
            "lab": list(lab),
            "lch": lab_to_lch(lab).to_dict(),
            "oklch": rgb_to_oklch(*rgb).to_dict(),
            "luminance": relative_luminance(*rgb),
        }
    if distance:
        target = normalize_hex(distance)
        target_lab = rgb_to_lab(*hex_to_rgb(target))
        info["distance"] = {
            "target": target,
            "deltaE76": delta_e76(lab, target_lab),
            "deltaE00": delta_e2000(lab, target_lab),
        }
    _logger.debug("Color info for %s: %s", hex_value, info["hct"])
    return info


def contrast_report(
    colors: Sequence[str],
    backgrounds: Optional[Sequence[str]] = None,
    executor: Optional[Executor] = None,
) -> List[ContrastResult]:
    """Contrast of two colors, or of one color against each background.

    With backgrounds the result order follows ``backgrounds``.
    """
    if backgrounds and len(colors) == 1:
        _logger.info("Contrast of %s against %d backgrounds", colors[0], len(backgrounds))
        return contrast_against(colors[0], backgrounds, executor=executor)
    if len(colors) != 2:
        raise MissingInput("Contrast requires two colors or one color with --bg.")
    return [evaluate_contrast(colors[0], colors[1])]
