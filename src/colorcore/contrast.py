"""WCAG 2.x contrast evaluation.

Public API:
- contrast_ratio(a: str, b: str) -> float
- classify(ratio: float) -> WcagLevels
- evaluate_contrast(a: str, b: str) -> ContrastResult
- contrast_against(fg: str, backgrounds: Iterable[str], executor=None) -> list[ContrastResult]

Reported ratios are rounded to 3 decimals; pass/fail flags are computed from
the unrounded ratio. AA and AAA-Large share the 4.5 threshold as defined by
WCAG.
"""

from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .codec import hex_to_rgb
from .spaces import relative_luminance

__all__ = [
    "AA_THRESHOLD",
    "AA_LARGE_THRESHOLD",
    "AAA_THRESHOLD",
    "AAA_LARGE_THRESHOLD",
    "RATIO_DECIMALS",
    "WcagLevels",
    "ContrastResult",
    "contrast_ratio",
    "classify",
    "evaluate_contrast",
    "contrast_against",
]

AA_THRESHOLD = 4.5
AA_LARGE_THRESHOLD = 3.0
AAA_THRESHOLD = 7.0
AAA_LARGE_THRESHOLD = 4.5
RATIO_DECIMALS = 3


@dataclass(frozen=True)
class WcagLevels:
    aa: bool
    aa_large: bool
    aaa: bool
    aaa_large: bool

    def to_dict(self) -> Dict[str, bool]:
        return {
            "AA": self.aa,
            "AA_Large": self.aa_large,
            "AAA": self.aaa,
            "AAA_Large": self.aaa_large,
        }


@dataclass(frozen=True)
class ContrastResult:
    ratio: float  # rounded to RATIO_DECIMALS
    color_a: str
    color_b: str
    wcag: WcagLevels

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ratio": self.ratio,
            "colorA": self.color_a,
            "colorB": self.color_b,
            "wcag": self.wcag.to_dict(),
        }


def _luminance(color: str) -> float:
    return relative_luminance(*hex_to_rgb(color))


def contrast_ratio(a: str, b: str) -> float:
    l1 = _luminance(a)
    l2 = _luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def classify(ratio: float) -> WcagLevels:
    return WcagLevels(
        aa=ratio >= AA_THRESHOLD,
        aa_large=ratio >= AA_LARGE_THRESHOLD,
        aaa=ratio >= AAA_THRESHOLD,
        aaa_large=ratio >= AAA_LARGE_THRESHOLD,
    )


def evaluate_contrast(a: str, b: str) -> ContrastResult:
    ratio = contrast_ratio(a, b)
    return ContrastResult(
        ratio=round(ratio, RATIO_DECIMALS),
        color_a=a,
        color_b=b,
        wcag=classify(ratio),
    )


def contrast_against(
    fg: str,
    backgrounds: Iterable[str],
    executor: Optional[Executor] = None,
) -> List[ContrastResult]:
    """Evaluate one foreground against each background.

    Results follow the order of ``backgrounds``. When an executor is given the
    evaluations run through ``executor.map``, which also preserves input order.
    """
    bgs = list(backgrounds)
    if executor is None:
        return [evaluate_contrast(fg, bg) for bg in bgs]
    return list(executor.map(evaluate_contrast, [fg] * len(bgs), bgs))
