"""Variable name casing for exported tokens.

``to_case("surfaceContainerHigh", "kebab") == "surface-container-high"``.
Input is split on camelCase boundaries, whitespace, '_' and '-'.
"""

from __future__ import annotations

import re

__all__ = ["to_case"]

_UPPER = re.compile(r"([A-Z])")
_SEPARATORS = re.compile(r"[\s_-]+")


def _split(name: str) -> list[str]:
    return [p for p in _SEPARATORS.split(_UPPER.sub(r" \1", name).strip()) if p]


def to_case(name: str, casing: str) -> str:
    parts = _split(name)
    if casing == "camel":
        return "".join(
            p[0].lower() + p[1:] if i == 0 else p[0].upper() + p[1:].lower()
            for i, p in enumerate(parts)
        )
    if casing == "pascal":
        return "".join(p[0].upper() + p[1:].lower() for p in parts)
    # kebab is also the fallback for unknown casings
    return "-".join(p.lower() for p in parts)
