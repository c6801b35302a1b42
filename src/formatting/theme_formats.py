"""Theme token serialization.

Public API:
- format_theme(theme, fmt, prefix="", casing="kebab") -> str
- THEME_FORMATS: supported format names

``theme`` maps a variant name (``light`` / ``dark``) to role colors. Role
values are hex strings, or tuples of hex strings for tonal palettes. Output is
deterministic: variant and role order are preserved from the input mapping.

Tonal palettes stay lists in structured formats (json, js, ts, yaml); the
stylesheet and xml formats flatten them to ``<role>-<tone>`` entries.
"""

from __future__ import annotations

import html
import json
from typing import Any, Callable, Dict, List, Mapping, Sequence, Union

import yaml

from colorcore.errors import unsupported_format
from colorcore.tone_roles import RAMP_TONES

from .casing import to_case
from .tables import render_table

__all__ = ["THEME_FORMATS", "format_theme", "normalize_theme"]

RoleValue = Union[str, Sequence[str]]
ThemeData = Mapping[str, Mapping[str, RoleValue]]

_STRUCTURED = ("json", "ts", "js", "yaml")


def normalize_theme(theme: ThemeData, prefix: str = "", casing: str = "kebab") -> Dict[str, Dict[str, Any]]:
    """Apply prefix/casing to role keys and turn tuples into lists."""
    out: Dict[str, Dict[str, Any]] = {}
    for variant, colors in theme.items():
        out[variant] = {
            f"{prefix}{to_case(role, casing)}": value if isinstance(value, str) else list(value)
            for role, value in colors.items()
        }
    return out


def _flatten(theme: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, str]]:
    flat: Dict[str, Dict[str, str]] = {}
    for variant, colors in theme.items():
        entries: Dict[str, str] = {}
        for key, value in colors.items():
            if isinstance(value, list):
                for tone, color in zip(RAMP_TONES, value):
                    entries[f"{key}-{tone}"] = color
            else:
                entries[key] = value
        flat[variant] = entries
    return flat


def _json(theme: Dict[str, Any]) -> str:
    return json.dumps(theme, indent=2)


def _ts(theme: Dict[str, Any]) -> str:
    return f"export const theme = {_json(theme)};"


def _js(theme: Dict[str, Any]) -> str:
    return f"const theme = {_json(theme)};\nexport {{ theme }}"


def _yaml(theme: Dict[str, Any]) -> str:
    return yaml.safe_dump(theme, sort_keys=False, default_flow_style=False)


def _css(theme: Dict[str, Dict[str, str]]) -> str:
    blocks = []
    for variant, colors in theme.items():
        body = "".join(f"  --{k}: {v};\n" for k, v in colors.items())
        blocks.append(f".{variant} {{\n{body}}}\n")
    return "".join(blocks).strip()


def _scss(theme: Dict[str, Dict[str, str]]) -> str:
    blocks = []
    for variant, colors in theme.items():
        body = "".join(f"  ${k}: {v};\n" for k, v in colors.items())
        blocks.append(f"@mixin {variant}-theme() {{\n{body}}}\n\n")
    return "".join(blocks).strip()


def _less(theme: Dict[str, Dict[str, str]]) -> str:
    blocks = []
    for variant, colors in theme.items():
        body = "".join(f"  @{k}: {v};\n" for k, v in colors.items())
        blocks.append(f".{variant}-theme() {{\n{body}}}\n\n")
    return "".join(blocks).strip()


def _styl(theme: Dict[str, Dict[str, str]]) -> str:
    blocks = []
    for variant, colors in theme.items():
        body = "".join(f"  {k} = {v}\n" for k, v in colors.items())
        blocks.append(f"{variant}-theme()\n{body}\n")
    return "".join(blocks).strip()


def _xml(theme: Dict[str, Dict[str, str]]) -> str:
    lines: List[str] = ["<theme>"]
    for variant, colors in theme.items():
        lines.append(f"  <{variant}>")
        lines.extend(
            f'    <color name="{html.escape(k)}">{html.escape(v)}</color>' for k, v in colors.items()
        )
        lines.append(f"  </{variant}>")
    lines.append("</theme>")
    return "\n".join(lines)


def _table(theme: Dict[str, Dict[str, str]]) -> str:
    return "\n\n".join(
        render_table(("Token", "Color"), colors.items(), title=f"Scheme: {variant}")
        for variant, colors in theme.items()
    )


_WRITERS: Dict[str, Callable[[Dict[str, Any]], str]] = {
    "json": _json,
    "ts": _ts,
    "js": _js,
    "yaml": _yaml,
    "css": _css,
    "scss": _scss,
    "less": _less,
    "styl": _styl,
    "xml": _xml,
    "table": _table,
}

THEME_FORMATS = tuple(_WRITERS)


def format_theme(theme: ThemeData, fmt: str, prefix: str = "", casing: str = "kebab") -> str:
    writer = _WRITERS.get(fmt)
    if writer is None:
        return unsupported_format(fmt)
    data = normalize_theme(theme, prefix, casing)
    if fmt not in _STRUCTURED:
        data = _flatten(data)
    return writer(data)
