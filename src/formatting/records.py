"""Serialization of color info and contrast records.

Records arrive with their field order already fixed by the builders in
``services.material_service``; these formatters never reorder keys.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Union

import yaml

from colorcore.contrast import ContrastResult
from colorcore.errors import unsupported_format

from .tables import render_table

__all__ = ["RECORD_FORMATS", "format_info", "format_contrast", "contrast_rows"]

RECORD_FORMATS = ("json", "yaml", "table")


def _plain(value: Any) -> Any:
    # yaml.safe_dump refuses tuples and Mapping subclasses
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _dump(data: Any, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def _info_rows(info: Mapping[str, Any], parent: str = "") -> Iterable[Tuple[str, Any]]:
    for key, value in info.items():
        name = f"{parent}.{key}" if parent else key
        if isinstance(value, Mapping):
            yield from _info_rows(value, name)
        else:
            yield name, value


def format_info(info: Mapping[str, Any], fmt: str) -> str:
    if fmt not in RECORD_FORMATS:
        return unsupported_format(fmt)
    data = _plain(info)
    if fmt == "table":
        return render_table(("Field", "Value"), _info_rows(data))
    return _dump(data, fmt)


def _pass_fail(flag: bool) -> str:
    return "Pass" if flag else "Fail"


def contrast_rows(
    results: Union[ContrastResult, Sequence[ContrastResult]],
    wcag_only: bool = False,
) -> List[Dict[str, Any]]:
    """Flatten contrast results into display rows.

    The full view keeps ``ratio``; the ``wcag_only`` view drops it and shows
    each level as ``Pass``/``Fail``.
    """
    items = [results] if isinstance(results, ContrastResult) else list(results)
    rows: List[Dict[str, Any]] = []
    for res in items:
        levels = res.wcag.to_dict()
        if wcag_only:
            row: Dict[str, Any] = {"colorA": res.color_a, "colorB": res.color_b}
            row.update((k, _pass_fail(v)) for k, v in levels.items())
        else:
            row = {"ratio": res.ratio, "colorA": res.color_a, "colorB": res.color_b}
            row.update(levels)
        rows.append(row)
    return rows


def format_contrast(
    results: Union[ContrastResult, Sequence[ContrastResult]],
    fmt: str,
    wcag_only: bool = False,
) -> str:
    if fmt not in RECORD_FORMATS:
        return unsupported_format(fmt)
    rows = contrast_rows(results, wcag_only)
    if fmt == "table":
        columns = list(rows[0]) if rows else []
        return render_table(columns, ([row[c] for c in columns] for row in rows))
    return _dump(rows, fmt)
