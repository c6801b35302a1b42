"""mcuc: generate and inspect Material 3 color themes.

Usage examples:
  mcuc generate "#ff0000" -f css
  mcuc generate -i ./photo.png -p -T both -f yaml -o palette.yaml
  mcuc info "#6750a4" --extended -d "#625b71"
  mcuc contrast "#000000" "#ffffff" -w
  mcuc contrast "#ffffff" -b "#6750a4" "#1c1b1f" -f table
  mcuc preview "#2196f3" -u -o theme.html

Exit codes: 0 success, 1 input or processing error (logged), 2 usage error.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from colorcore.errors import ColorToolError
from config import settings
from formatting import format_contrast, format_info, format_theme, render_preview
from scheme import resolve_seed
from services import material_service
from utils.log import configure_logging

_logger = logging.getLogger(__name__)


def _emit(text: str, out: Optional[str], label: str) -> None:
    if out:
        Path(out).write_text(text, encoding="utf-8")
        _logger.info("%s written to %s", label, out)
    else:
        _logger.info("%s output:", label)
        print(text)


def cmd_generate(args: argparse.Namespace) -> None:
    seed = resolve_seed(args.input, image=args.image, random=args.random)
    build = material_service.generate_palette if args.palette else material_service.generate_theme
    result = build(seed, args.theme, hue=args.hue, chroma=args.chroma, tone=args.tone)
    text = format_theme(result, args.format, prefix=args.prefix, casing=args.case)
    _emit(text, args.out, "Palette" if args.palette else "Theme")


def cmd_info(args: argparse.Namespace) -> None:
    color = resolve_seed(args.input, image=args.image)
    info = material_service.color_info(color, extended=args.extended, distance=args.distance)
    _emit(format_info(info, args.format), None, "Color info")


def cmd_contrast(args: argparse.Namespace) -> None:
    results = material_service.contrast_report(args.colors, args.bg)
    _emit(format_contrast(results, args.format, wcag_only=args.wcag_only), None, "Contrast")


def cmd_preview(args: argparse.Namespace) -> None:
    seed = resolve_seed(args.input, image=args.image)
    _logger.info("Generating theme for preview...")
    theme = material_service.generate_theme(seed, "both")
    _emit(render_preview(theme, usage=args.usage), args.out, "Preview HTML")


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("-l", "--log", action="store_true", help="Enable detailed logging for progress")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mcuc",
        description="Material Color Utilities CLI - Generate and inspect Material 3 color themes",
    )
    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate Material 3 theme from a color or image")
    gen.add_argument("input", nargs="?", help="Hex color (#RRGGBB)")
    gen.add_argument("-o", "--out", help="Write output to file instead of stdout")
    gen.add_argument("-p", "--palette", action="store_true", help="Generate tonal palettes instead of theme")
    gen.add_argument(
        "-f",
        "--format",
        default=settings.DEFAULT_FORMAT,
        help="Output format: json|table|yaml|css|scss|less|styl|js|ts|xml",
    )
    gen.add_argument("-P", "--prefix", default=settings.DEFAULT_PREFIX, help="Prefix for variable names")
    gen.add_argument("-C", "--case", choices=settings.CASE_CHOICES, default=settings.DEFAULT_CASE)
    gen.add_argument("-r", "--random", action="store_true", help="Use random color instead of input")
    gen.add_argument("-i", "--image", help="Extract dominant color from image, overrides input")
    gen.add_argument("-T", "--theme", choices=settings.THEME_CHOICES, default=settings.DEFAULT_THEME)
    gen.add_argument("--hue", type=float, help="Hue override (0-360)")
    gen.add_argument("--chroma", type=float, help="Chroma override (0-150)")
    gen.add_argument("--tone", type=float, help="Tone override (0-100)")
    _add_common(gen)
    gen.set_defaults(func=cmd_generate)

    info = sub.add_parser("info", help="Show color info for a hex color or image")
    info.add_argument("input", nargs="?", help="Hex color (#RRGGBB)")
    info.add_argument("-i", "--image", help="Extract dominant color from image, overrides input")
    info.add_argument("-f", "--format", default="json", help="Output format: json|table|yaml")
    info.add_argument("-e", "--extended", action="store_true", help="Show LAB, LCH, OKLCH and luminance")
    info.add_argument("-d", "--distance", metavar="COLOR", help="Show color difference to another color")
    _add_common(info)
    info.set_defaults(func=cmd_info)

    con = sub.add_parser("contrast", help="Check contrast ratio between hex colors")
    con.add_argument("colors", nargs="*", metavar="COLOR", help="Two hex colors, or one with --bg")
    con.add_argument("-f", "--format", default="json", help="Output format: json|table|yaml")
    con.add_argument("-b", "--bg", nargs="+", metavar="COLOR", help="Background color(s) to test against")
    con.add_argument("-w", "--wcag-only", action="store_true", help="Output only WCAG compliance levels")
    _add_common(con)
    con.set_defaults(func=cmd_contrast)

    prev = sub.add_parser("preview", help="Generate an HTML preview of a theme")
    prev.add_argument("input", nargs="?", help="Hex color (#RRGGBB)")
    prev.add_argument("-o", "--out", help="Write preview HTML to file instead of stdout")
    prev.add_argument("-i", "--image", help="Extract dominant color from image, overrides input")
    prev.add_argument("-u", "--usage", action="store_true", help="Include example text, buttons and cards")
    _add_common(prev)
    prev.set_defaults(func=cmd_preview)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log)
    try:
        args.func(args)
    except (ColorToolError, OSError) as exc:
        _logger.error("Error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
