"""Standalone HTML preview of a light/dark theme pair.

The page shows one swatch card per role for each variant and a toggle button
switching the body class. With ``usage=True`` each variant also gets a small
text/button/card sample painted with its own roles.
"""

from __future__ import annotations

import html
from typing import Mapping

from colorcore.errors import MissingInput

__all__ = ["PREVIEW_TEMPLATE", "render_preview"]

PREVIEW_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Material Theme Preview</title>
    <style>
      body { font-family: sans-serif; margin: 0; padding: 1rem; transition: background 0.3s, color 0.3s; }
      .toggle { position: fixed; top: 1rem; right: 1rem; cursor: pointer; }
      .colors { display: grid; grid-template-columns: repeat(auto-fit, minmax(120px, 1fr)); gap: 1rem; margin-top: 2rem; }
      .color-card { border: 1px solid transparent; border-radius: 0.5rem; overflow: hidden; text-align: center; }
      .color-swatch { height: 80px; }
      .color-label { padding: 0.5rem; font-size: 0.8rem; }

      body.light { background: {{ LIGHT_BG }}; color: {{ LIGHT_ON_BG }}; }
      body.dark { background: {{ DARK_BG }}; color: {{ DARK_ON_BG }}; }

      body.light .color-card { border-color: {{ LIGHT_OUTLINE }}; }
      body.dark .color-card { border-color: {{ DARK_OUTLINE }}; }

      .light-theme { display: block; }
      .dark-theme { display: none; }
      body.dark .light-theme { display: none; }
      body.dark .dark-theme { display: block; }
    </style>
  </head>
  <body class="light">
    <button class="toggle">Toggle Dark/Light</button>

    <h1>Material Theme Preview</h1>

    <div class="light-theme">
      <h2>Light Theme</h2>
      <div class="colors">{{ LIGHT_COLORS }}</div>
      {{ LIGHT_USAGE }}
    </div>

    <div class="dark-theme">
      <h2>Dark Theme</h2>
      <div class="colors">{{ DARK_COLORS }}</div>
      {{ DARK_USAGE }}
    </div>

    <script>
      const toggle = document.querySelector(".toggle");
      toggle.addEventListener("click", () => {
        document.body.classList.toggle("dark");
        document.body.classList.toggle("light");
      });
    </script>
  </body>
</html>
"""

_BUTTON_STYLE = "padding: 0.5rem 1rem; border: none; border-radius: 4px; margin: 0.25rem;"
_CARD_STYLE = "padding: 1rem; border-radius: 8px; margin: 0.5rem 0;"


def _color_cards(colors: Mapping[str, str], label: str) -> str:
    cards = []
    for role, value in colors.items():
        v = html.escape(value)
        cards.append(
            '<div class="color-card">'
            f'<div class="color-swatch" style="background-color: {v};"></div>'
            f'<div class="color-label">{label} - {html.escape(role)}: {v}</div>'
            "</div>"
        )
    return "\n".join(cards)


def _usage(c: Mapping[str, str]) -> str:
    e = {k: html.escape(v) for k, v in c.items()}
    return (
        "<h3>Text Examples</h3>\n"
        f'<p style="color: {e["onBackground"]}">This is primary text</p>\n'
        f'<p style="color: {e["onSurface"]}">This is secondary text</p>\n'
        "<h3>Buttons</h3>\n"
        f'<button style="background-color: {e["primary"]}; color: {e["onPrimary"]}; {_BUTTON_STYLE}">Primary</button>\n'
        f'<button style="background-color: {e["secondary"]}; color: {e["onSecondary"]}; {_BUTTON_STYLE}">Secondary</button>\n'
        "<h3>Cards</h3>\n"
        f'<div style="background-color: {e["surfaceContainerHigh"]}; color: {e["onSurface"]}; {_CARD_STYLE}">Card Example</div>'
    )


def render_preview(theme: Mapping[str, Mapping[str, str]], usage: bool = False) -> str:
    light = theme.get("light")
    dark = theme.get("dark")
    if light is None or dark is None:
        raise MissingInput("Preview needs both light and dark variants.")
    replacements = {
        "{{ LIGHT_BG }}": light["background"],
        "{{ LIGHT_ON_BG }}": light["onBackground"],
        "{{ LIGHT_OUTLINE }}": light["outline"],
        "{{ DARK_BG }}": dark["background"],
        "{{ DARK_ON_BG }}": dark["onBackground"],
        "{{ DARK_OUTLINE }}": dark["outline"],
        "{{ LIGHT_COLORS }}": _color_cards(light, "Light"),
        "{{ DARK_COLORS }}": _color_cards(dark, "Dark"),
        "{{ LIGHT_USAGE }}": _usage(light) if usage else "",
        "{{ DARK_USAGE }}": _usage(dark) if usage else "",
    }
    page = PREVIEW_TEMPLATE
    for marker, value in replacements.items():
        page = page.replace(marker, value)
    return page
