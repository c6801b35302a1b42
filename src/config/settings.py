"""Global configuration and defaults for the mcuc tools."""

from __future__ import annotations

import os
from typing import Final

# Output defaults (CLI flags override these)
DEFAULT_FORMAT: Final = os.environ.get("MCUC_FORMAT", "json")
DEFAULT_THEME: Final = os.environ.get("MCUC_THEME", "dark")
DEFAULT_CASE: Final = os.environ.get("MCUC_CASE", "kebab")
DEFAULT_PREFIX: Final = os.environ.get("MCUC_PREFIX", "")

# Dominant color sampling grid (image is resized to GRID x GRID before counting)
SAMPLE_GRID: Final = int(os.environ.get("MCUC_SAMPLE_GRID", "16"))

LOG_LEVEL: Final = os.environ.get("MCUC_LOG_LEVEL", "INFO").upper()

# Hue/chroma/tone values in color info records are rounded to this precision
HCT_DECIMALS: Final = 2

THEME_CHOICES: Final = ("light", "dark", "both")
CASE_CHOICES: Final = ("camel", "pascal", "kebab")
