"""Output formatters: theme tokens, info/contrast records and HTML preview."""

from .casing import to_case  # noqa: F401
from .tables import render_table  # noqa: F401
from .theme_formats import THEME_FORMATS, format_theme, normalize_theme  # noqa: F401
from .records import RECORD_FORMATS, format_info, format_contrast, contrast_rows  # noqa: F401
from .preview import PREVIEW_TEMPLATE, render_preview  # noqa: F401
