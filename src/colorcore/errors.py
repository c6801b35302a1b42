"""Error kinds raised by the color engine and its entrypoints."""

from __future__ import annotations

__all__ = [
    "ColorToolError",
    "InvalidColorFormat",
    "MissingInput",
    "unsupported_format",
]


class ColorToolError(Exception):
    """Base class for failures reported to the caller of a color operation."""


class InvalidColorFormat(ColorToolError, ValueError):
    """Raised when a value is not a 6-digit hex color (optional leading '#')."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        message = f"Invalid hex color: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingInput(ColorToolError, RuntimeError):
    """Raised when no color, image or random flag was supplied."""


def unsupported_format(fmt: str) -> str:
    # Formatting is a terminal step: callers get a diagnostic string, not an exception.
    return f"Unsupported format: {fmt}"
