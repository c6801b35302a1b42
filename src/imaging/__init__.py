"""Image helpers producing seed colors."""

from .dominant_color import dominant_color_from_pixels, sample_dominant_color  # noqa: F401
