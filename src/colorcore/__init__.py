"""Color conversion and perceptual metric engine.

Pure, synchronous functions: hex codec, color space conversion, delta-E,
WCAG contrast and Material tone role derivation. Nothing here performs I/O.
"""

from .errors import ColorToolError, InvalidColorFormat, MissingInput, unsupported_format  # noqa: F401
from .codec import (  # noqa: F401
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_argb,
    argb_to_rgb,
    hex_to_argb,
    argb_to_hex,
    is_valid_hex,
    normalize_hex,
    random_hex,
)
from .spaces import (  # noqa: F401
    Lab,
    Lch,
    Oklch,
    rgb_to_lab,
    lab_to_lch,
    rgb_to_oklch,
    relative_luminance,
)
from .difference import delta_e76, delta_e2000  # noqa: F401
from .contrast import (  # noqa: F401
    ContrastResult,
    WcagLevels,
    contrast_ratio,
    classify,
    evaluate_contrast,
    contrast_against,
)
from .tone_roles import (  # noqa: F401
    THEME_ROLES,
    TONE_OFFSETS,
    RAMP_ROLES,
    RAMP_TONES,
    SeedScheme,
    HctSolver,
    ToneRoleSet,
    map_tone_roles,
    map_theme,
    tonal_ramp,
    tonal_ramps,
)


def lab_of(color: str) -> Lab:
    """Convenience: hex color -> L*a*b*."""
    return rgb_to_lab(*hex_to_rgb(color))
