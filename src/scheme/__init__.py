"""Seed resolution and the LCh-backed seed scheme."""

from .lch_scheme import SCHEME_TONES, LchSeedScheme, LchToneSolver  # noqa: F401
from .seed import apply_overrides, resolve_seed  # noqa: F401
