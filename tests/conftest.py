# Shared fixtures: a deterministic stand-in for the seed scheme capability.

import pytest

from colorcore.tone_roles import CANONICAL_ROLES
from utils.log import reset_logging


def gray(t: float) -> str:
    v = round(t * 2.55)
    return f"#{v:02X}{v:02X}{v:02X}"


class FakeScheme:
    """Canonical roles are fixed colors; palette tones are grays of the tone."""

    def __init__(self, light_color: str = "#112233", dark_color: str = "#445566"):
        self.light_color = light_color
        self.dark_color = dark_color
        self.tone_calls = []

    def scheme(self, light):
        color = self.light_color if light else self.dark_color
        return {role: color for role in CANONICAL_ROLES}

    def tone(self, family, t):
        self.tone_calls.append((family, t))
        return gray(t)


@pytest.fixture
def fake_scheme():
    return FakeScheme()


@pytest.fixture(autouse=True)
def _reset_package_logging():
    # CLI tests bind handlers to per-test capture streams
    yield
    reset_logging()
