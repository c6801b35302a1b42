import pytest

from colorcore.errors import InvalidColorFormat
from colorcore.tone_roles import (
    CANONICAL_ROLES,
    RAMP_ROLES,
    RAMP_TONES,
    THEME_ROLES,
    TONE_OFFSETS,
    ToneRoleSet,
    map_theme,
    map_tone_roles,
    tonal_ramp,
    tonal_ramps,
)

from conftest import FakeScheme, gray

LIGHT_TONES = {
    "outlineVariant": 80,
    "surfaceTint": 40,
    "surfaceDim": 87,
    "surfaceBright": 98,
    "surfaceContainerLowest": 100,
    "surfaceContainerLow": 96,
    "surfaceContainer": 94,
    "surfaceContainerHigh": 92,
    "surfaceContainerHighest": 90,
}
DARK_TONES = {
    "outlineVariant": 30,
    "surfaceTint": 80,
    "surfaceDim": 6,
    "surfaceBright": 24,
    "surfaceContainerLowest": 4,
    "surfaceContainerLow": 10,
    "surfaceContainer": 12,
    "surfaceContainerHigh": 17,
    "surfaceContainerHighest": 22,
}


def test_role_catalogue():
    assert len(THEME_ROLES) == 37
    assert len(set(THEME_ROLES)) == 37
    assert len(CANONICAL_ROLES) == 28
    assert set(TONE_OFFSETS) <= set(THEME_ROLES)
    assert RAMP_TONES == (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100)


def test_light_offsets_match_table(fake_scheme):
    roles = map_tone_roles(fake_scheme, True)
    for role, tone in LIGHT_TONES.items():
        assert roles[role] == gray(tone), role
    assert roles["outlineVariant"] == gray(80)
    assert ("neutralVariant", 80) in fake_scheme.tone_calls


def test_dark_offsets_match_table(fake_scheme):
    roles = map_tone_roles(fake_scheme, False)
    for role, tone in DARK_TONES.items():
        assert roles[role] == gray(tone), role
    assert ("neutralVariant", 30) in fake_scheme.tone_calls


def test_surface_dim_passes_through_scheme_tone():
    scheme = FakeScheme()
    assert gray(87) == "#DEDEDE"
    assert map_tone_roles(scheme, True)["surfaceDim"] == "#DEDEDE"


def test_canonical_roles_come_from_scheme(fake_scheme):
    light = map_tone_roles(fake_scheme, True)
    dark = map_tone_roles(fake_scheme, False)
    for role in CANONICAL_ROLES:
        assert light[role] == "#112233"
        assert dark[role] == "#445566"


def test_emission_order_is_fixed(fake_scheme):
    roles = map_tone_roles(fake_scheme, True)
    assert tuple(roles) == THEME_ROLES
    assert list(roles.to_dict()) == list(THEME_ROLES)


def test_role_set_is_immutable(fake_scheme):
    roles = map_tone_roles(fake_scheme, True)
    assert isinstance(roles, ToneRoleSet)
    with pytest.raises(TypeError):
        roles["primary"] = "#000000"  # type: ignore[index]
    with pytest.raises(AttributeError):
        roles.extra = 1  # type: ignore[attr-defined]
    assert roles.light and roles.variant == "light"


def test_missing_canonical_role_raises():
    class Partial(FakeScheme):
        def scheme(self, light):
            data = super().scheme(light)
            del data["outline"]
            return data

    with pytest.raises(KeyError, match="outline"):
        map_tone_roles(Partial(), True)


def test_invalid_scheme_color_raises():
    class Broken(FakeScheme):
        def tone(self, family, t):
            return "not-a-color"

    with pytest.raises(InvalidColorFormat):
        map_tone_roles(Broken(), True)


def test_map_theme_has_both_variants(fake_scheme):
    theme = map_theme(fake_scheme)
    assert list(theme) == ["light", "dark"]
    assert theme["light"].light and not theme["dark"].light
    assert theme["dark"]["surfaceDim"] == gray(6)


class GraySolver:
    def hct(self, color):
        return 0.0, 0.0, 50.0

    def from_hct(self, hue, chroma, tone):
        return gray(tone)


def test_tonal_ramp_sweeps_tones():
    ramp = tonal_ramp(GraySolver(), "#808080")
    assert ramp == tuple(gray(t) for t in RAMP_TONES)
    assert len(ramp) == 11


def test_tonal_ramps_cover_ramp_roles(fake_scheme):
    ramps = tonal_ramps(GraySolver(), map_tone_roles(fake_scheme, True))
    assert tuple(ramps) == RAMP_ROLES
    assert all(len(r) == 11 for r in ramps.values())
