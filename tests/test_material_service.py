import pytest

from colorcore.contrast import ContrastResult
from colorcore.errors import InvalidColorFormat, MissingInput
from colorcore.tone_roles import RAMP_ROLES, THEME_ROLES, ToneRoleSet
from services import material_service

from conftest import FakeScheme, gray


def _fake_factory(seed, solver):
    return FakeScheme()


def test_generate_theme_variants():
    both = material_service.generate_theme("#6750a4")
    assert list(both) == ["light", "dark"]
    assert all(isinstance(v, ToneRoleSet) for v in both.values())
    dark = material_service.generate_theme("#6750a4", "dark")
    assert list(dark) == ["dark"]
    assert tuple(dark["dark"]) == THEME_ROLES


def test_generate_theme_uses_scheme_factory():
    theme = material_service.generate_theme("#6750a4", "light", scheme_factory=_fake_factory)
    assert theme["light"]["surfaceDim"] == "#DEDEDE"
    assert theme["light"]["primary"] == "#112233"


def test_unknown_variant():
    with pytest.raises(ValueError, match="Unknown theme variant"):
        material_service.generate_theme("#6750a4", "sepia")


def test_invalid_seed():
    with pytest.raises(InvalidColorFormat):
        material_service.generate_theme("#67")


def test_overrides_change_seed_passed_to_factory():
    seen = []

    def factory(seed, solver):
        seen.append(seed)
        return FakeScheme()

    material_service.generate_theme("#6750a4", "light", scheme_factory=factory)
    material_service.generate_theme("#6750a4", "light", tone=95, scheme_factory=factory)
    assert seen[0] == "#6750a4"
    assert seen[1] != "#6750a4"


def test_generate_palette_shape():
    palette = material_service.generate_palette("#2196f3", "both")
    assert list(palette) == ["light", "dark"]
    for ramps in palette.values():
        assert tuple(ramps) == RAMP_ROLES
        assert all(len(r) == 11 for r in ramps.values())


class GraySolver:
    def hct(self, color):
        return 0.0, 0.0, 50.0

    def from_hct(self, hue, chroma, tone):
        return gray(tone)


def test_generate_palette_with_injected_solver():
    palette = material_service.generate_palette(
        "#2196f3", "light", solver=GraySolver(), scheme_factory=_fake_factory
    )
    assert palette["light"]["primary"][5] == gray(50)


def test_color_info_basic():
    info = material_service.color_info("#FFFFFF")
    assert list(info) == ["hex", "hct"]
    assert info["hex"] == "#ffffff"
    assert info["hct"]["tone"] == pytest.approx(100.0, abs=0.01)
    assert info["hct"]["hue"] == round(info["hct"]["hue"], 2)


def test_color_info_extended_and_distance():
    info = material_service.color_info("#000000", extended=True, distance="FFFFFF")
    assert list(info) == ["hex", "hct", "extended", "distance"]
    ext = info["extended"]
    assert list(ext) == ["lab", "lch", "oklch", "luminance"]
    assert isinstance(ext["lab"], list) and len(ext["lab"]) == 3
    assert list(ext["lch"]) == ["L", "C", "H"]
    assert ext["luminance"] == 0.0
    dist = info["distance"]
    assert dist["target"] == "#ffffff"
    assert dist["deltaE76"] == pytest.approx(100.0, abs=0.05)
    assert dist["deltaE00"] == pytest.approx(100.0, abs=0.05)


def test_contrast_report_pair_and_backgrounds():
    pair = material_service.contrast_report(["#000000", "#ffffff"])
    assert len(pair) == 1 and isinstance(pair[0], ContrastResult)
    many = material_service.contrast_report(["#ffffff"], ["#000000", "#777777", "#ffffff"])
    assert [r.color_b for r in many] == ["#000000", "#777777", "#ffffff"]


@pytest.mark.parametrize("colors", [[], ["#000000"], ["#000000", "#111111", "#222222"]])
def test_contrast_report_requires_two_colors(colors):
    with pytest.raises(MissingInput, match="two colors"):
        material_service.contrast_report(colors)


def test_color_info_hue_stays_below_360_after_rounding():
    # LCh hue of #672d41 is just under 360 degrees
    info = material_service.color_info("#672d41")
    assert info["hct"]["hue"] == 0.0
    assert 0.0 <= info["hct"]["hue"] < 360.0
