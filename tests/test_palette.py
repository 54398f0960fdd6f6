"""Tests for UI, syntax and ANSI synthesis and the saturation remapper."""

import pytest

from code_theme_generator.color import contrast_ratio, is_dark, parse_color
from code_theme_generator.errors import SynthesisError
from code_theme_generator.palette import (
    make_rng,
    remap_saturation,
    synthesize_ansi,
    synthesize_syntax,
    synthesize_ui,
)
from code_theme_generator.palette.saturation import specs_for
from code_theme_generator.readability import comment_band
from code_theme_generator.roles import (
    ANSI_BASE_ROLES,
    ANSI_EXEMPT_ROLES,
    ANSI_ROLES,
    COMMENT_ROLE,
    SYNTAX_ROLES,
    SYNTAX_SPECS,
    UI_ROLES,
    UI_SPECS,
)
from code_theme_generator.schemes import ColorScheme, generate_scheme_hues

SEEDS = [0, 1, 2, 42, 1234]
BACKGROUNDS = ["#1e1e1e", "#0b0d12", "#282a36", "#ffffff", "#fdf6e3", "#eceff4"]


def _hues(base=210, scheme=ColorScheme.ANALOGOUS):
    return generate_scheme_hues(base, scheme)


class TestUiPalette:
    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("dark", [True, False])
    def test_every_role_present(self, seed, dark):
        palette, _ = synthesize_ui(_hues(), 30, dark, rng=make_rng(seed))
        assert set(palette) == set(UI_ROLES)

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("dark", [True, False])
    @pytest.mark.parametrize(
        "scheme",
        [ColorScheme.ANALOGOUS, ColorScheme.TRIADIC, ColorScheme.MANDELBROT_SET],
    )
    def test_contrast_floor(self, seed, dark, scheme):
        palette, _ = synthesize_ui(
            _hues(37, scheme), 45, dark, scheme=scheme, rng=make_rng(seed)
        )
        bg = palette["BG1"]
        for role, spec in UI_SPECS.items():
            if spec.min_contrast is None:
                continue
            assert contrast_ratio(palette[role], bg) >= spec.min_contrast, role

    @pytest.mark.parametrize("dark", [True, False])
    def test_mode_follows_request(self, dark):
        palette, _ = synthesize_ui(_hues(), 30, dark, rng=make_rng(3))
        assert is_dark(palette["BG1"]) is dark

    def test_overlays_carry_alpha(self):
        palette, _ = synthesize_ui(_hues(), 30, True, rng=make_rng(3))
        for role in ("lineHighlight", "selection", "findMatch"):
            assert palette[role].alpha is not None

    def test_locked_roles_are_copied_through(self):
        locked = {"FG1": parse_color("#123456"), "AC2": parse_color("#abcdef")}
        palette, _ = synthesize_ui(_hues(), 30, True, locked=locked, rng=make_rng(5))
        # Copied even though #123456 is unreadable on a dark background
        assert palette["FG1"] == locked["FG1"]
        assert palette["AC2"] == locked["AC2"]

    @pytest.mark.parametrize("seed", SEEDS)
    def test_locked_background_decides_mode(self, seed):
        locked = {"BG1": parse_color("#22272a")}
        palette, _ = synthesize_ui(
            _hues(), 30, False, locked=locked, rng=make_rng(seed)
        )
        assert palette["BG1"] == locked["BG1"]
        for role in ("BG2", "BG3", "FG3", "BORDER", "lineHighlight", "selection"):
            assert is_dark(palette[role]), role
        assert contrast_ratio(palette["FG1"], palette["BG1"]) >= 5.5

    def test_locking_changes_nothing_else(self):
        reference, _ = synthesize_ui(_hues(), 30, True, force_regenerate=True)
        locked = {"BORDER": parse_color("#ff00ff")}
        palette, _ = synthesize_ui(
            _hues(), 30, True, locked=locked, force_regenerate=True
        )
        changed = {role for role in UI_ROLES if palette[role] != reference[role]}
        assert changed == {"BORDER"}

    def test_force_regenerate_ignores_rng(self):
        a, _ = synthesize_ui(_hues(), 30, True, force_regenerate=True, rng=make_rng(1))
        b, _ = synthesize_ui(_hues(), 30, True, force_regenerate=True, rng=make_rng(2))
        assert a == b

    def test_same_seed_same_palette(self):
        a, _ = synthesize_ui(_hues(), 30, True, rng=make_rng(9))
        b, _ = synthesize_ui(_hues(), 30, True, rng=make_rng(9))
        assert a == b

    def test_extended_hues_grow_unless_few(self):
        hues = _hues()
        _, extended = synthesize_ui(
            hues, 30, True, scheme=ColorScheme.ANALOGOUS, rng=make_rng(1)
        )
        _, few = synthesize_ui(
            hues, 30, True, scheme=ColorScheme.ANALOGOUS, few=True, rng=make_rng(1)
        )
        assert few == hues
        assert extended[: len(hues)] == hues
        assert len(extended) == len(hues) + 4

    def test_single_hue_pool_is_indexed_modulo(self):
        palette, _ = synthesize_ui([200.0], 30, True, force_regenerate=True)
        assert set(palette) == set(UI_ROLES)

    def test_empty_hue_pool_raises(self):
        with pytest.raises(SynthesisError):
            synthesize_ui([], 30, True)


class TestSyntaxPalette:
    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("background", BACKGROUNDS)
    def test_contrast_floor_and_comment_band(self, seed, background):
        palette = synthesize_syntax(background, _hues(120), 70, rng=make_rng(seed))
        assert set(palette) == set(SYNTAX_ROLES)
        for role in SYNTAX_ROLES:
            if role == COMMENT_ROLE:
                continue
            assert contrast_ratio(palette[role], background) >= 5.5, role
        low, high = comment_band(background)
        assert low <= contrast_ratio(palette[COMMENT_ROLE], background) <= high

    def test_mode_comes_from_background(self):
        dark = synthesize_syntax("#1e1e1e", _hues(), 70, force_regenerate=True)
        light = synthesize_syntax("#ffffff", _hues(), 70, force_regenerate=True)
        assert dark["keyword"].hsl[2] > 60
        assert light["keyword"].hsl[2] < 45

    def test_locked_roles_skip_readability(self):
        locked = {
            "keyword": parse_color("#222222"),
            COMMENT_ROLE: parse_color("#ff0000"),
        }
        palette = synthesize_syntax(
            "#1e1e1e", _hues(), 70, locked=locked, rng=make_rng(4)
        )
        assert palette["keyword"] == locked["keyword"]
        assert palette[COMMENT_ROLE] == locked[COMMENT_ROLE]

    def test_random_hue_roles_vary_between_seeds(self):
        random_roles = [role for role, spec in SYNTAX_SPECS.items() if spec.random_hue]
        tetradic = _hues(0, ColorScheme.TETRADIC)
        palettes = [
            synthesize_syntax("#1e1e1e", tetradic, 70, rng=make_rng(s)) for s in SEEDS
        ]
        hues = {tuple(round(p[role].hsl[0]) for role in random_roles) for p in palettes}
        assert len(hues) > 1


class TestAnsiPalette:
    @pytest.mark.parametrize("background", BACKGROUNDS + ["#000000", "#808080"])
    @pytest.mark.parametrize("seed", SEEDS)
    def test_black_is_fixed(self, background, seed):
        palette = synthesize_ansi(background, _hues(), rng=make_rng(seed))
        assert palette["Black"].hex == "#000000"

    def test_black_on_black_skips_readability(self):
        palette = synthesize_ansi("#000000", _hues(), force_regenerate=True)
        assert palette["Black"].hex == "#000000"
        assert contrast_ratio(palette["Black"], "#000000") == pytest.approx(1.0)

    @pytest.mark.parametrize("background", BACKGROUNDS + ["#000000"])
    @pytest.mark.parametrize("seed", SEEDS)
    def test_contrast_floor(self, background, seed):
        palette = synthesize_ansi(background, _hues(), rng=make_rng(seed))
        assert set(palette) == set(ANSI_ROLES)
        for role in ANSI_ROLES:
            if role in ANSI_EXEMPT_ROLES:
                continue
            assert contrast_ratio(palette[role], background) >= 5.5, role

    def test_bright_pairs_share_hue(self):
        palette = synthesize_ansi("#1e1e1e", _hues(), rng=make_rng(8))
        for role in ANSI_BASE_ROLES:
            bright = palette[f"Bright{role}"]
            assert bright.hsl[0] == pytest.approx(palette[role].hsl[0])

    def test_anchors_snap_to_nearby_pool_hues(self):
        palette = synthesize_ansi("#1e1e1e", [10.0, 200.0], force_regenerate=True)
        assert palette["Red"].hsl[0] == pytest.approx(10.0)
        # Nothing within reach of green
        assert palette["Green"].hsl[0] == pytest.approx(120.0)

    def test_force_regenerate_is_deterministic(self):
        a = synthesize_ansi("#282a36", _hues(), force_regenerate=True, rng=make_rng(1))
        b = synthesize_ansi("#282a36", _hues(), force_regenerate=True, rng=make_rng(2))
        assert a == b

    def test_locked_role_is_copied(self):
        palette = synthesize_ansi(
            "#1e1e1e", _hues(), locked={"Red": "#330000"}, rng=make_rng(1)
        )
        assert palette["Red"].hex == "#330000"


@pytest.fixture(params=["ui", "syntax"])
def palette(request):
    if request.param == "ui":
        return synthesize_ui(_hues(), 30, True, rng=make_rng(11))[0]
    return synthesize_syntax("#1e1e1e", _hues(), 70, rng=make_rng(11))


class TestRemapSaturation:
    @pytest.mark.parametrize("saturation", [0, 25, 55, 100])
    def test_only_saturation_changes(self, palette, saturation):
        specs = specs_for(palette)
        remapped = remap_saturation(palette, saturation)
        for role, color in palette.items():
            h, s, l = remapped[role].hsl
            assert (h, l) == (color.hsl[0], color.hsl[2])
            assert s == pytest.approx(min(100, saturation * specs[role].saturation))

    def test_input_is_not_modified(self, palette):
        before = dict(palette)
        remap_saturation(palette, 80)
        assert palette == before

    def test_idempotent(self, palette):
        locked = {next(iter(palette))}
        once = remap_saturation(palette, 42, locked)
        assert remap_saturation(once, 42, locked) == once

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("background", BACKGROUNDS)
    @pytest.mark.parametrize("saturation", [10, 60, 100])
    def test_idempotent_with_background(self, seed, background, saturation):
        syntax = synthesize_syntax(background, _hues(), 70, rng=make_rng(seed))
        once = remap_saturation(syntax, saturation, background=background)
        twice = remap_saturation(once, saturation, background=background)
        assert twice == once

    def test_repair_keeps_new_saturation(self):
        syntax = synthesize_syntax("#1e1e1e", _hues(), 70, rng=make_rng(6))
        remapped = remap_saturation(syntax, 100, background="#1e1e1e")
        for role, color in remapped.items():
            expected = min(100, 100 * SYNTAX_SPECS[role].saturation)
            assert color.hsl[1] == pytest.approx(expected), role

    def test_locked_roles_untouched(self, palette):
        role = sorted(palette)[0]
        remapped = remap_saturation(palette, 90, locked={role})
        assert remapped[role] is palette[role]

    def test_alpha_survives(self):
        ui, _ = synthesize_ui(_hues(), 30, True, rng=make_rng(2))
        remapped = remap_saturation(ui, 60)
        assert remapped["selection"].alpha == ui["selection"].alpha

    def test_background_reruns_floor(self):
        syntax = synthesize_syntax("#1e1e1e", _hues(), 70, rng=make_rng(3))
        remapped = remap_saturation(syntax, 100, background="#1e1e1e")
        for role in SYNTAX_ROLES:
            if role != COMMENT_ROLE:
                assert contrast_ratio(remapped[role], "#1e1e1e") >= 5.5, role
        assert remapped[COMMENT_ROLE].hsl[2] == syntax[COMMENT_ROLE].hsl[2]

    def test_rejects_ansi_palette(self):
        with pytest.raises(KeyError):
            remap_saturation(synthesize_ansi("#1e1e1e", _hues(), rng=make_rng(1)), 50)
