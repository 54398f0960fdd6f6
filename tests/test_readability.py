"""Tests for the contrast floor and the comment contrast band."""

import warnings

import pytest

from code_theme_generator.color import color_from_hsl, contrast_ratio, parse_color
from code_theme_generator.errors import ConvergenceWarning
from code_theme_generator.readability import (
    COMMENT_BAND_DARK,
    COMMENT_BAND_LIGHT,
    MAX_ITERATIONS,
    adjust_comment_color,
    comment_band,
    ensure_readability,
    iter_readability,
)


class TestEnsureReadability:
    @pytest.mark.parametrize(
        "color,background",
        [
            ("#333333", "#1e1e1e"),
            ("#3a2f80", "#101018"),
            ("#dddddd", "#ffffff"),
            ("#f0c060", "#fdf6e3"),
        ],
    )
    def test_reaches_floor(self, color, background):
        out = ensure_readability(color, background)
        assert contrast_ratio(out, background) >= 5.5

    def test_readable_color_is_returned_unchanged(self):
        assert ensure_readability("#ffffff", "#000000") == parse_color("#ffffff")

    def test_lightens_on_dark_background(self):
        src = color_from_hsl(210, 40, 25)
        assert ensure_readability(src, "#121212").hsl[2] > src.hsl[2]

    def test_darkens_on_light_background(self):
        src = color_from_hsl(210, 40, 75)
        assert ensure_readability(src, "#fafafa").hsl[2] < src.hsl[2]

    def test_custom_floor(self):
        out = ensure_readability("#2a2a2a", "#1e1e1e", min_contrast=1.5)
        assert contrast_ratio(out, "#1e1e1e") >= 1.5
        assert contrast_ratio(out, "#1e1e1e") < 5.5

    def test_alpha_is_preserved(self):
        out = ensure_readability("#20202070", "#1e1e1e")
        assert out.alpha == 0x70

    def test_lightness_only_keeps_saturation(self):
        src = color_from_hsl(210, 40, 25)
        out = ensure_readability(src, "#121212", saturation_delta=0)
        assert contrast_ratio(out, "#121212") >= 5.5
        assert out.hsl[:2] == src.hsl[:2]
        assert ensure_readability(out, "#121212", saturation_delta=0) == out

    def test_no_warning_when_reachable(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", ConvergenceWarning)
            ensure_readability("#444444", "#000000")


class TestUnreachableFloor:
    def test_loop_terminates_within_budget(self):
        candidates = list(iter_readability("#808080", "#808080"))
        # The starting color plus at most one candidate per iteration
        assert len(candidates) <= MAX_ITERATIONS + 1

    def test_warns_and_returns_best_effort(self):
        with pytest.warns(ConvergenceWarning):
            out = ensure_readability("#808080", "#808080")
        assert contrast_ratio(out, "#808080") > 1.0
        assert contrast_ratio(out, "#808080") < 5.5

    def test_small_budget_is_respected(self):
        candidates = list(iter_readability("#1f1f1f", "#1e1e1e", max_iterations=3))
        assert len(candidates) == 4
        with pytest.warns(ConvergenceWarning):
            ensure_readability("#1f1f1f", "#1e1e1e", max_iterations=3)


class TestCommentColor:
    def test_band_depends_on_background(self):
        assert comment_band("#1e1e1e") == COMMENT_BAND_DARK
        assert comment_band("#ffffff") == COMMENT_BAND_LIGHT

    @pytest.mark.parametrize("background", ["#1e1e1e", "#0b0d12", "#282a36"])
    @pytest.mark.parametrize(
        "start",
        [
            color_from_hsl(200, 60, 50),
            color_from_hsl(30, 80, 85),
            color_from_hsl(0, 0, 20),
        ],
    )
    def test_dark_theme_lands_in_band(self, background, start):
        out = adjust_comment_color(start, background)
        low, high = COMMENT_BAND_DARK
        assert low <= contrast_ratio(out, background) <= high
        assert out.hsl[1] <= 15

    @pytest.mark.parametrize("background", ["#ffffff", "#fdf6e3", "#eceff4"])
    @pytest.mark.parametrize(
        "start",
        [
            color_from_hsl(200, 60, 30),
            color_from_hsl(100, 90, 95),
            color_from_hsl(0, 0, 5),
        ],
    )
    def test_light_theme_lands_in_band(self, background, start):
        out = adjust_comment_color(start, background)
        low, high = COMMENT_BAND_LIGHT
        assert low <= contrast_ratio(out, background) <= high
        assert out.hsl[1] <= 35

    def test_saturation_ceiling_applies_even_in_band(self):
        background = "#1e1e1e"
        # Already inside the band but far too saturated
        start = adjust_comment_color(color_from_hsl(120, 10, 40), background)
        vivid = color_from_hsl(120, 90, start.hsl[2])
        assert adjust_comment_color(vivid, background).hsl[1] <= 15

    def test_custom_band(self):
        out = adjust_comment_color(
            "#777777", "#000000", min_contrast=4.0, max_contrast=4.5
        )
        assert 4.0 <= contrast_ratio(out, "#000000") <= 4.5

    def test_unreachable_band_warns_and_terminates(self):
        with pytest.warns(ConvergenceWarning):
            out = adjust_comment_color(
                "#777777", "#000000", min_contrast=25, max_contrast=30
            )
        assert out.hsl[2] == 100
