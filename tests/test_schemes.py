"""Tests for scheme hue generation."""

import pytest

from code_theme_generator.schemes import (
    ColorScheme,
    additional_hues,
    generate_scheme_hues,
)

ALL_SCHEMES = list(ColorScheme)


class TestGenerateSchemeHues:
    @pytest.mark.parametrize("scheme", ALL_SCHEMES, ids=lambda s: s.value)
    @pytest.mark.parametrize("base_hue", [0, 17.5, 180, 359.9])
    def test_deterministic(self, scheme, base_hue):
        first = generate_scheme_hues(base_hue, scheme)
        assert generate_scheme_hues(base_hue, scheme) == first

    @pytest.mark.parametrize("scheme", ALL_SCHEMES, ids=lambda s: s.value)
    @pytest.mark.parametrize("base_hue", [0, 90, 350, 359.999, -45, 725])
    def test_hues_in_range(self, scheme, base_hue):
        hues = generate_scheme_hues(base_hue, scheme)
        assert hues
        assert all(0 <= h < 360 for h in hues)

    @pytest.mark.parametrize("scheme", ALL_SCHEMES, ids=lambda s: s.value)
    def test_returns_plain_floats(self, scheme):
        assert all(type(h) is float for h in generate_scheme_hues(42, scheme))

    def test_analogous_wraps(self):
        hues = generate_scheme_hues(350, ColorScheme.ANALOGOUS)
        assert hues == pytest.approx([350, 20, 50, 320, 290])

    def test_complementary(self):
        hues = generate_scheme_hues(30, ColorScheme.COMPLEMENTARY)
        assert hues == pytest.approx([30, 210])

    def test_triadic(self):
        hues = generate_scheme_hues(10, ColorScheme.TRIADIC)
        assert hues == pytest.approx([10, 70, 130])

    @pytest.mark.parametrize(
        "scheme",
        [
            ColorScheme.ANALOGOUS,
            ColorScheme.COMPLEMENTARY,
            ColorScheme.TRIADIC,
            ColorScheme.GOLDEN_SPIRAL,
        ],
    )
    def test_base_hue_comes_first(self, scheme):
        assert generate_scheme_hues(100, scheme)[0] == pytest.approx(100)

    @pytest.mark.parametrize("scheme", [None, "no-such-scheme"])
    def test_unknown_scheme_is_base_only(self, scheme):
        assert generate_scheme_hues(123, scheme) == [123.0]


class TestAdditionalHues:
    def test_analogous_companions(self):
        assert additional_hues(10, ColorScheme.ANALOGOUS) == pytest.approx([40, 340])

    def test_generic_scheme_uses_its_own_hues(self):
        full = generate_scheme_hues(200, ColorScheme.TORUS)
        assert additional_hues(200, ColorScheme.TORUS) == full[1:4]

    def test_unknown_scheme_adds_nothing(self):
        assert additional_hues(10, "no-such-scheme") == []

    @pytest.mark.parametrize("scheme", ALL_SCHEMES, ids=lambda s: s.value)
    def test_in_range(self, scheme):
        assert all(0 <= h < 360 for h in additional_hues(355, scheme))


class TestParse:
    @pytest.mark.parametrize(
        "name",
        [
            "split-complementary",
            "SplitComplementary",
            "SPLIT_COMPLEMENTARY",
            "split_complementary",
            3,
        ],
    )
    def test_spellings(self, name):
        assert ColorScheme.parse(name) is ColorScheme.SPLIT_COMPLEMENTARY

    def test_legacy_labyrinth_spelling(self):
        assert ColorScheme.parse("Labirinth") is ColorScheme.LABYRINTH

    @pytest.mark.parametrize("name", ["nope", 99, -1])
    def test_unknown_raises(self, name):
        with pytest.raises(ValueError):
            ColorScheme.parse(name)

    def test_has_all_variants(self):
        assert len(ALL_SCHEMES) == 42
