"""Shared pieces of palette synthesis: randomness, role placement, repair."""

from collections import namedtuple

import numpy as np

from ..color import color_from_hsl, normalize_hue, parse_color
from ..errors import SynthesisError
from ..readability import READABILITY_STEP, ensure_readability

# Half-widths of the uniform jitter applied to each generated color
Jitter = namedtuple("Jitter", ["hue", "saturation", "lightness"])

UI_JITTER = Jitter(hue=5, saturation=10, lightness=5)
SYNTAX_JITTER = Jitter(hue=10, saturation=5, lightness=5)
ANSI_JITTER = Jitter(hue=15, saturation=15, lightness=10)


def make_rng(seed=None):
    """Seedable random source; None seeds from system entropy."""
    return np.random.default_rng(seed)


def generate_color(hue, saturation, lightness, rng=None, jitter=None, alpha=None):
    """Build a color from HSL, jittering each channel when ``rng`` is given."""
    if rng is not None and jitter is not None:
        hue += rng.uniform(-jitter.hue, jitter.hue)
        saturation += rng.uniform(-jitter.saturation, jitter.saturation)
        lightness += rng.uniform(-jitter.lightness, jitter.lightness)
    return color_from_hsl(normalize_hue(hue), saturation, lightness, alpha=alpha)


def pick_hue(spec, hues, rng=None):
    """Hue for a role: its fixed hue, or a pool entry plus the role's offset."""
    if spec.fixed_hue is not None:
        return float(spec.fixed_hue)
    if not hues:
        raise SynthesisError("cannot place a role in an empty hue pool")
    if spec.random_hue and rng is not None:
        index = int(rng.integers(len(hues)))
    else:
        index = spec.hue_index % len(hues)
    return normalize_hue(hues[index] + spec.hue_offset)


def role_lightness(spec, anchors, dark):
    """Anchor lightness moved by the role's offset toward higher contrast."""
    base = anchors[spec.anchor]
    return base + spec.lightness_offset if dark else base - spec.lightness_offset


def synthesize_roles(
    specs, hues, saturation_base, anchors, dark, locked=None, rng=None, jitter=None
):
    """Place every role of ``specs``; locked roles are copied through unchanged.

    Args:
        specs: Role table (role -> RoleSpec)
        hues: Hue pool
        saturation_base: Palette saturation the per-role multipliers scale
        anchors: {"background": L, "foreground": L} for the current mode
        dark: Whether the theme is dark
        locked: role -> Color for roles that must not change
        rng: Random source; None disables jitter and random hue picks
        jitter: Jitter half-widths

    Returns:
        dict of role -> Color, in table order
    """
    locked = locked or {}
    palette = {}
    for role, spec in specs.items():
        if role in locked:
            palette[role] = parse_color(locked[role])
            continue
        palette[role] = generate_color(
            pick_hue(spec, hues, rng),
            saturation_base * spec.saturation,
            role_lightness(spec, anchors, dark),
            rng=rng,
            jitter=jitter,
            alpha=spec.alpha,
        )
    return palette


def enforce_readability(
    palette, background, specs, skip=(), saturation_delta=READABILITY_STEP
):
    """Run the contrast floor over every non-exempt role not in ``skip``.

    Slider paths pass ``saturation_delta=0`` so repaired roles keep the
    saturation they were just given.
    """
    repaired = dict(palette)
    for role, color in palette.items():
        spec = specs.get(role)
        if role in skip or spec is None or spec.min_contrast is None:
            continue
        repaired[role] = ensure_readability(
            color, background, spec.min_contrast, saturation_delta=saturation_delta
        )
    return repaired
