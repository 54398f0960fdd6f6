from ..color import angular_distance, color_from_hsl, is_dark, parse_color
from ..readability import ensure_readability
from ..roles import (
    ANSI_ANCHOR_HUES,
    ANSI_BASE_ROLES,
    ANSI_BLACK,
    ANSI_EXEMPT_ROLES,
    ANSI_ROLES,
)
from .generator import ANSI_JITTER, generate_color, make_rng

# Anchors snap to a pooled hue no further than this
HUE_SNAP_DEGREES = 30

BRIGHT_SATURATION_BOOST = 20
BRIGHT_LIGHTNESS_BOOST = 20
BRIGHT_MAX_LIGHTNESS = 95


def _uniform(rng, low, high):
    """Uniform draw, or the midpoint when randomness is off."""
    if rng is None:
        return (low + high) / 2
    return float(rng.uniform(low, high))


def _snap_hue(anchor, hues):
    """Nearest pooled hue to ``anchor`` when close enough, else the anchor."""
    if not hues:
        return float(anchor)
    nearest = min(hues, key=lambda h: angular_distance(h, anchor))
    if angular_distance(nearest, anchor) <= HUE_SNAP_DEGREES:
        return nearest
    return float(anchor)


def brighten(color, rng=None):
    """Bright variant: fixed saturation/lightness boost, plus jitter when random."""
    h, s, l = color.hsl
    extra_saturation = 0 if rng is None else float(rng.uniform(0, 20))
    extra_lightness = 0 if rng is None else float(rng.uniform(0, 20))
    saturation = min(100, s + BRIGHT_SATURATION_BOOST + extra_saturation)
    lightness = min(BRIGHT_MAX_LIGHTNESS, l + BRIGHT_LIGHTNESS_BOOST + extra_lightness)
    return color_from_hsl(h, saturation, lightness)


def synthesize_ansi(
    background,
    scheme_hues=(),
    saturation=None,
    locked=None,
    force_regenerate=False,
    rng=None,
):
    """Generate the 16 terminal colors for ``background``.

    Black is always #000000 and, with BrightBlack, skips the readability
    pass. Each Bright* chromatic color is derived from its base color so the
    pairs stay related.

    Args:
        background: Terminal background Color or hex string (UI BG1)
        scheme_hues: Hue pool the chromatic anchors snap to
        saturation: Base saturation; drawn from 20-80 when omitted
        locked: role -> Color for roles copied through unchanged
        force_regenerate: Disable all randomness
        rng: Random source (numpy Generator); a fresh one when omitted

    Returns:
        dict of role -> Color
    """
    background = parse_color(background)
    locked = locked or {}
    if force_regenerate:
        rng = None
    elif rng is None:
        rng = make_rng()

    dark = is_dark(background)
    base_saturation = saturation if saturation is not None else _uniform(rng, 20, 80)
    base_lightness = _uniform(rng, 55, 70) if dark else _uniform(rng, 30, 45)

    colors = {"Black": parse_color(ANSI_BLACK)}
    for role in ANSI_BASE_ROLES:
        colors[role] = generate_color(
            _snap_hue(ANSI_ANCHOR_HUES[role], scheme_hues),
            base_saturation,
            base_lightness,
            rng=rng,
            jitter=ANSI_JITTER,
        )
    # Warm near-whites and a dark grey
    colors["White"] = color_from_hsl(
        _uniform(rng, 30, 60), _uniform(rng, 10, 25), _uniform(rng, 92, 100)
    )
    colors["BrightBlack"] = color_from_hsl(0, 0, _uniform(rng, 20, 30))
    colors["BrightWhite"] = color_from_hsl(
        _uniform(rng, 30, 60), _uniform(rng, 5, 15), _uniform(rng, 97, 100)
    )
    for role in ANSI_BASE_ROLES:
        colors[f"Bright{role}"] = brighten(colors[role], rng)

    palette = {}
    for role in ANSI_ROLES:
        if role in locked:
            palette[role] = parse_color(locked[role])
        elif role in ANSI_EXEMPT_ROLES:
            palette[role] = colors[role]
        else:
            palette[role] = ensure_readability(colors[role], background)
    return palette
