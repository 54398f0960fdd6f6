from ..color import is_dark
from ..roles import UI_SPECS
from ..schemes import additional_hues
from .generator import UI_JITTER, enforce_readability, make_rng, synthesize_roles

# Anchor lightness per mode: backgrounds near black/white, text at the far end
UI_ANCHORS_DARK = {"background": 12, "foreground": 90}
UI_ANCHORS_LIGHT = {"background": 96, "foreground": 10}


def synthesize_ui(
    scheme_hues,
    ui_saturation,
    is_dark_theme,
    scheme=None,
    locked=None,
    force_regenerate=False,
    few=False,
    rng=None,
):
    """Generate the UI chrome palette.

    Args:
        scheme_hues: Hue pool from the active scheme
        ui_saturation: Base saturation (0-100) scaled per role
        is_dark_theme: Requested mode; a locked BG1 overrides it
        scheme: Active ColorScheme, used to widen the pool around the accents
        locked: role -> Color for roles copied through unchanged
        force_regenerate: Disable all randomness
        few: Keep the pool to the base scheme hues only
        rng: Random source (numpy Generator); a fresh one when omitted

    Returns:
        tuple: (palette dict role -> Color, extended hue pool for syntax/ANSI)
    """
    locked = locked or {}
    if force_regenerate:
        rng = None
    elif rng is None:
        rng = make_rng()

    # A locked BG1 decides the mode for every other role
    dark = is_dark(locked["BG1"]) if "BG1" in locked else is_dark_theme
    anchors = UI_ANCHORS_DARK if dark else UI_ANCHORS_LIGHT
    palette = synthesize_roles(
        UI_SPECS, scheme_hues, ui_saturation, anchors, dark, locked, rng, UI_JITTER
    )
    palette = enforce_readability(palette, palette["BG1"], UI_SPECS, skip=locked)

    # Let syntax and terminal colors harmonize with the accents too
    extended_hues = list(scheme_hues)
    if not few:
        extended_hues += additional_hues(palette["AC1"].hsl[0], scheme)
        extended_hues += additional_hues(palette["AC2"].hsl[0], scheme)

    return palette, extended_hues
