from ..color import is_dark, parse_color
from ..readability import adjust_comment_color
from ..roles import COMMENT_ROLE, SYNTAX_SPECS
from .generator import SYNTAX_JITTER, enforce_readability, make_rng, synthesize_roles

SYNTAX_ANCHORS_DARK = {"foreground": 78}
SYNTAX_ANCHORS_LIGHT = {"foreground": 30}


def synthesize_syntax(
    background,
    scheme_hues,
    syntax_saturation,
    locked=None,
    force_regenerate=False,
    rng=None,
):
    """Generate token colors for code on ``background``.

    The mode is read from the background itself, never from a flag, so a
    recolored BG1 always produces a matching syntax palette. Every generated
    role meets the contrast floor against the background except ``comment``,
    which is tuned into a muted contrast band.

    Args:
        background: Editor background Color or hex string
        scheme_hues: Hue pool (usually the UI pass's extended pool)
        syntax_saturation: Base saturation (0-100) scaled per role
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
    anchors = SYNTAX_ANCHORS_DARK if dark else SYNTAX_ANCHORS_LIGHT
    palette = synthesize_roles(
        SYNTAX_SPECS,
        scheme_hues,
        syntax_saturation,
        anchors,
        dark,
        locked,
        rng,
        SYNTAX_JITTER,
    )
    palette = enforce_readability(palette, background, SYNTAX_SPECS, skip=locked)
    if COMMENT_ROLE not in locked:
        comment = adjust_comment_color(palette[COMMENT_ROLE], background)
        palette[COMMENT_ROLE] = comment
    return palette
