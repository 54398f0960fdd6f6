from ..color import set_color_saturation
from ..roles import SPECS, COMMENT_ROLE
from .generator import enforce_readability


def specs_for(palette):
    """Role table for a UI or syntax palette, identified by its keys."""
    keys = set(palette)
    for specs in SPECS.values():
        if keys == set(specs):
            return specs
    raise KeyError(f"not a UI or syntax palette: {sorted(keys)!r}")


def remap_saturation(palette, new_saturation, locked=frozenset(), background=None):
    """Rescale every unlocked role's saturation to ``new_saturation``.

    Each role gets ``new_saturation`` times its multiplier from the same role
    table synthesis uses. Hue and lightness are kept exactly. With a
    ``background``, the contrast floor is re-run afterwards by moving
    lightness alone (never on the comment role, which keeps its band), so a
    second remap to the same saturation returns the same palette.

    Args:
        palette: UI or syntax palette, role -> Color
        new_saturation: Base saturation, 0-100
        locked: Roles left untouched
        background: Optional background to re-check readability against

    Returns:
        A new palette dict; the input is not modified.
    """
    specs = specs_for(palette)
    remapped = {}
    for role, color in palette.items():
        if role in locked:
            remapped[role] = color
        else:
            target = new_saturation * specs[role].saturation
            remapped[role] = set_color_saturation(color, target)

    if background is not None:
        # Lightness only, so the new saturation survives the repair
        skip = set(locked) | {COMMENT_ROLE}
        remapped = enforce_readability(
            remapped, background, specs, skip=skip, saturation_delta=0
        )
    return remapped
