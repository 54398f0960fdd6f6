"""Role vocabularies and the per-role metadata shared by synthesis and remap.

A role is a semantic palette slot ("BG1", "comment", "BrightRed"). Each
vocabulary has one table of RoleSpec entries; the synthesizers read hue,
saturation and lightness placement from it and the saturation remapper reads
the same saturation multipliers, so the two can never disagree.
"""

from collections import namedtuple
from enum import Enum

from .readability import DEFAULT_MIN_CONTRAST, RELAXED_MIN_CONTRAST


class PaletteKind(Enum):
    UI = "ui"
    SYNTAX = "syntax"
    ANSI = "ansi"


RoleRef = namedtuple("RoleRef", ["kind", "name"])

# hue_index: position in the hue pool (taken modulo its length)
# hue_offset: degrees added to the pooled hue
# random_hue: pick the pool position at random on each pass
# fixed_hue: absolute hue, ignoring the pool (semantic status colors)
# saturation: multiplier on the palette's base saturation
# anchor: "background" or "foreground" base lightness
# lightness_offset: points away from the anchor toward higher contrast
#   (added on dark themes, subtracted on light ones)
# min_contrast: readability floor against BG1; None means exempt
# alpha: overlay alpha byte, None for opaque roles
RoleSpec = namedtuple(
    "RoleSpec",
    [
        "hue_index",
        "hue_offset",
        "random_hue",
        "fixed_hue",
        "saturation",
        "anchor",
        "lightness_offset",
        "min_contrast",
        "alpha",
    ],
    defaults=(0, 0, False, None, 1.0, "foreground", 0, DEFAULT_MIN_CONTRAST, None),
)

OVERLAY_ALPHA = 0x70

UI_SPECS = {
    "BG1": RoleSpec(0, saturation=0.1, anchor="background", min_contrast=None),
    "BG2": RoleSpec(
        0, saturation=0.15, anchor="background", lightness_offset=3, min_contrast=None
    ),
    "BG3": RoleSpec(
        0, saturation=0.2, anchor="background", lightness_offset=6, min_contrast=None
    ),
    "FG1": RoleSpec(0, saturation=0.45),
    "FG2": RoleSpec(0, saturation=0.45, lightness_offset=-12),
    "FG3": RoleSpec(
        0, saturation=0.05, anchor="background", lightness_offset=2, min_contrast=None
    ),
    "AC1": RoleSpec(1, saturation=1.2, lightness_offset=-30),
    "AC2": RoleSpec(2, saturation=1.1, lightness_offset=-25),
    "BORDER": RoleSpec(
        0,
        saturation=0.2,
        anchor="background",
        lightness_offset=10,
        min_contrast=RELAXED_MIN_CONTRAST,
    ),
    "INFO": RoleSpec(fixed_hue=210, saturation=1.0, lightness_offset=-25),
    "ERROR": RoleSpec(fixed_hue=0, saturation=1.2, lightness_offset=-25),
    "WARNING": RoleSpec(fixed_hue=30, saturation=1.1, lightness_offset=-25),
    "SUCCESS": RoleSpec(fixed_hue=120, saturation=0.9, lightness_offset=-30),
    "lineHighlight": RoleSpec(
        0,
        saturation=0.3,
        anchor="background",
        lightness_offset=5,
        min_contrast=None,
        alpha=OVERLAY_ALPHA,
    ),
    "selection": RoleSpec(
        3,
        saturation=0.4,
        anchor="background",
        lightness_offset=15,
        min_contrast=None,
        alpha=OVERLAY_ALPHA,
    ),
    "findMatch": RoleSpec(
        1,
        saturation=0.6,
        anchor="background",
        lightness_offset=20,
        min_contrast=None,
        alpha=OVERLAY_ALPHA,
    ),
}

COMMENT_ROLE = "comment"

SYNTAX_SPECS = {
    "keyword": RoleSpec(0, lightness_offset=-8),
    # Tuned into a contrast band, not a floor
    "comment": RoleSpec(2, saturation=0.5, lightness_offset=-18, min_contrast=None),
    "function": RoleSpec(3, random_hue=True, lightness_offset=2),
    "functionCall": RoleSpec(3, 15, random_hue=True, saturation=0.95),
    "variable": RoleSpec(0, 30, saturation=0.8, lightness_offset=-3),
    "variableDeclaration": RoleSpec(0, 45, saturation=0.85, lightness_offset=-1),
    "variableProperty": RoleSpec(0, 15, saturation=0.75, lightness_offset=-5),
    "type": RoleSpec(1, 30, random_hue=True, lightness_offset=-8),
    "typeParameter": RoleSpec(
        1, 15, random_hue=True, saturation=0.95, lightness_offset=-10
    ),
    "constant": RoleSpec(2, 30, random_hue=True, saturation=1.1, lightness_offset=-3),
    "class": RoleSpec(3, 30, random_hue=True, lightness_offset=-8),
    "parameter": RoleSpec(2, 60, saturation=0.8, lightness_offset=-3),
    "property": RoleSpec(3, 60, saturation=0.9, lightness_offset=-3),
    "operator": RoleSpec(0, saturation=0.6, lightness_offset=2),
    "storage": RoleSpec(1, 180, random_hue=True, saturation=0.9, lightness_offset=-8),
    "punctuation": RoleSpec(0, saturation=0.4, lightness_offset=7),
    "punctuationQuote": RoleSpec(0, saturation=0.35, lightness_offset=9),
    "punctuationBrace": RoleSpec(0, saturation=0.45, lightness_offset=4),
    "punctuationComma": RoleSpec(0, saturation=0.3, lightness_offset=2),
    "selector": RoleSpec(1, 90, random_hue=True, lightness_offset=-8),
    "support": RoleSpec(2, 210, random_hue=True, saturation=1.2, lightness_offset=-13),
    "modifier": RoleSpec(3, 90, random_hue=True, saturation=0.9, lightness_offset=-3),
    "control": RoleSpec(0, 120, random_hue=True, saturation=1.2, lightness_offset=-13),
    "controlFlow": RoleSpec(
        0, 135, random_hue=True, saturation=1.15, lightness_offset=-11
    ),
    "controlImport": RoleSpec(
        0, 105, random_hue=True, saturation=1.1, lightness_offset=-15
    ),
    "tag": RoleSpec(2, random_hue=True, lightness_offset=-3),
    "tagPunctuation": RoleSpec(2, saturation=0.8, lightness_offset=-3),
    "attribute": RoleSpec(3, 120, random_hue=True, saturation=0.9, lightness_offset=2),
    "unit": RoleSpec(2, -210, random_hue=True, saturation=1.2, lightness_offset=-13),
    "datetime": RoleSpec(0, 180, random_hue=True, saturation=1.05, lightness_offset=-8),
    "other": RoleSpec(2, 210, random_hue=True, saturation=1.1, lightness_offset=-9),
    "language": RoleSpec(
        3, 180, random_hue=True, saturation=1.25, lightness_offset=-15
    ),
}

ANSI_BASE_ROLES = ("Red", "Green", "Yellow", "Blue", "Magenta", "Cyan")

# Anchor hues for the chromatic terminal colors
ANSI_ANCHOR_HUES = {
    "Red": 0,
    "Green": 120,
    "Yellow": 45,
    "Blue": 240,
    "Magenta": 300,
    "Cyan": 180,
}

ANSI_EXEMPT_ROLES = frozenset({"Black", "BrightBlack"})
ANSI_BLACK = "#000000"

UI_ROLES = tuple(UI_SPECS)
SYNTAX_ROLES = tuple(SYNTAX_SPECS)
ANSI_ROLES = (
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Magenta",
    "Cyan",
    "White",
    "BrightBlack",
    "BrightRed",
    "BrightGreen",
    "BrightYellow",
    "BrightBlue",
    "BrightMagenta",
    "BrightCyan",
    "BrightWhite",
)

VOCABULARIES = {
    PaletteKind.UI: UI_ROLES,
    PaletteKind.SYNTAX: SYNTAX_ROLES,
    PaletteKind.ANSI: ANSI_ROLES,
}

SPECS = {
    PaletteKind.UI: UI_SPECS,
    PaletteKind.SYNTAX: SYNTAX_SPECS,
}

ANSI_PREFIX = "ansi"


def resolve_role(key):
    """Resolve a role key to a RoleRef once, at the call boundary.

    Accepts a RoleRef, a UI or syntax role name, an ANSI role name, or an
    ANSI name with the "ansi" prefix ("ansiRed").

    Raises:
        KeyError: if the key names no role
    """
    if isinstance(key, RoleRef):
        if key.name not in VOCABULARIES[key.kind]:
            raise KeyError(key.name)
        return key
    if key.startswith(ANSI_PREFIX) and key[len(ANSI_PREFIX) :] in ANSI_ROLES:
        return RoleRef(PaletteKind.ANSI, key[len(ANSI_PREFIX) :])
    for kind, names in VOCABULARIES.items():
        if key in names:
            return RoleRef(kind, key)
    raise KeyError(key)
