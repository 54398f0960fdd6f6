import json

from ..color import is_dark, parse_color
from ..roles import ANSI_PREFIX, ANSI_ROLES, SYNTAX_ROLES, UI_ROLES


def load_palettes_from_json(json_path):
    """Load palettes written by export_json, converting hex strings to Colors.

    Args:
        json_path: Path to palette JSON file

    Returns:
        tuple: (ui, syntax, ansi palettes as role -> Color dicts,
            metadata dict with the underscore prefix stripped)

    Raises:
        FormatError: if a role holds a malformed color
        KeyError: if a role is missing from the file
    """
    with open(json_path) as f:
        data = json.load(f)

    metadata = {key[1:]: value for key, value in data.items() if key.startswith("_")}

    ui = {role: parse_color(data[role]) for role in UI_ROLES}
    syntax = {role: parse_color(data[role]) for role in SYNTAX_ROLES}
    ansi = {role: parse_color(data[f"{ANSI_PREFIX}{role}"]) for role in ANSI_ROLES}

    # Appearance follows the background, whatever the metadata says
    metadata["appearance"] = "dark" if is_dark(ui["BG1"]) else "light"
    return ui, syntax, ansi, metadata


def apply_to_session(session, json_path):
    """Replay a saved theme into a session through its color-edit path.

    BG1 goes first so the remaining edits land after its cascade.
    """
    ui, syntax, ansi, metadata = load_palettes_from_json(json_path)
    session.handle_color_change("BG1", ui["BG1"].hex)
    for role, color in ui.items():
        if role != "BG1":
            session.handle_color_change(role, color)
    for role, color in syntax.items():
        session.handle_color_change(role, color)
    for role, color in ansi.items():
        session.handle_color_change(f"{ANSI_PREFIX}{role}", color)
    return metadata
