import json


def palette_data(snapshot_or_session):
    """Plain snapshot dict from a ThemeSession or an existing snapshot."""
    if isinstance(snapshot_or_session, dict):
        return snapshot_or_session
    return snapshot_or_session.snapshot()


def export_json(snapshot, filepath, theme_name=None, source_file=None):
    """Export the three palettes as one JSON file with metadata.

    Roles are written flat, ANSI roles with their "ansi" prefix, so every
    key is a role name ``handle_color_change`` accepts. Metadata keys start
    with an underscore.

    Args:
        snapshot: ThemeSession.snapshot() dict (or the session itself)
        filepath: Output file path
        theme_name: Optional theme name for metadata
        source_file: Source image filename for metadata
    """
    snapshot = palette_data(snapshot)
    options = snapshot["options"]

    data = {}
    data.update(snapshot["ui"])
    data.update(snapshot["syntax"])
    data.update({f"ansi{role}": value for role, value in snapshot["ansi"].items()})

    data["_scheme"] = options["scheme"]
    data["_base_hue"] = round(options["base_hue"], 2)
    data["_scheme_hues"] = [round(h, 2) for h in snapshot["scheme_hues"]]
    data["_saturation"] = {
        "ui": round(options["ui_saturation"], 2),
        "syntax": round(options["syntax_saturation"], 2),
    }
    data["_appearance"] = "dark" if options["is_dark"] else "light"
    if theme_name:
        data["_name"] = theme_name
    if source_file:
        data["_source"] = source_file

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
