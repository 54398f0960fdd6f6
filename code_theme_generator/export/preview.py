from PIL import Image, ImageDraw

from ..color import blend_colors, parse_color
from .json_export import palette_data

SWATCH_SIZE = 72
LABEL_HEIGHT = 18
COLUMNS = 8
PADDING = 12


def _text_color(color):
    return "#000000" if color.luminance > 0.4 else "#ffffff"


def _flatten(value, background):
    """Opaque color for a swatch; overlays are composited onto the background."""
    color = parse_color(value)
    if color.alpha is None:
        return color
    return blend_colors(background, color, color.alpha / 255)


def _rows_needed(count):
    return (count + COLUMNS - 1) // COLUMNS


def render_preview(snapshot):
    """Render a swatch sheet of all three palettes on the theme background.

    Returns:
        PIL.Image.Image in RGB mode
    """
    snapshot = palette_data(snapshot)
    background = parse_color(snapshot["ui"]["BG1"])
    foreground = parse_color(snapshot["ui"]["FG1"])
    sections = [
        ("UI", snapshot["ui"]),
        ("Syntax", snapshot["syntax"]),
        ("Terminal", snapshot["ansi"]),
    ]

    cell_h = SWATCH_SIZE + LABEL_HEIGHT
    width = PADDING * 2 + COLUMNS * SWATCH_SIZE
    height = PADDING
    for _, palette in sections:
        height += LABEL_HEIGHT + _rows_needed(len(palette)) * cell_h + PADDING

    img = Image.new("RGB", (width, height), background.rgb)
    draw = ImageDraw.Draw(img)

    y = PADDING
    for title, palette in sections:
        draw.text((PADDING, y), title, fill=foreground.rgb)
        y += LABEL_HEIGHT
        for i, (role, value) in enumerate(palette.items()):
            color = _flatten(value, background)
            x0 = PADDING + (i % COLUMNS) * SWATCH_SIZE
            y0 = y + (i // COLUMNS) * cell_h
            x1, y1 = x0 + SWATCH_SIZE - 2, y0 + SWATCH_SIZE - 2
            draw.rectangle([x0, y0, x1, y1], fill=color.rgb)
            draw.text((x0 + 3, y0 + 3), color.hex, fill=_text_color(color))
            draw.text((x0, y0 + SWATCH_SIZE), role[:11], fill=foreground.rgb)
        y += _rows_needed(len(palette)) * cell_h + PADDING

    return img


def create_png_preview(snapshot, filepath):
    """Write the swatch sheet to ``filepath`` as PNG."""
    render_preview(snapshot).save(filepath, format="PNG")
