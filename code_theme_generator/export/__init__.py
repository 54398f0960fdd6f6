from .json_export import export_json
from .loader import apply_to_session, load_palettes_from_json
from .preview import create_png_preview, render_preview
from .report import generate_readability_report, print_palette
from .vscode import generate_vscode_theme

__all__ = [
    "apply_to_session",
    "create_png_preview",
    "export_json",
    "generate_readability_report",
    "generate_vscode_theme",
    "load_palettes_from_json",
    "print_palette",
    "render_preview",
]
