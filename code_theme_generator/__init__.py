from .color import Color, contrast_ratio, is_dark, is_light, parse_color, to_hex, to_hsl
from .errors import ConvergenceWarning, FormatError, SynthesisError
from .options import GenerationOptions, default_options
from .readability import adjust_comment_color, ensure_readability
from .schemes import ColorScheme, additional_hues, generate_scheme_hues
from .session import SessionState, ThemeSession

__all__ = [
    "Color",
    "ColorScheme",
    "ConvergenceWarning",
    "FormatError",
    "GenerationOptions",
    "SessionState",
    "SynthesisError",
    "ThemeSession",
    "additional_hues",
    "adjust_comment_color",
    "contrast_ratio",
    "default_options",
    "ensure_readability",
    "generate_scheme_hues",
    "is_dark",
    "is_light",
    "parse_color",
    "to_hex",
    "to_hsl",
]
