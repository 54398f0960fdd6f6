from .ansi import synthesize_ansi
from .generator import make_rng
from .saturation import remap_saturation
from .syntax import synthesize_syntax
from .ui import synthesize_ui

__all__ = [
    "make_rng",
    "remap_saturation",
    "synthesize_ansi",
    "synthesize_syntax",
    "synthesize_ui",
]
