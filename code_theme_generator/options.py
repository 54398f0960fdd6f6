"""Generation options, their defaults, and named presets."""

import os
import random
import sys
from collections import namedtuple

from .color import clamp_percent, normalize_hue
from .schemes import ColorScheme

BASE_HUE_ENV = "CODE_THEME_BASE_HUE"
SEED_ENV = "CODE_THEME_SEED"

DEFAULT_UI_SATURATION = 30
DEFAULT_SYNTAX_SATURATION = 70
DEFAULT_SCHEME = ColorScheme.ANALOGOUS

GenerationOptions = namedtuple(
    "GenerationOptions",
    [
        "is_dark",
        "base_hue",
        "ui_saturation",
        "syntax_saturation",
        "scheme",
        "few",
        "force_regenerate",
    ],
)

PRESETS = {
    "vscode": {"base_hue": 210, "scheme": ColorScheme.ANALOGOUS},
    "monokai": {"base_hue": 70, "scheme": ColorScheme.COMPLEMENTARY},
    "solarized": {"base_hue": 45, "scheme": ColorScheme.TRIADIC},
    "nord": {"base_hue": 220, "scheme": ColorScheme.ANALOGOUS},
    "dracula": {"base_hue": 260, "scheme": ColorScheme.SPLIT_COMPLEMENTARY},
}


def _env_float(name):
    """Read a float from the environment; None when unset or invalid."""
    value = os.environ.get(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        sys.stderr.write(f"[options] invalid {name}={value!r}, using default\n")
        sys.stderr.flush()
        return None


def default_base_hue():
    """Base hue from CODE_THEME_BASE_HUE, else a random one."""
    hue = _env_float(BASE_HUE_ENV)
    if hue is None:
        hue = random.uniform(0, 360)
    return normalize_hue(hue)


def default_seed():
    """Session RNG seed from CODE_THEME_SEED; None means system entropy."""
    seed = _env_float(SEED_ENV)
    return None if seed is None else int(seed)


def default_options(**overrides):
    """Session-start options: dark, Analogous, UI 30 / syntax 70 saturation."""
    options = GenerationOptions(
        is_dark=True,
        base_hue=default_base_hue(),
        ui_saturation=DEFAULT_UI_SATURATION,
        syntax_saturation=DEFAULT_SYNTAX_SATURATION,
        scheme=DEFAULT_SCHEME,
        few=False,
        force_regenerate=False,
    )
    return merge_options(options, **overrides)


def merge_options(options, **partial):
    """Overlay the given fields on ``options``, normalizing each value.

    Fields passed as None are ignored, so callers can forward optional
    arguments untouched.

    Raises:
        TypeError: for a field GenerationOptions does not have
        ValueError: for an unknown scheme
    """
    updates = {key: value for key, value in partial.items() if value is not None}
    unknown = set(updates) - set(GenerationOptions._fields)
    if unknown:
        raise TypeError(f"unknown generation options: {sorted(unknown)!r}")

    if "base_hue" in updates:
        updates["base_hue"] = normalize_hue(updates["base_hue"])
    for key in ("ui_saturation", "syntax_saturation"):
        if key in updates:
            updates[key] = clamp_percent(updates[key])
    if "scheme" in updates:
        updates["scheme"] = ColorScheme.parse(updates["scheme"])
    for key in ("is_dark", "few", "force_regenerate"):
        if key in updates:
            updates[key] = bool(updates[key])
    return options._replace(**updates)


def preset_options(name, options=None):
    """Options for a named preset, on top of ``options`` or the defaults."""
    try:
        preset = PRESETS[name]
    except KeyError:
        raise ValueError(f"unknown preset: {name!r}") from None
    if options is None:
        return default_options(**preset)
    return merge_options(options, **preset)
