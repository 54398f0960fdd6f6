"""Contrast repair for generated colors.

``ensure_readability`` pushes a color away from its background until it
meets a contrast floor. ``adjust_comment_color`` steers a comment color into
a contrast band instead, so comments stay legible but recede.
"""

import logging
import warnings

from .color import (
    adjust_color,
    clamp_saturation,
    is_dark,
    luminance_contrast,
    parse_color,
)
from .errors import ConvergenceWarning

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONTRAST = 5.5
RELAXED_MIN_CONTRAST = 1.5
MAX_ITERATIONS = 100
READABILITY_STEP = 2  # lightness and saturation points per iteration

# (min, max) contrast band for comments
COMMENT_BAND_DARK = (3.0, 3.25)
COMMENT_BAND_LIGHT = (1.5, 2.5)
COMMENT_MAX_SATURATION_DARK = 15
COMMENT_MAX_SATURATION_LIGHT = 35
COMMENT_MAX_ITERATIONS = 200
COMMENT_STEP = 0.5


def iter_readability(
    color,
    background,
    min_contrast=DEFAULT_MIN_CONTRAST,
    max_iterations=MAX_ITERATIONS,
    saturation_delta=READABILITY_STEP,
):
    """Yield each candidate the readability loop visits, starting with ``color``.

    Stops once a candidate reaches ``min_contrast``, once lightness is pinned
    at 0 or 100, or after ``max_iterations`` adjustments. Each step also adds
    ``saturation_delta``; pass 0 to move lightness only.
    """
    current = parse_color(color)
    bg = parse_color(background)
    # Move away from the background: lighter on dark, darker on light
    lighten = is_dark(bg)
    step = READABILITY_STEP if lighten else -READABILITY_STEP

    yield current
    for _ in range(max_iterations):
        if luminance_contrast(current.luminance, bg.luminance) >= min_contrast:
            return
        lightness = current.hsl[2]
        if (lighten and lightness >= 100) or (not lighten and lightness <= 0):
            return
        current = adjust_color(
            current, lightness_delta=step, saturation_delta=saturation_delta
        )
        yield current


def ensure_readability(
    color,
    background,
    min_contrast=DEFAULT_MIN_CONTRAST,
    max_iterations=MAX_ITERATIONS,
    saturation_delta=READABILITY_STEP,
):
    """Adjust ``color`` until it meets ``min_contrast`` against ``background``.

    Args:
        color: Candidate Color or hex string
        background: Background Color or hex string
        min_contrast: Contrast floor to reach
        max_iterations: Adjustment budget
        saturation_delta: Saturation added per step; 0 keeps saturation fixed

    Returns:
        The first candidate meeting the floor, or the best-contrast candidate
        seen when the floor is unreachable (a ConvergenceWarning is issued).
        The candidate's alpha is preserved.
    """
    source = parse_color(color)
    bg = parse_color(background)

    best = source
    best_contrast = luminance_contrast(source.luminance, bg.luminance)
    candidates = iter_readability(
        source, bg, min_contrast, max_iterations, saturation_delta
    )
    for candidate in candidates:
        contrast = luminance_contrast(candidate.luminance, bg.luminance)
        if contrast >= min_contrast:
            return candidate._replace(alpha=source.alpha)
        if contrast > best_contrast:
            best, best_contrast = candidate, contrast

    logger.debug(
        "readability: %s vs %s stuck at %.2f:1 (wanted %.2f:1)",
        source.hex,
        bg.hex,
        best_contrast,
        min_contrast,
    )
    warnings.warn(
        f"{source.hex} cannot reach {min_contrast}:1 against {bg.hex}; "
        f"best is {best.hex} at {best_contrast:.2f}:1",
        ConvergenceWarning,
        stacklevel=2,
    )
    return best._replace(alpha=source.alpha)


def comment_band(background):
    """Default (min, max) comment contrast band for a background."""
    return COMMENT_BAND_DARK if is_dark(background) else COMMENT_BAND_LIGHT


def adjust_comment_color(
    color,
    background,
    min_contrast=None,
    max_contrast=None,
    max_iterations=COMMENT_MAX_ITERATIONS,
):
    """Tune a comment color into a contrast band against ``background``.

    Too much contrast moves the color toward the background and desaturates
    it; too little moves it away and saturates it. Saturation never ends above
    the ceiling (15 on dark themes, 35 on light) so comments read as muted.
    """
    bg = parse_color(background)
    dark = is_dark(bg)
    band_min, band_max = comment_band(bg)
    min_contrast = band_min if min_contrast is None else min_contrast
    max_contrast = band_max if max_contrast is None else max_contrast
    # Lightness direction that lowers contrast
    toward_bg = -COMMENT_STEP if dark else COMMENT_STEP

    ceiling = COMMENT_MAX_SATURATION_DARK if dark else COMMENT_MAX_SATURATION_LIGHT
    # Start under the ceiling so capping never moves a settled color
    current = clamp_saturation(parse_color(color), ceiling)
    for _ in range(max_iterations):
        contrast = luminance_contrast(current.luminance, bg.luminance)
        if contrast > max_contrast:
            current = adjust_color(
                current, lightness_delta=toward_bg, saturation_delta=-COMMENT_STEP
            )
        elif contrast < min_contrast:
            boost = min(COMMENT_STEP, max(0.0, ceiling - current.hsl[1]))
            current = adjust_color(
                current, lightness_delta=-toward_bg, saturation_delta=boost
            )
        else:
            break

    contrast = luminance_contrast(current.luminance, bg.luminance)
    if not min_contrast <= contrast <= max_contrast:
        logger.debug(
            "comment: %s did not settle in [%s, %s] against %s",
            current.hex,
            min_contrast,
            max_contrast,
            bg.hex,
        )
        warnings.warn(
            f"comment color did not settle between {min_contrast}:1 "
            f"and {max_contrast}:1 against {bg.hex}",
            ConvergenceWarning,
            stacklevel=2,
        )

    return clamp_saturation(current, ceiling)
