import colorsys
import re
from collections import namedtuple

from .errors import FormatError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

# YIQ brightness below this is a dark color
DARK_BRIGHTNESS_THRESHOLD = 128


class Color(namedtuple("Color", ["hex", "rgb", "hsl", "luminance", "alpha"])):
    """Immutable color value.

    ``hex`` is always the lower-case ``#rrggbb`` form; ``alpha`` is None for
    opaque colors or an int 0-255 for overlay colors. Two colors are equal
    when they render to the same hex string, whatever float HSL they carry.
    """

    __slots__ = ()

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.hex, self.alpha) == (other.hex, other.alpha)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.hex, self.alpha))


def normalize_hue(hue):
    """Wrap a hue in degrees into [0, 360)."""
    wrapped = float(hue) % 360.0
    # -1e-20 % 360 rounds up to 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def clamp_percent(value):
    """Clamp a saturation or lightness value into [0, 100]."""
    return max(0.0, min(100.0, float(value)))


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hsl(r, g, b):
    r, g, b = r / 255, g / 255, b / 255
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (normalize_hue(h * 360), s * 100, l * 100)


def hsl_to_rgb(h, s, l):
    h, s, l = normalize_hue(h) / 360, clamp_percent(s) / 100, clamp_percent(l) / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (round(r * 255), round(g * 255), round(b * 255))


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def luminance_contrast(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def create_color(r, g, b, alpha=None):
    """Create a Color from RGB channels, deriving HSL from them."""
    r, g, b = (max(0, min(255, int(channel))) for channel in (r, g, b))
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        hsl=rgb_to_hsl(r, g, b),
        luminance=relative_luminance(r, g, b),
        alpha=alpha,
    )


def color_from_hsl(h, s, l, alpha=None):
    """Create a Color from HSL, keeping the normalized HSL it was built from.

    Keeping the source HSL (instead of re-deriving it from the rounded RGB)
    lets saturation edits leave hue and lightness untouched.
    """
    hsl = (normalize_hue(h), clamp_percent(s), clamp_percent(l))
    r, g, b = hsl_to_rgb(*hsl)
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        hsl=hsl,
        luminance=relative_luminance(r, g, b),
        alpha=alpha,
    )


def parse_color(value):
    """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (any case) into a Color.

    Raises:
        FormatError: if ``value`` is not a hex color string
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise FormatError(f"expected a hex color string, got {value!r}")
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise FormatError(f"malformed hex color: {value!r}")

    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    alpha = int(digits[6:8], 16) if len(digits) == 8 else None
    return create_color(*hex_to_rgb(digits[:6]), alpha=alpha)


def to_hex_string(color):
    """Render a Color as ``#rrggbb``, or ``#rrggbbaa`` when it carries alpha."""
    if color.alpha is None:
        return color.hex
    return f"{color.hex}{color.alpha:02x}"


def with_alpha(color, alpha):
    return color._replace(alpha=alpha)


def to_hsl(value):
    """Decompose a color (or hex string) into normalized (h, s, l)."""
    return parse_color(value).hsl


def to_hex(h, s, l):
    """Compose normalized HSL into a ``#rrggbb`` string."""
    return color_from_hsl(h, s, l).hex


def contrast_ratio(a, b):
    """WCAG contrast ratio (>= 1) between two colors or hex strings."""
    return luminance_contrast(parse_color(a).luminance, parse_color(b).luminance)


def brightness(color):
    """YIQ perceived brightness, 0-255."""
    r, g, b = parse_color(color).rgb
    return (r * 299 + g * 587 + b * 114) / 1000


def is_dark(color):
    return brightness(color) < DARK_BRIGHTNESS_THRESHOLD


def is_light(color):
    return not is_dark(color)


def adjust_color(color, lightness_delta=0, saturation_delta=0):
    """Adjust a color's HSL values"""
    h, s, l = color.hsl
    return color_from_hsl(h, s + saturation_delta, l + lightness_delta)


def set_color_lightness(color, target_lightness):
    """Set a color to a specific lightness"""
    h, s, _ = color.hsl
    return color_from_hsl(h, s, target_lightness, alpha=color.alpha)


def set_color_saturation(color, target_saturation):
    """Set a color to a specific saturation"""
    h, _, l = color.hsl
    return color_from_hsl(h, target_saturation, l, alpha=color.alpha)


def clamp_saturation(color, max_sat):
    """Reduce saturation if it exceeds max"""
    if color.hsl[1] > max_sat:
        return set_color_saturation(color, max_sat)
    return color


def angular_distance(a, b):
    """Shortest angular distance between two hues in degrees."""
    d = abs(a - b) % 360
    return min(d, 360 - d)


def blend_colors(color1, color2, factor):
    """Mix two colors in RGB. factor=0 gives color1, factor=1 gives color2."""
    r1, g1, b1 = color1.rgb
    r2, g2, b2 = color2.rgb
    return create_color(
        round(r1 + (r2 - r1) * factor),
        round(g1 + (g2 - g1) * factor),
        round(b1 + (b2 - b1) * factor),
    )
