"""Hue schemes: one base hue in, an ordered list of related hues out.

Every scheme is a pure arithmetic mapping of the base hue. Most are a fixed
set of offsets added to the base; a few (golden ratio powers, Fibonacci
divisions, Mandelbrot orbits, torus windings) compute their offsets. The
result length differs per scheme, so callers always index modulo its length.
"""

import cmath
import math
from enum import Enum

import numpy as np

GOLDEN_RATIO = 0.618033988749895  # 1/phi
GOLDEN_ANGLE = 137.50776405003785  # 360 * (1 - 1/phi)


class ColorScheme(Enum):
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    GOLDEN_RATIO = "golden-ratio"
    GOLDEN_RATIO_3 = "golden-ratio-3"
    FIBONACCI = "fibonacci"
    PENTAGRAM_STAR = "pentagram-star"
    VESICA_PISCIS = "vesica-piscis"
    FLOWER_OF_LIFE = "flower-of-life"
    PLATONIC_SOLIDS = "platonic-solids"
    SPIRAL_OF_THEODORUS = "spiral-of-theodorus"
    METATRONS_CUBE = "metatrons-cube"
    SEED_OF_LIFE = "seed-of-life"
    FIBONACCI_SEQUENCE = "fibonacci-sequence"
    GOLDEN_SPIRAL = "golden-spiral"
    METALLIC_MEANS = "metallic-means"
    CONTINUED_FRACTION = "continued-fraction"
    GOLDEN_TRISECTION = "golden-trisection"
    FAREY_SEQUENCE = "farey-sequence"
    NOBLE_NUMBERS = "noble-numbers"
    GOLDEN_TRIANGLE = "golden-triangle"
    SRI_YANTRA = "sri-yantra"
    KABBALAH_TREE_OF_LIFE = "kabbalah-tree-of-life"
    TORUS = "torus"
    MANDELBROT_SET = "mandelbrot-set"
    SIERPINSKI_TRIANGLE = "sierpinski-triangle"
    KOCH_SNOWFLAKE = "koch-snowflake"
    CELTIC_KNOT = "celtic-knot"
    LABYRINTH = "labyrinth"
    YIN_YANG = "yin-yang"
    STAR_TETRAHEDRON = "star-tetrahedron"
    HAMSA = "hamsa"
    ENNEAGRAM = "enneagram"
    HEXAGRAM = "hexagram"
    CHAKRA_SYMBOLS = "chakra-symbols"
    SPIRAL_DYNAMICS = "spiral-dynamics"
    DOUBLE_TORUS = "double-torus"
    ROSETTE_PATTERN = "rosette-pattern"
    NESTED_POLYGONS = "nested-polygons"

    @classmethod
    def parse(cls, name):
        """Look up a scheme by value, enum name, or camel/kebab/snake spelling.

        >>> ColorScheme.parse("SplitComplementary")
        <ColorScheme.SPLIT_COMPLEMENTARY: 'split-complementary'>
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, int) and not isinstance(name, bool):
            # Saved themes store the scheme's position in declaration order
            members = list(cls)
            if 0 <= name < len(members):
                return members[name]
            raise ValueError(f"unknown color scheme: {name!r}")
        key = "".join(ch for ch in str(name).lower() if ch.isalnum())
        for scheme in cls:
            aliases = (
                scheme.value.replace("-", ""),
                scheme.name.lower().replace("_", ""),
            )
            if key in aliases:
                return scheme
        # Older saved themes spell it this way
        if key == "labirinth":
            return cls.LABYRINTH
        raise ValueError(f"unknown color scheme: {name!r}")


def _steps(step, count, start=0.0):
    return [start + step * i for i in range(count)]


def _mandelbrot_offsets(base_hue, count=8):
    # Orbit of z -> z^2 + c, with c on a circle inside the main cardioid at
    # the base hue's angle; each point's argument becomes a hue.
    c = 0.7885 * cmath.exp(1j * math.radians(base_hue))
    z = 0j
    offsets = [0.0]
    for _ in range(count - 1):
        z = z * z + c
        if abs(z) > 2:
            z = z / abs(z)
        offsets.append(math.degrees(cmath.phase(z)) - base_hue)
    return offsets


def _torus_offsets(windings=6, shift=0.0):
    return [
        shift + 360 * i / windings + 30 * math.sin(2 * math.pi * i / windings)
        for i in range(windings)
    ]


_FAREY_5 = [1 / 5, 1 / 4, 1 / 3, 2 / 5, 1 / 2, 3 / 5, 2 / 3, 3 / 4, 4 / 5]
_METALLIC_MEANS = [(n + math.sqrt(n * n + 4)) / 2 for n in range(1, 5)]
_PHI_CONVERGENTS = [1, 2, 3 / 2, 5 / 3, 8 / 5]
_NOBLE_NUMBERS = [
    GOLDEN_RATIO,
    1 - GOLDEN_RATIO,
    1 / (2 + GOLDEN_RATIO),
    1 - 1 / (2 + GOLDEN_RATIO),
]

# scheme -> offsets from the base hue (a list, or a function of the base hue)
_SCHEME_OFFSETS = {
    ColorScheme.MONOCHROMATIC: [0, 0, 0, 0],
    ColorScheme.ANALOGOUS: [0, 30, 60, -30, -60],
    ColorScheme.COMPLEMENTARY: [0, 180],
    ColorScheme.SPLIT_COMPLEMENTARY: [0, 150, 210],
    ColorScheme.TRIADIC: [0, 60, 120],
    ColorScheme.TETRADIC: [0, 90, 180, 270],
    ColorScheme.GOLDEN_RATIO: [0] + [360 * GOLDEN_RATIO**k for k in range(1, 5)],
    ColorScheme.GOLDEN_RATIO_3: [0, 360 * GOLDEN_RATIO, 360 * GOLDEN_RATIO * 2],
    ColorScheme.FIBONACCI: [0, 360 / 13, 360 / 8, 360 / 5],
    ColorScheme.PENTAGRAM_STAR: _steps(72, 5),
    ColorScheme.VESICA_PISCIS: [33, 66],
    ColorScheme.FLOWER_OF_LIFE: _steps(60, 5, start=60),
    ColorScheme.PLATONIC_SOLIDS: _steps(72, 4, start=72),
    ColorScheme.SPIRAL_OF_THEODORUS: [math.sqrt(n) * 180 for n in (2, 3, 4)],
    ColorScheme.METATRONS_CUBE: _steps(60, 5, start=60) + _steps(60, 6, start=30),
    ColorScheme.SEED_OF_LIFE: _steps(51.4, 6, start=51.4),
    ColorScheme.FIBONACCI_SEQUENCE: [0] + [360 / f for f in (2, 3, 5, 8, 13, 21)],
    ColorScheme.GOLDEN_SPIRAL: _steps(GOLDEN_ANGLE, 5),
    ColorScheme.METALLIC_MEANS: [0] + [360 / m for m in _METALLIC_MEANS],
    ColorScheme.CONTINUED_FRACTION: [0] + [360 / c for c in _PHI_CONVERGENTS],
    ColorScheme.GOLDEN_TRISECTION: [
        0,
        120,
        240,
        120 * GOLDEN_RATIO,
        240 * GOLDEN_RATIO,
    ],
    ColorScheme.FAREY_SEQUENCE: [0] + [360 * f for f in _FAREY_5],
    ColorScheme.NOBLE_NUMBERS: [0] + [360 * x for x in _NOBLE_NUMBERS],
    ColorScheme.GOLDEN_TRIANGLE: [0, 36, 72, 144],
    ColorScheme.SRI_YANTRA: _steps(40, 9),
    ColorScheme.KABBALAH_TREE_OF_LIFE: _steps(36, 10),
    ColorScheme.TORUS: _torus_offsets(),
    ColorScheme.MANDELBROT_SET: _mandelbrot_offsets,
    ColorScheme.SIERPINSKI_TRIANGLE: (
        _steps(120, 3) + _steps(120, 3, start=60) + _steps(120, 3, start=30)
    ),
    ColorScheme.KOCH_SNOWFLAKE: [
        30 * k for k in (0, 4, 8, 2, 6, 10, 1, 5, 9, 3, 7, 11)
    ],
    ColorScheme.CELTIC_KNOT: [0, 90, 180, 270, 45, 225],
    ColorScheme.LABYRINTH: [45 * k for k in (0, 3, 2, 1, 4, 7, 6, 5)],
    ColorScheme.YIN_YANG: [0, 180, 15, 195],
    ColorScheme.STAR_TETRAHEDRON: _steps(109.47, 8),
    ColorScheme.HAMSA: [0, 30, 60, -30, -60, 180],
    ColorScheme.ENNEAGRAM: [40 * p for p in (9, 3, 6, 1, 4, 2, 8, 5, 7)],
    ColorScheme.HEXAGRAM: _steps(60, 6),
    ColorScheme.CHAKRA_SYMBOLS: _steps(45, 7),
    ColorScheme.SPIRAL_DYNAMICS: [45 * k + 15 * k * k for k in range(8)],
    ColorScheme.DOUBLE_TORUS: _torus_offsets() + _torus_offsets(shift=180),
    ColorScheme.ROSETTE_PATTERN: [30 * k + 15 * (k % 2) for k in range(12)],
    ColorScheme.NESTED_POLYGONS: _steps(120, 3) + _steps(90, 4) + _steps(72, 5),
}

# Smaller companion sets used around a derived hue (an accent's own hue)
_ADDITIONAL_OFFSETS = {
    ColorScheme.MONOCHROMATIC: [0],
    ColorScheme.ANALOGOUS: [30, -30],
    ColorScheme.COMPLEMENTARY: [180],
    ColorScheme.SPLIT_COMPLEMENTARY: [150, 210],
    ColorScheme.TRIADIC: [120, 240],
    ColorScheme.TETRADIC: [90, 180, 270],
    ColorScheme.GOLDEN_RATIO: [360 * GOLDEN_RATIO * k for k in (1, 2, 3)],
    ColorScheme.FIBONACCI: [360 / 13, 360 / 8, 360 / 5],
    ColorScheme.PENTAGRAM_STAR: [72, 144, 216, 288],
}


def _apply_offsets(base_hue, offsets):
    hues = np.mod(float(base_hue) + np.asarray(offsets, dtype=float), 360.0)
    # np.mod can return 360.0 for tiny negative inputs
    hues[hues >= 360.0] = 0.0
    return hues.tolist()


def generate_scheme_hues(base_hue, scheme):
    """Generate the ordered hue list for ``scheme`` around ``base_hue``.

    Args:
        base_hue: Hue in degrees; any real value, wrapped into [0, 360)
        scheme: A ColorScheme (or anything ColorScheme.parse accepts).
            None or an unknown scheme yields just the base hue.

    Returns:
        list of hues in [0, 360)
    """
    try:
        scheme = ColorScheme.parse(scheme) if scheme is not None else None
    except ValueError:
        scheme = None
    offsets = _SCHEME_OFFSETS.get(scheme, [0])
    if callable(offsets):
        offsets = offsets(float(base_hue) % 360.0)
    return _apply_offsets(base_hue, offsets)


def additional_hues(hue, scheme):
    """Companion hues to widen the pool around a derived hue.

    Schemes without an explicit companion set contribute up to three of
    their own non-base hues; single-hue schemes contribute nothing.
    """
    try:
        scheme = ColorScheme.parse(scheme) if scheme is not None else None
    except ValueError:
        return []
    if scheme in _ADDITIONAL_OFFSETS:
        return _apply_offsets(hue, _ADDITIONAL_OFFSETS[scheme])
    return generate_scheme_hues(hue, scheme)[1:4]
