"""Exceptions and warnings raised by the palette engine."""


class FormatError(ValueError):
    """A color string could not be parsed as #rgb, #rrggbb or #rrggbbaa."""


class SynthesisError(RuntimeError):
    """A palette synthesis pass failed; the previous palettes stay in effect."""


class ConvergenceWarning(UserWarning):
    """The readability loop ran out of iterations before reaching its target.

    The best color found is still returned.
    """
