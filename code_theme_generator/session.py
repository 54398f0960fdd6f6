"""Editing-session state: options, lock set and the three committed palettes.

All mutation goes through a ThemeSession. Parameter setters are debounced
through a single pending slot; the newest request replaces the pending one
and the replaced request never runs. Saturation sliders and direct color
edits apply immediately.

Nothing here runs on its own. The host loop calls ``pump()`` (or ``flush()``)
to let a due regeneration commit.
"""

import logging
import time
from collections import namedtuple
from enum import Enum

from .color import is_dark, parse_color, to_hex_string, with_alpha
from .errors import SynthesisError
from .options import default_options, default_seed, merge_options
from .palette import (
    make_rng,
    remap_saturation,
    synthesize_ansi,
    synthesize_syntax,
    synthesize_ui,
)
from .palette.generator import enforce_readability
from .roles import COMMENT_ROLE, SYNTAX_SPECS, UI_SPECS, PaletteKind, resolve_role
from .schemes import ColorScheme, generate_scheme_hues

logger = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 0.3

# Variation applied by regenerate_unlocked around the current options
REGENERATE_HUE_VARIATION = 15
REGENERATE_SATURATION_VARIATION = 10


class SessionState(Enum):
    IDLE = "idle"
    PENDING = "pending"


PendingGeneration = namedtuple("PendingGeneration", ["options", "locked", "due"])

# Everything one regeneration cycle produces, committed in one assignment
Commit = namedtuple(
    "Commit", ["options", "scheme_hues", "hue_pool", "ui", "syntax", "ansi"]
)


class ThemeSession:
    """Owner of one theme-editing session.

    Args:
        options: Starting GenerationOptions; defaults from ``default_options()``
        clock: Zero-argument callable returning seconds, used for the debounce
        debounce: Seconds a parameter change waits before regenerating
        seed: RNG seed; falls back to CODE_THEME_SEED, then system entropy
    """

    def __init__(
        self, options=None, clock=time.monotonic, debounce=DEBOUNCE_SECONDS, seed=None
    ):
        self.clock = clock
        self.debounce = debounce
        self.rng = make_rng(default_seed() if seed is None else seed)
        self.locked = set()
        self.commits = 0
        self.last_error = None
        self._pending = None

        options = options if options is not None else default_options()
        # No previous state to fall back on, so a failure here propagates
        self._commit = self._synthesize(options, frozenset(), previous=None)

    # Committed state, read-only for callers

    @property
    def options(self):
        return self._commit.options

    @property
    def scheme_hues(self):
        return list(self._commit.scheme_hues)

    @property
    def hue_pool(self):
        """Scheme hues widened around the accents; what syntax/ANSI draw from."""
        return list(self._commit.hue_pool)

    @property
    def ui(self):
        return dict(self._commit.ui)

    @property
    def syntax(self):
        return dict(self._commit.syntax)

    @property
    def ansi(self):
        return dict(self._commit.ansi)

    @property
    def background(self):
        return self._commit.ui["BG1"]

    @property
    def is_dark(self):
        """Theme mode as decided by the committed BG1."""
        return is_dark(self.background)

    @property
    def state(self):
        return SessionState.IDLE if self._pending is None else SessionState.PENDING

    @property
    def pending(self):
        return self._pending

    # Debounced path

    def generate_colors(self, locked=None, **partial):
        """Request a regeneration with ``partial`` options merged in.

        Replaces any pending request; fields set by the replaced request are
        kept unless overridden here.

        Args:
            locked: Role names to keep for this cycle instead of the lock set
            **partial: Any GenerationOptions fields

        Returns:
            The armed PendingGeneration
        """
        if self._pending is not None:
            base = self._pending.options
            if locked is None:
                locked = self._pending.locked
        else:
            base = self.options
        options = merge_options(base, **partial)
        if locked is not None:
            locked = frozenset(locked)

        if self._pending is not None:
            logger.debug("superseding pending generation")
        self._pending = PendingGeneration(options, locked, self.clock() + self.debounce)
        return self._pending

    def set_base_hue(self, value):
        return self.generate_colors(base_hue=value)

    def set_scheme(self, value):
        return self.generate_colors(scheme=value)

    def set_is_dark(self, value):
        return self.generate_colors(is_dark=value)

    def set_few(self, value):
        return self.generate_colors(few=value)

    def cancel(self):
        """Drop the pending request, if any."""
        self._pending = None

    def pump(self, now=None):
        """Run the pending regeneration if its debounce interval has passed.

        Returns:
            bool: True if a new state was committed
        """
        if self._pending is None:
            return False
        if now is None:
            now = self.clock()
        if now < self._pending.due:
            return False
        return self.flush()

    def flush(self):
        """Run the pending regeneration now, ignoring the debounce interval."""
        pending, self._pending = self._pending, None
        if pending is None:
            return False
        locked = self.locked if pending.locked is None else pending.locked
        return self._run(pending.options, locked)

    def regenerate_unlocked(self):
        """Regenerate unlocked roles near the current options, without jitter."""
        options = self.options
        hue_delta = self.rng.integers(
            -REGENERATE_HUE_VARIATION, REGENERATE_HUE_VARIATION + 1
        )
        sat_delta = self.rng.integers(
            -REGENERATE_SATURATION_VARIATION, REGENERATE_SATURATION_VARIATION + 1
        )
        return self.generate_colors(
            base_hue=options.base_hue + hue_delta,
            ui_saturation=options.ui_saturation + sat_delta,
            syntax_saturation=options.syntax_saturation + sat_delta,
            force_regenerate=True,
        )

    def randomize(self):
        """Regenerate from a random base hue, saturations and scheme."""
        schemes = list(ColorScheme)
        return self.generate_colors(
            base_hue=self.rng.uniform(0, 360),
            ui_saturation=int(self.rng.integers(0, 100)),
            syntax_saturation=int(self.rng.integers(0, 100)),
            scheme=schemes[int(self.rng.integers(len(schemes)))],
            force_regenerate=False,
        )

    # Immediate paths

    def set_ui_saturation(self, value):
        """Rescale the UI palette's saturation right away, keeping hues."""
        self._update_pending(ui_saturation=value)
        options = merge_options(self.options, ui_saturation=value)
        locked = self._locked_roles(UI_SPECS)
        ui = remap_saturation(self._commit.ui, options.ui_saturation, locked=locked)
        ui = enforce_readability(
            ui, ui["BG1"], UI_SPECS, skip=locked, saturation_delta=0
        )

        syntax, ansi = self._commit.syntax, self._commit.ansi
        if ui["BG1"] != self.background:
            skip = self._locked_roles(SYNTAX_SPECS) | {COMMENT_ROLE}
            syntax = enforce_readability(
                syntax, ui["BG1"], SYNTAX_SPECS, skip=skip, saturation_delta=0
            )
            ansi = synthesize_ansi(ui["BG1"], self._commit.hue_pool, rng=self.rng)
        self._commit = self._commit._replace(
            options=options, ui=ui, syntax=syntax, ansi=ansi
        )

    def set_syntax_saturation(self, value):
        """Rescale the syntax palette's saturation right away, keeping hues."""
        self._update_pending(syntax_saturation=value)
        options = merge_options(self.options, syntax_saturation=value)
        syntax = remap_saturation(
            self._commit.syntax,
            options.syntax_saturation,
            locked=self._locked_roles(SYNTAX_SPECS),
            background=self.background,
        )
        self._commit = self._commit._replace(options=options, syntax=syntax)

    def handle_color_change(self, role, hex_color):
        """Set one role's color directly.

        Editing BG1 resynthesizes the syntax and ANSI palettes against the new
        background. Editing an ANSI role patches only that role.

        Raises:
            KeyError: if ``role`` names no role
            FormatError: if ``hex_color`` is malformed; nothing is changed

        Returns:
            bool: False if the BG1 cascade failed and the edit was dropped
        """
        ref = resolve_role(role)
        try:
            color = parse_color(hex_color)
        except ValueError:
            logger.warning("rejected %s edit: %r", ref.name, hex_color)
            raise

        if ref.kind is PaletteKind.ANSI:
            ansi = dict(self._commit.ansi, **{ref.name: color})
            self._commit = self._commit._replace(ansi=ansi)
            return True

        if ref.kind is PaletteKind.SYNTAX:
            syntax = dict(self._commit.syntax, **{ref.name: color})
            self._commit = self._commit._replace(syntax=syntax)
            return True

        # Overlays keep their alpha unless the edit carries one
        previous = self._commit.ui[ref.name]
        if color.alpha is None and previous.alpha is not None:
            color = with_alpha(color, previous.alpha)
        ui = dict(self._commit.ui, **{ref.name: color})
        if ref.name != "BG1":
            self._commit = self._commit._replace(ui=ui)
            return True

        try:
            syntax = synthesize_syntax(
                color,
                self._commit.hue_pool,
                self.options.syntax_saturation,
                locked=self._locked_values(self._commit.syntax),
                rng=self.rng,
            )
            ansi = synthesize_ansi(color, self._commit.hue_pool, rng=self.rng)
        except Exception as exc:
            self._record_failure(exc)
            return False
        options = self.options._replace(is_dark=is_dark(color))
        self._commit = self._commit._replace(
            options=options, ui=ui, syntax=syntax, ansi=ansi
        )
        self.commits += 1
        return True

    def toggle_color_lock(self, role):
        """Lock or unlock a UI or syntax role for future regenerations.

        Returns:
            bool: True if the role is now locked

        Raises:
            KeyError: if ``role`` names no role
            ValueError: for ANSI roles, which regenerate as a whole
        """
        ref = resolve_role(role)
        if ref.kind is PaletteKind.ANSI:
            raise ValueError(f"ANSI roles cannot be locked: {ref.name!r}")
        if ref.name in self.locked:
            self.locked.discard(ref.name)
            return False
        self.locked.add(ref.name)
        return True

    def regenerate_ansi(self):
        """Resynthesize the terminal palette against the committed BG1."""
        try:
            ansi = synthesize_ansi(self.background, self._commit.hue_pool, rng=self.rng)
        except Exception as exc:
            self._record_failure(exc)
            return False
        self._commit = self._commit._replace(ansi=ansi)
        return True

    def snapshot(self):
        """Committed state as plain data: role -> hex dicts, hues, options."""
        options = self.options._asdict()
        options["scheme"] = options["scheme"].value
        return {
            "ui": _hex_dict(self._commit.ui),
            "syntax": _hex_dict(self._commit.syntax),
            "ansi": _hex_dict(self._commit.ansi),
            "scheme_hues": self.scheme_hues,
            "options": options,
        }

    # Internals

    def _update_pending(self, **fields):
        if self._pending is not None:
            options = merge_options(self._pending.options, **fields)
            self._pending = self._pending._replace(options=options)

    def _locked_roles(self, specs):
        return {role for role in self.locked if role in specs}

    def _locked_values(self, palette, locked=None):
        locked = self.locked if locked is None else locked
        return {role: color for role, color in palette.items() if role in locked}

    def _synthesize(self, options, locked, previous):
        rng = None if options.force_regenerate else self.rng
        scheme_hues = generate_scheme_hues(options.base_hue, options.scheme)
        logger.debug(
            "scheme %s from %.1f: %s",
            options.scheme.value,
            options.base_hue,
            scheme_hues,
        )

        ui, hue_pool = synthesize_ui(
            scheme_hues,
            options.ui_saturation,
            options.is_dark,
            scheme=options.scheme,
            locked=self._locked_values(previous.ui, locked) if previous else None,
            force_regenerate=options.force_regenerate,
            few=options.few,
            rng=rng,
        )
        background = ui["BG1"]
        syntax = synthesize_syntax(
            background,
            hue_pool,
            options.syntax_saturation,
            locked=self._locked_values(previous.syntax, locked) if previous else None,
            force_regenerate=options.force_regenerate,
            rng=rng,
        )
        if previous is None or previous.ui["BG1"] != background:
            ansi = synthesize_ansi(
                background,
                hue_pool,
                force_regenerate=options.force_regenerate,
                rng=rng,
            )
        else:
            ansi = previous.ansi

        # force_regenerate applies to one cycle only
        options = options._replace(is_dark=is_dark(background), force_regenerate=False)
        return Commit(options, scheme_hues, hue_pool, ui, syntax, ansi)

    def _run(self, options, locked):
        try:
            commit = self._synthesize(options, locked, previous=self._commit)
        except Exception as exc:
            self._record_failure(exc)
            return False
        self._commit = commit
        self.commits += 1
        self.last_error = None
        logger.debug(
            "committed generation %d (BG1 %s)", self.commits, commit.ui["BG1"].hex
        )
        return True

    def _record_failure(self, exc):
        if isinstance(exc, SynthesisError):
            error = exc
        else:
            error = SynthesisError(f"palette synthesis failed: {exc}")
            error.__cause__ = exc
        self.last_error = error
        logger.exception("regeneration failed, keeping previous palettes")


def _hex_dict(palette):
    return {role: to_hex_string(color) for role, color in palette.items()}
