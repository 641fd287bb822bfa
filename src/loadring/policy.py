"""Load-to-color policy.

The policy is an ordered table of :class:`VisualState` rules. Thresholds in
:data:`DEFAULT_RULES` are per core; :func:`build_policy` multiplies them by
the core count once at startup so they compare directly with the raw load
average reported by the OS.
"""

import logging
import math
from collections.abc import Iterable

from loadring.models import BlinkPattern, RingColor, VisualState

logger = logging.getLogger(__name__)


def _rule(threshold: float, color: RingColor, brightness: int,
          blink: BlinkPattern = BlinkPattern.NONE) -> VisualState:
    return VisualState(load_threshold=threshold, color=color, brightness=brightness, blink=blink)


# Ascending thresholds. First entry is the idle state, last entry is the
# overload fallback and its threshold is never compared.
DEFAULT_RULES: tuple[VisualState, ...] = (
    _rule(0, RingColor.WHITE, 80),
    _rule(0.02, RingColor.BLUE, 10),
    _rule(0.05, RingColor.BLUE, 20),
    _rule(0.10, RingColor.BLUE, 40),
    _rule(0.15, RingColor.BLUE, 80),
    _rule(0.25, RingColor.CYAN, 50),
    _rule(0.5, RingColor.GREEN, 80),
    _rule(0.75, RingColor.YELLOW, 60),
    _rule(1.0, RingColor.PINK, 60),
    _rule(2.0, RingColor.RED, 80),
    _rule(4.0, RingColor.RED, 100),
    _rule(0, RingColor.RED, 100, BlinkPattern.FADE_FAST),
)


class ColorPolicy:
    """
    Maps a load average to a visual state.

    Instances are read-only: the rule table is stored as a tuple of frozen
    models. Build scaled instances with :func:`build_policy`.
    """

    def __init__(self, rules: Iterable[VisualState]):
        self._rules = tuple(rules)
        if not self._rules:
            raise ValueError("ColorPolicy needs at least one rule")

    @property
    def rules(self) -> tuple[VisualState, ...]:
        return self._rules

    @property
    def fallback(self) -> VisualState:
        """State used when the load exceeds every threshold."""
        return self._rules[-1]

    def resolve(self, load: float) -> VisualState:
        """
        Return the first rule whose threshold is strictly greater than ``load``.

        Falls back to the last rule when none matches, so any float
        (negative, infinite or NaN) resolves to some state.
        """
        for rule in self._rules:
            if load < rule.load_threshold:
                return rule
        return self._rules[-1]

    def describe(self) -> str:
        """One line per rule, fallback marked."""
        lines = []
        last = len(self._rules) - 1
        for i, rule in enumerate(self._rules):
            bound = "fallback" if i == last else f"< {rule.load_threshold:g}"
            lines.append(f"{i:>2}  {bound:<10} {rule.label()}")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"ColorPolicy({[str(r) for r in self._rules]})"


def build_policy(cores: int, rules: Iterable[VisualState] = DEFAULT_RULES) -> ColorPolicy:
    """
    Build a policy with every threshold scaled by ``cores``.

    The source rules are left untouched, so calling this again yields an
    independent policy scaled exactly once.

    Raises:
        ValueError: If ``cores`` is not a positive finite number
    """
    if not (cores >= 1 and math.isfinite(cores)):
        raise ValueError(f"cores must be >= 1, got {cores!r}")

    policy = ColorPolicy(rule.scaled(cores) for rule in rules)
    logger.debug(f"Built color policy for {cores} cores with {len(policy)} rules")
    return policy
