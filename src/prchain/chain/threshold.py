"""Threshold and cooldown state machine deciding when to prompt."""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from prchain.models.core import ChangeMetric
from prchain.models.results import Decision, Show, SkipBelowThreshold, SkipCooldown


@dataclass
class ThresholdState:
    current: int
    original: int
    cooldown: float
    last_cancel_at: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "current": self.current,
            "original": self.original,
            "cooldown": self.cooldown,
            "last_cancel_at": self.last_cancel_at,
        }


class ThresholdGate:
    """Owns the threshold/cooldown state for one repository session.

    `current` never drops below `original`; it is only raised by
    `increase_threshold`/`cancel` and restored by `reset_to_original`.

    `measure` returns the changed-lines total at call time. Mutators use it so the
    new threshold reflects edits made while a prompt was open.
    """

    def __init__(
        self,
        threshold: int = 5,
        cooldown: float = 10.0,
        increment: int = 5,
        measure: Optional[Callable[[], int]] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.state = ThresholdState(current=threshold, original=threshold, cooldown=cooldown)
        self.increment = increment
        self.measure = measure
        self.clock = clock

    @property
    def current(self) -> int:
        return self.state.current

    def cooldown_remaining(self, now: Optional[float] = None) -> Optional[float]:
        """Seconds left in the cooldown, or None when no cooldown is active.

        The window is inclusive: exactly `cooldown` seconds after a cancel still
        counts, with 0.0 remaining.
        """
        if self.state.last_cancel_at is None:
            return None
        now = self.clock() if now is None else now
        elapsed = now - self.state.last_cancel_at
        if elapsed > self.state.cooldown:
            return None
        return self.state.cooldown - elapsed

    def decide(self, metric: ChangeMetric, now: Optional[float] = None) -> Decision:
        total = metric.total
        if total < self.state.current:
            return SkipBelowThreshold(total=total, threshold=self.state.current)

        remaining = self.cooldown_remaining(now)
        if remaining is not None:
            return SkipCooldown(remaining=remaining)

        return Show(total=total, threshold=self.state.current, branch=metric.branch, metric=metric)

    def increase_threshold(self, extra: Optional[int] = None, total: Optional[int] = None) -> int:
        """Raise the threshold to `total + extra`, measuring `total` fresh when not given."""
        extra = self.increment if extra is None else extra
        if total is None:
            total = self.measure() if self.measure is not None else self.state.current
        self.state.current = max(self.state.current, total + extra)
        return self.state.current

    def cancel(
        self, extra: Optional[int] = None, total: Optional[int] = None, now: Optional[float] = None
    ) -> int:
        """Start the cooldown and raise the threshold."""
        self.state.last_cancel_at = self.clock() if now is None else now
        return self.increase_threshold(extra=extra, total=total)

    def reset_to_original(self) -> None:
        """Restore the original threshold after a completed workflow."""
        self.state.current = self.state.original
