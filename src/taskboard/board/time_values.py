# src/taskboard/board/time_values.py

"""
Time-value arithmetic shared by the board and the timer.

- TimeEstimate: planned duration (hours + minutes), always normalized.
- Countdown: live remaining time (hours + minutes + seconds).
- parse_int_field: defensive parse for form input (never raises).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int_field(value: Any) -> int:
    """
    Coerce a numeric form field to a non-negative int.

    Accepts ints, floats (truncated) and strings with a leading integer ("12abc" -> 12).
    Anything else (None, "", "abc", bools, negative numbers) becomes 0, and so do
    non-ASCII digits and digit runs too long to convert.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        n = value
    elif isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        n = int(value)
    else:
        m = _LEADING_INT.match(str(value))
        if not m:
            return 0
        try:
            n = int(m.group(1))
        except ValueError:
            # Digit run longer than the interpreter's int string limit.
            return 0
    return max(0, n)


@dataclass(frozen=True, slots=True)
class TimeEstimate:
    hours: int = 0
    minutes: int = 0

    @classmethod
    def of(cls, hours: Any = 0, minutes: Any = 0) -> TimeEstimate:
        """Build a normalized estimate: minutes in [0, 59], overflow carried into hours."""
        return cls.from_minutes(parse_int_field(hours) * 60 + parse_int_field(minutes))

    @classmethod
    def from_minutes(cls, total: int) -> TimeEstimate:
        total = max(0, int(total))
        return cls(hours=total // 60, minutes=total % 60)

    @classmethod
    def coerce(cls, value: Any) -> TimeEstimate:
        """Accept a TimeEstimate, a {"hours", "minutes"} mapping, or nothing (zero)."""
        if isinstance(value, TimeEstimate):
            return cls.of(value.hours, value.minutes)
        if isinstance(value, Mapping):
            return cls.of(value.get("hours"), value.get("minutes"))
        return cls()

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    @property
    def is_zero(self) -> bool:
        return self.hours == 0 and self.minutes == 0

    def __add__(self, other: TimeEstimate) -> TimeEstimate:
        if not isinstance(other, TimeEstimate):
            return NotImplemented
        return TimeEstimate.from_minutes(self.total_minutes + other.total_minutes)

    def __str__(self) -> str:
        return format_time_estimate(self)


@dataclass(frozen=True, slots=True)
class Countdown:
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_estimate(cls, estimate: TimeEstimate) -> Countdown:
        return cls(hours=estimate.hours, minutes=estimate.minutes, seconds=0)

    @property
    def is_zero(self) -> bool:
        return self.hours == 0 and self.minutes == 0 and self.seconds == 0

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def decremented(self) -> Countdown:
        """One second less, borrowing seconds -> minutes -> hours. Zero stays zero."""
        if self.is_zero:
            return self

        hours, minutes, seconds = self.hours, self.minutes, self.seconds - 1
        if seconds < 0:
            seconds = 59
            minutes -= 1
        if minutes < 0:
            minutes = 59
            hours -= 1
        return Countdown(hours=hours, minutes=minutes, seconds=seconds)

    def __str__(self) -> str:
        return format_hhmmss(self)


def format_hhmmss(value: Countdown) -> str:
    return f"{value.hours:02d}:{value.minutes:02d}:{value.seconds:02d}"


def format_time_estimate(estimate: TimeEstimate | None) -> str:
    """Short label used on cards and column headers: "4h 30min", "1h", "45min", "0min"."""
    if estimate is None or estimate.is_zero:
        return "0min"
    parts: list[str] = []
    if estimate.hours > 0:
        parts.append(f"{estimate.hours}h")
    if estimate.minutes > 0:
        parts.append(f"{estimate.minutes}min")
    return " ".join(parts)
