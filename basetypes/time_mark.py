"""A labelled mark in time for measuring elapsed wall and CPU time."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from .time_value import Time

__all__ = ["TimeMark"]


def _cpu_clock() -> int:
    """Processor time used so far, in microseconds."""
    return time.process_time_ns() // 1000


@dataclass
class TimeMark:
    """Records the wall time and processor time at creation."""

    label: str
    mark: Time = field(default_factory=Time.now)
    clock: int = field(default_factory=_cpu_clock)

    def passed(self) -> Time:
        """Return the wall time that has passed since the mark."""
        return Time.now() - self.mark

    def cycles(self) -> int:
        """Return the processor time used since the mark, in microseconds."""
        return _cpu_clock() - self.clock

    def __str__(self) -> str:
        return f"{self.cycles()}cyc ({self.passed()}s) since {self.label}"