"""Attach a timestamp to a value that carries none of its own."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .time_value import Time

__all__ = ["TimeStamped"]

T = TypeVar("T")


@dataclass
class TimeStamped(Generic[T]):
    """A value together with the time it was recorded (null by default)."""

    value: T | None = None
    time: Time = field(default_factory=Time)

    def set(self, value: T, timestamp: Time | None = None) -> None:
        """Store a copy of ``value`` stamped with ``timestamp`` (default: now)."""
        self.value = copy.deepcopy(value)
        self.time = Time.now() if timestamp is None else timestamp

    def update_time(self) -> None:
        """Stamp the current value with the current time."""
        self.time = Time.now()