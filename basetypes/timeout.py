"""Tracking of a timeout that starts when it is created."""

from __future__ import annotations

from .time_value import Time

__all__ = ["Timeout"]


class Timeout:
    """A timeout measured from its start; a zero timeout never elapses."""

    def __init__(self, timeout: Time | None = None):
        self.timeout = Time.from_seconds(0) if timeout is None else timeout
        self.start_time = Time.now()

    def restart(self) -> None:
        """Start measuring again from now."""
        self.start_time = Time.now()

    def elapsed(self, timeout: Time | None = None) -> bool:
        """Return True if ``timeout`` (default: this timeout) has passed."""
        limit = self.timeout if timeout is None else timeout
        if limit.is_null():
            return False
        return self.start_time + limit < Time.now()

    def time_left(self, timeout: Time | None = None) -> Time:
        """Return the time remaining; :meth:`Time.max` for a zero timeout."""
        limit = self.timeout if timeout is None else timeout
        if limit.is_null():
            return Time.max()
        return self.start_time + limit - Time.now()