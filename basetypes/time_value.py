"""Timestamps and durations stored as a signed number of microseconds."""

from __future__ import annotations

import calendar
import math
import re
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

__all__ = ["Resolution", "Time"]

USEC_PER_SEC = 1_000_000
_INT64_MAX = 2**63 - 1
_TZ_SUFFIX = re.compile(r"(.*)([\-+][0-9]{4})", re.DOTALL)
_TZ_INFO = re.compile(r"([+-]\d{2}|\d{3})(\d{2})")
_LEADING_INT = re.compile(r"[+-]?\d+")
_UNCONVERTED = "unconverted data remains: "


class Resolution(IntEnum):
    """Sub-second resolution used when formatting or parsing times."""

    SECONDS = 1
    MILLISECONDS = 1000
    MICROSECONDS = 1_000_000


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _round_half_away(x: float) -> int:
    magnitude = math.floor(abs(x) + 0.5)
    return int(magnitude) if x >= 0 else -int(magnitude)


def _scan_int(text: str, width: int) -> int:
    """Read an integer from at most ``width`` leading characters; 0 if none."""
    match = _LEADING_INT.match(text.lstrip()[:width])
    return int(match.group()) if match else 0


def _strptime_prefix(text: str, fmt: str) -> time.struct_time:
    """Parse ``text`` with ``fmt``, ignoring characters after the match."""
    try:
        return time.strptime(text, fmt)
    except ValueError as exc:
        message = str(exc)
        if not message.startswith(_UNCONVERTED):
            raise
        rest = message[len(_UNCONVERTED):]
        return time.strptime(text[: len(text) - len(rest)], fmt)


@dataclass(frozen=True)
class Time:
    """A point in time (or a duration) in microseconds since the epoch."""

    microseconds: int = 0

    DEFAULT_FORMAT: ClassVar[str] = "%Y%m%d-%H:%M:%S"

    @classmethod
    def now(cls) -> "Time":
        """Return the current wall-clock time."""
        return cls(time.time_ns() // 1000)

    @classmethod
    def monotonic(cls) -> "Time":
        """Return the time of a monotonic clock."""
        return cls(time.monotonic_ns() // 1000)

    @classmethod
    def from_microseconds(cls, value: int) -> "Time":
        return cls(int(value))

    @classmethod
    def from_milliseconds(cls, value: int) -> "Time":
        return cls(int(value) * 1000)

    @classmethod
    def from_seconds(cls, value: float, microseconds: int = 0) -> "Time":
        """Build a time from seconds; a float keeps its fraction, rounded to microseconds."""
        if isinstance(value, float):
            seconds = int(value)
            fraction = _round_half_away((value - seconds) * USEC_PER_SEC)
            return cls(seconds * USEC_PER_SEC + fraction + int(microseconds))
        return cls(int(value) * USEC_PER_SEC + int(microseconds))

    @classmethod
    def max(cls) -> "Time":
        """Return the largest representable time."""
        return cls(_INT64_MAX)

    @classmethod
    def from_time_values(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        seconds: int,
        millis: int,
        micros: int,
    ) -> "Time":
        """Build a time from broken-down values given in the local time zone."""
        stamp = int(time.mktime((year, month, day, hour, minute, seconds, 0, 0, -1)))
        return cls(stamp * USEC_PER_SEC + millis * 1000 + micros)

    @classmethod
    def from_string(
        cls,
        string_time: str,
        resolution: Resolution = Resolution.MICROSECONDS,
        main_format: str | None = None,
    ) -> "Time":
        """Parse a time as written by :meth:`to_string`.

        A trailing ``+HHMM``/``-HHMM`` offset makes the string UTC based;
        without it the string is read as local time.
        """
        fmt = cls.DEFAULT_FORMAT if main_format is None else main_format
        resolution = Resolution(resolution)
        main_time = string_time
        tz_info = ""
        usecs = 0

        tz_match = _TZ_SUFFIX.fullmatch(string_time)
        if tz_match:
            main_time, tz_info = tz_match.group(1), tz_match.group(2)

        if resolution > Resolution.SECONDS:
            usecs_string = main_time[main_time.rfind(":") + 1:]
            length = len(usecs_string)
            if not (length == 6 or (length == 3 and resolution == Resolution.MILLISECONDS)):
                raise ValueError(
                    "Time.from_string: required resolution format does not match "
                    f"the given string '{string_time}' -- identified subseconds: "
                    f"'{usecs_string}'"
                )
            if resolution == Resolution.MILLISECONDS:
                usecs = _scan_int(usecs_string, 3) * 1000
            else:
                usecs = _scan_int(usecs_string, 6)

        try:
            parsed = _strptime_prefix(main_time, fmt)
        except ValueError as exc:
            raise ValueError(
                f"Time.from_string failed: '{main_time}' did not match the given "
                f"format '{fmt}'"
            ) from exc

        if tz_info:
            stamp = calendar.timegm(parsed) + cls.tz_info_to_seconds(tz_info)
        else:
            stamp = int(time.mktime(parsed))
        return cls(stamp * USEC_PER_SEC + usecs)

    @staticmethod
    def timezone_offset(when: int) -> int:
        """Return the local time zone's offset to UTC in seconds at ``when``."""
        broken = tuple(time.gmtime(when))[:8] + (-1,)
        return int(time.mktime(broken)) - int(when)

    @staticmethod
    def tz_info_to_seconds(tz_info: str) -> int:
        """Convert a ``+hhmm``/``-hhmm`` offset into seconds to add to reach UTC."""
        match = _TZ_INFO.fullmatch(tz_info)
        if match is None:
            raise ValueError(f"Time.tz_info_to_seconds: parsing of timezone offset '{tz_info}' failed")
        hours = int(match.group(1))
        minutes = int(match.group(2))
        offset = hours * 3600
        offset = offset - minutes * 60 if offset < 0 else offset + minutes * 60
        return -offset

    def is_null(self) -> bool:
        return self.microseconds == 0

    def to_timeval(self) -> tuple[int, int]:
        """Return ``(seconds, microseconds)``, both truncated towards zero."""
        seconds = _trunc_div(self.microseconds, USEC_PER_SEC)
        return seconds, self.microseconds - seconds * USEC_PER_SEC

    def to_time_values(self) -> list[int]:
        """Return ``[microseconds, milliseconds, seconds, minutes, hours, days]``."""
        remaining = self.microseconds
        parts = []
        for unit in (86_400_000_000, 3_600_000_000, 60_000_000, 1_000_000, 1000):
            count = _trunc_div(remaining, unit)
            remaining -= count * unit
            parts.append(count)
        parts.append(remaining)
        return parts[::-1]

    def to_string(
        self,
        resolution: Resolution = Resolution.MICROSECONDS,
        main_format: str | None = None,
    ) -> str:
        """Format as local time, with sub-seconds and the ``%z`` offset appended."""
        fmt = self.DEFAULT_FORMAT if main_format is None else main_format
        resolution = Resolution(resolution)
        seconds, usecs = self.to_timeval()
        local = time.localtime(seconds)
        main = time.strftime(fmt, local)
        tz_info = time.strftime("%z", local)
        if resolution == Resolution.SECONDS:
            return f"{main}{tz_info}"
        if resolution == Resolution.MILLISECONDS:
            return "%s:%03d%s" % (main, int(usecs / 1000.0), tz_info)
        return "%s:%06d%s" % (main, usecs, tz_info)

    def to_seconds(self) -> float:
        return self.microseconds / USEC_PER_SEC

    def to_milliseconds(self) -> int:
        """Return whole milliseconds, dropping the microseconds."""
        return _trunc_div(self.microseconds, 1000)

    def to_microseconds(self) -> int:
        return self.microseconds

    def __add__(self, other: "Time") -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self.microseconds + other.microseconds)

    def __sub__(self, other: "Time") -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self.microseconds - other.microseconds)

    def __truediv__(self, divider: int) -> "Time":
        if isinstance(divider, Time):
            return NotImplemented
        return Time(_trunc_div(self.microseconds, int(divider)))

    def __mul__(self, factor: float) -> "Time":
        if isinstance(factor, Time):
            return NotImplemented
        return Time(int(self.microseconds * factor))

    def __lt__(self, other: "Time") -> bool:
        return self.microseconds < other.microseconds

    def __le__(self, other: "Time") -> bool:
        return self.microseconds <= other.microseconds

    def __gt__(self, other: "Time") -> bool:
        return self.microseconds > other.microseconds

    def __ge__(self, other: "Time") -> bool:
        return self.microseconds >= other.microseconds

    def __str__(self) -> str:
        usecs = self.microseconds
        whole = _trunc_div(usecs, USEC_PER_SEC)
        magnitude = abs(usecs)
        return "%d.%03d.%03d" % (whole, (magnitude // 1000) % 1000, magnitude % 1000)