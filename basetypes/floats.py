"""Helpers for the NaN and infinity markers used by the value types."""

from __future__ import annotations

import math

__all__ = [
    "nan",
    "is_nan",
    "unset",
    "is_unset",
    "unknown",
    "is_unknown",
    "infinity",
    "is_infinity",
]


def nan() -> float:
    """Return a quiet NaN."""
    return math.nan


def is_nan(value: float) -> bool:
    """Return True if ``value`` is NaN."""
    return math.isnan(value)


def unset() -> float:
    """Return the marker for a value that has not been set (NaN)."""
    return math.nan


def is_unset(value: float) -> bool:
    """Return True if ``value`` carries the unset marker."""
    return math.isnan(value)


def unknown() -> float:
    """Return the marker for an unknown value (NaN)."""
    return math.nan


def is_unknown(value: float) -> bool:
    """Return True if ``value`` carries the unknown marker."""
    return math.isnan(value)


def infinity() -> float:
    """Return positive infinity."""
    return math.inf


def is_infinity(value: float) -> bool:
    """Return True if ``value`` is positive or negative infinity."""
    return math.isinf(value)