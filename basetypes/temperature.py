"""Temperature value with a canonical representation in kelvin."""

from __future__ import annotations

from dataclasses import dataclass, field

from .floats import unknown

__all__ = ["Temperature"]

_ZERO_CELSIUS = 273.15


@dataclass
class Temperature:
    """A temperature stored in kelvin; unknown (NaN) by default."""

    kelvin: float = field(default_factory=unknown)

    @staticmethod
    def kelvin_to_celsius(kelvin: float) -> float:
        return kelvin - _ZERO_CELSIUS

    @staticmethod
    def celsius_to_kelvin(celsius: float) -> float:
        return celsius + _ZERO_CELSIUS

    @classmethod
    def from_kelvin(cls, kelvin: float) -> "Temperature":
        return cls(kelvin)

    @classmethod
    def from_celsius(cls, celsius: float) -> "Temperature":
        return cls(celsius + _ZERO_CELSIUS)

    @property
    def celsius(self) -> float:
        return self.kelvin - _ZERO_CELSIUS

    def is_in_range(self, left_limit: "Temperature", right_limit: "Temperature") -> bool:
        """Return True if this temperature lies between the limits, in either order."""
        low, high = sorted((left_limit.kelvin, right_limit.kelvin))
        return low <= self.kelvin <= high

    def is_approx(self, other: "Temperature", prec: float = 1e-5) -> bool:
        """Return True if the two temperatures differ by less than ``prec`` kelvin."""
        return abs(other.kelvin - self.kelvin) < prec

    def __add__(self, other: "Temperature") -> "Temperature":
        if not isinstance(other, Temperature):
            return NotImplemented
        return Temperature.from_kelvin(self.kelvin + other.kelvin)

    def __sub__(self, other: "Temperature") -> "Temperature":
        if not isinstance(other, Temperature):
            return NotImplemented
        return Temperature.from_kelvin(self.kelvin - other.kelvin)

    def __mul__(self, factor: float) -> "Temperature":
        if isinstance(factor, Temperature):
            return NotImplemented
        return Temperature.from_kelvin(self.kelvin * factor)

    def __rmul__(self, factor: float) -> "Temperature":
        if isinstance(factor, Temperature):
            return NotImplemented
        return Temperature.from_kelvin(factor * self.kelvin)

    def __lt__(self, other: "Temperature") -> bool:
        return self.kelvin < other.kelvin

    def __gt__(self, other: "Temperature") -> bool:
        return self.kelvin > other.kelvin

    def __str__(self) -> str:
        return "[%3.1f celsius]" % self.celsius