"""Shared machinery for measurement types.

This module provides:
- UnitScale, a (symbol, multiplier) pair describing a display unit.
- pick_appropriate_units, which chooses the display unit for a magnitude.
- Measurement, the base class every quantity type derives from. It supplies
  arithmetic, comparison and formatting in terms of the base-unit value.

Example:
    @dataclass(frozen=True, slots=True, eq=False)
    class Length(Measurement):
        metres: float

        def as_base_units(self) -> float:
            return self.metres

        @classmethod
        def from_base_units(cls, units: float) -> Self:
            return cls(units)
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from numbers import Real
from typing import NamedTuple, Self, overload


class UnitScale(NamedTuple):
    """A display unit expressed as a multiple of the base unit."""

    symbol: str
    multiplier: float


def pick_appropriate_units(magnitude: float, units: Sequence[UnitScale]) -> UnitScale:
    """Pick the coarsest unit whose multiplier does not exceed the magnitude.

    Args:
        magnitude: Absolute value in base units.
        units: Candidate units ordered from smallest to largest multiplier.

    Returns:
        The last unit with multiplier <= magnitude, or the first unit when no
        multiplier qualifies (zero, NaN and magnitudes below the table).
    """
    if not units:
        raise ValueError("Unit table must contain at least one unit")
    for unit in reversed(units):
        if magnitude >= unit.multiplier:
            return unit
    return units[0]


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def as_float(value: float) -> float:
    """Convert a real number to float, saturating ints too large for a float."""
    if not isinstance(value, Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _divide(numerator: float, denominator: float) -> float:
    """Divide following IEEE 754, so a zero denominator gives inf or NaN."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Measurement(ABC):
    """Base class for a quantity stored as a single value in its base unit.

    Subclasses implement as_base_units, from_base_units, get_base_units_name
    and get_appropriate_units. Operators only combine quantities of the exact
    same type; anything else yields NotImplemented so Python raises TypeError.
    Division by zero gives inf or NaN instead of raising ZeroDivisionError.
    """

    __slots__ = ()

    @abstractmethod
    def as_base_units(self) -> float:
        """Return the value in base units."""

    @classmethod
    @abstractmethod
    def from_base_units(cls, units: float) -> Self:
        """Create a new instance from a value in base units."""

    @abstractmethod
    def get_base_units_name(self) -> str:
        """Return the symbol of the base unit."""

    @abstractmethod
    def get_appropriate_units(self) -> UnitScale:
        """Return the unit best suited for displaying this value."""

    def pick_appropriate_units(self, units: Sequence[UnitScale]) -> UnitScale:
        """Pick a display unit for this value from an ascending unit table."""
        return pick_appropriate_units(abs(self.as_base_units()), units)

    def _same_type(self, other: object) -> bool:
        return type(other) is type(self)

    def __add__(self, other: Self) -> Self:
        """Add two quantities."""
        if not self._same_type(other):
            return NotImplemented
        return self.from_base_units(self.as_base_units() + other.as_base_units())

    def __radd__(self, other: int) -> Self:
        """Support sum(), which starts from the integer 0."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Self) -> Self:
        """Subtract two quantities."""
        if not self._same_type(other):
            return NotImplemented
        return self.from_base_units(self.as_base_units() - other.as_base_units())

    def __mul__(self, other: float) -> Self:
        """Scale the quantity by a number."""
        if not _is_scalar(other):
            return NotImplemented
        return self.from_base_units(self.as_base_units() * as_float(other))

    def __rmul__(self, other: float) -> Self:
        """Scale the quantity by a number."""
        return self.__mul__(other)

    @overload
    def __truediv__(self, other: Self) -> float: ...

    @overload
    def __truediv__(self, other: float) -> Self: ...

    def __truediv__(self, other: Self | float) -> Self | float:
        """Divide by a number, or by another quantity to get a plain ratio."""
        if isinstance(other, Measurement):
            if not self._same_type(other):
                return NotImplemented
            return _divide(self.as_base_units(), other.as_base_units())
        if not _is_scalar(other):
            return NotImplemented
        return self.from_base_units(_divide(self.as_base_units(), as_float(other)))

    def __neg__(self) -> Self:
        """Negate the quantity."""
        return self.from_base_units(-self.as_base_units())

    def __pos__(self) -> Self:
        """Return the quantity unchanged."""
        return self

    def __abs__(self) -> Self:
        """Return the magnitude of the quantity."""
        return self.from_base_units(abs(self.as_base_units()))

    def __eq__(self, other: object) -> bool:
        """Check equality of the base-unit values."""
        if not isinstance(other, Measurement):
            return NotImplemented
        return self._same_type(other) and self.as_base_units() == other.as_base_units()

    def __hash__(self) -> int:
        """Hash the base-unit value so equal quantities hash equal."""
        return hash((type(self), self.as_base_units()))

    def __lt__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.as_base_units() < other.as_base_units()

    def __le__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.as_base_units() <= other.as_base_units()

    def __gt__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.as_base_units() > other.as_base_units()

    def __ge__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.as_base_units() >= other.as_base_units()

    def __format__(self, format_spec: str) -> str:
        """Format the value scaled to its appropriate unit, followed by the symbol.

        The format spec applies to the scaled number, e.g. f"{q:.2f}".
        """
        symbol, multiplier = self.get_appropriate_units()
        value = self.as_base_units() / multiplier
        return f"{format(value, format_spec)} {symbol}"

    def __str__(self) -> str:
        """Return the value in its appropriate unit."""
        return format(self, "")
