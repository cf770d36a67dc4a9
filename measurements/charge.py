"""Electrical charge.

Example:
    from measurements import Charge

    ch = Charge.from_coulombs(72.0)
    print(f"A charge of {ch.as_coulombs()} C has {ch.as_abcoulombs()} abC")
"""

from dataclasses import dataclass
from typing import Self

from .core import Measurement, UnitScale, as_float

# Magnitude of the speed of light (m/s)
SPEED_OF_LIGHT = 299_792_458.0

# Smallest to largest
CHARGE_UNITS = (
    UnitScale("fC", 1e-15),
    UnitScale("pC", 1e-12),
    UnitScale("nC", 1e-9),
    UnitScale("µC", 1e-6),
    UnitScale("mC", 1e-3),
    UnitScale("C", 1e0),
    UnitScale("kC", 1e3),
    UnitScale("MC", 1e6),
    UnitScale("GC", 1e9),
    UnitScale("TC", 1e12),
    UnitScale("PC", 1e15),
    UnitScale("EC", 1e18),
)


@dataclass(frozen=True, slots=True, eq=False)
class Charge(Measurement):
    """An electrical charge, stored in coulombs."""

    coulombs: float

    @classmethod
    def from_coulombs(cls, coulombs: float) -> Self:
        """Create a new Charge from a value in coulombs."""
        return cls(as_float(coulombs))

    @classmethod
    def from_abcoulombs(cls, abcoulombs: float) -> Self:
        """Create a new Charge from a value in abcoulombs."""
        return cls.from_coulombs(as_float(abcoulombs) * 10.0)

    @classmethod
    def from_statcoulombs(cls, statcoulombs: float) -> Self:
        """Create a new Charge from a value in statcoulombs."""
        return cls.from_coulombs(as_float(statcoulombs) / (10.0 * SPEED_OF_LIGHT))

    def as_coulombs(self) -> float:
        """Return the charge in coulombs."""
        return self.coulombs

    def as_abcoulombs(self) -> float:
        """Return the charge in abcoulombs."""
        return self.coulombs / 10.0

    def as_statcoulombs(self) -> float:
        """Return the charge in statcoulombs."""
        return self.coulombs * (10.0 * SPEED_OF_LIGHT)

    def as_base_units(self) -> float:
        return self.coulombs

    @classmethod
    def from_base_units(cls, units: float) -> Self:
        return cls.from_coulombs(units)

    def get_base_units_name(self) -> str:
        return "C"

    def get_appropriate_units(self) -> UnitScale:
        return self.pick_appropriate_units(CHARGE_UNITS)
