"""Measurement value types with unit conversion, arithmetic and display."""

import argparse
from contextlib import suppress
from importlib.metadata import PackageNotFoundError, version

from .charge import CHARGE_UNITS, SPEED_OF_LIGHT, Charge
from .core import Measurement, UnitScale, pick_appropriate_units

__all__ = [
    "CHARGE_UNITS",
    "SPEED_OF_LIGHT",
    "Charge",
    "Measurement",
    "UnitScale",
    "pick_appropriate_units",
    "run",
]

with suppress(PackageNotFoundError):
    __version__ = version(__name__)

CHARGE_UNIT_NAMES = ("coulombs", "abcoulombs", "statcoulombs")


def _precision(text: str) -> int:
    """Parse a number of decimal places, which cannot be negative."""
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"precision must be at least 0, got {value}")
    return value


def run(argv: list[str] | None = None) -> None:
    """Convert a charge between units, or show it in its most readable unit."""
    parser = argparse.ArgumentParser(
        description="Measurements: convert and display electrical charge."
    )
    parser.add_argument("value", type=float, help="Magnitude of the charge")
    parser.add_argument(
        "-f",
        "--from",
        dest="from_unit",
        choices=CHARGE_UNIT_NAMES,
        default="coulombs",
        help="Unit of the given value (default: coulombs)",
    )
    parser.add_argument(
        "-t",
        "--to",
        dest="to_unit",
        choices=CHARGE_UNIT_NAMES,
        help="Print the value converted to this unit",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=_precision,
        help="Number of decimal places when showing the readable unit",
    )
    args = parser.parse_args(argv)

    charge = getattr(Charge, f"from_{args.from_unit}")(args.value)
    if args.to_unit:
        print(getattr(charge, f"as_{args.to_unit}")())
    elif args.precision is not None:
        print(f"{charge:.{args.precision}f}")
    else:
        print(charge)
