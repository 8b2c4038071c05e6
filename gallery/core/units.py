"""Display units. The engine itself always works in inches."""

from __future__ import annotations

from enum import Enum


INCH_TO_CM = 2.54


class Unit(str, Enum):
    INCH = "in"
    CM = "cm"


def to_display_unit(value: float, unit: Unit) -> float:
    if unit == Unit.INCH:
        return value
    if unit == Unit.CM:
        return value * INCH_TO_CM
    raise ValueError(f"Unknown unit: {unit}")


def from_display_unit(value: float, unit: Unit) -> float:
    if unit == Unit.INCH:
        return value
    if unit == Unit.CM:
        return value / INCH_TO_CM
    raise ValueError(f"Unknown unit: {unit}")


def _format_number(value: float, max_decimals: int) -> str:
    """Fixed decimals with trailing zeros (and a bare point) trimmed."""
    text = f"{value:.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _decimals(unit: Unit) -> int:
    # 1/8" is 0.125
    return 3 if unit == Unit.INCH else 1


def format_measurement(value: float, unit: Unit) -> str:
    """Format a value already in *unit*, e.g. ``10.5"`` or ``26.7 cm``."""
    text = _format_number(value, _decimals(unit))
    return f'{text}"' if unit == Unit.INCH else f"{text} cm"


def format_short(value: float, unit: Unit) -> str:
    text = _format_number(value, _decimals(unit))
    return f'{text}"' if unit == Unit.INCH else f"{text}cm"
