"""Numeric rounding helpers."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 2) -> float:
    """Round half away from zero to a fixed number of decimal places."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    """Round half away from zero to the nearest integer."""
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Render a measurement without a trailing ``.0`` on whole numbers."""
    rounded = round_half_up(value, 2)
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)
