"""
Conversions between major-unit amounts and integer minor units.

Documents store every amount as an integer count of minor units (cents for
two-decimal currencies). All arithmetic here goes through Decimal so no
float rounding leaks into stored values.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

AmountLike = Union[int, str, float, Decimal]

DEFAULT_DECIMAL_PLACES = 2


def _scale(decimal_places: int) -> Decimal:
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be >= 0, got {decimal_places}")
    return Decimal(10) ** decimal_places


def dollars_to_minor_units(
    amount: AmountLike,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
) -> int:
    """
    Convert a major-unit amount to integer minor units.

    Floats are converted through ``str()`` so 100.50 becomes exactly 10050.
    Sub-minor-unit fractions round half away from zero (1.235 -> 124).

    Raises:
        ValueError: If the amount is not a finite number.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    if not value.is_finite():
        raise ValueError(f"Amount must be finite, got {amount!r}")
    minor = (value * _scale(decimal_places)).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP
    )
    return int(minor)


def minor_units_to_dollars(
    minor_units: int,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
) -> Decimal:
    """Convert integer minor units to a Decimal with ``decimal_places`` places."""
    if isinstance(minor_units, bool) or not isinstance(minor_units, int):
        raise TypeError(f"minor_units must be int, got {type(minor_units).__name__}")
    exponent = Decimal(1).scaleb(-decimal_places)
    return (Decimal(minor_units) / _scale(decimal_places)).quantize(exponent)
