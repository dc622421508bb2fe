"""
Decimal helpers.

Money values are Decimal end to end; floats are converted through str
so 2499999.99 stays 2499999.99.
"""

from decimal import Decimal


def to_decimal(value: Decimal | int | float | str | None) -> Decimal:
    """
    Convert a numeric value to Decimal.

    Args:
        value: Number, numeric string or None

    Returns:
        Decimal value (0 for None)
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
