"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation, getcontext


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_decimal(value) -> Decimal:
    """Normalize loosely typed payload values to a finite Decimal.

    Null, missing, boolean, non-numeric, NaN, infinite and out-of-range
    inputs all map to zero so dirty rows never abort an aggregation.

    Args:
        value: Raw value from a database row or remote payload.

    Returns:
        Decimal: Finite numeric value, zero when the input is unusable.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Decimal("0")
    try:
        result = coerce_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return Decimal("0")
    if not result.is_finite():
        return Decimal("0")
    if result.adjusted() > getcontext().Emax:
        return Decimal("0")
    return result


__all__ = ["coerce_decimal", "to_decimal"]
