# apps/core/services/normalizers.py
"""
Input Normalizers

Coerce loosely typed caller input (JSON numbers, numeric strings, ISO dates)
into the types the domain entities validate.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Type

from django.utils.dateparse import parse_date, parse_datetime

from apps.core.domain import MaintenanceValidationError, ValidationError

# Mileage is stored in a 32-bit integer column
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

# Larger magnitudes are never expanded into Python ints ('1e2000000')
MAX_INTEGER_DIGITS = 18


def normalize_integer(
    value,
    field: str,
    error: Type[ValidationError] = MaintenanceValidationError,
    saturate: bool = False,
) -> int:
    """
    Accept ints, integral floats/Decimals and numeric strings.

    Values with more than ``MAX_INTEGER_DIGITS`` digits are rejected, or
    pinned to the int32 bounds when ``saturate`` is set.
    """
    if isinstance(value, bool):
        raise error(f"{field} must be an integer", field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
    try:
        number = Decimal(str(value)) if isinstance(value, (str, float)) else value
    except InvalidOperation:
        raise error(f"{field} must be an integer", field=field)
    if not isinstance(number, Decimal) or not number.is_finite():
        raise error(f"{field} must be an integer", field=field)
    if number != number.to_integral_value():
        raise error(f"{field} must be a whole number", field=field)
    if number.adjusted() >= MAX_INTEGER_DIGITS:
        if saturate:
            return INT32_MAX if number > 0 else INT32_MIN
        raise error(f"{field} is out of range", field=field)
    return int(number)


def normalize_mileage(value) -> int:
    """
    Normalize mileage input.

    Missing values count as 0. Out-of-range values are clamped to the int32
    range; negative results are left for the entity to reject.
    """
    if value is None or value == '':
        return 0
    mileage = normalize_integer(value, 'mileage_at_maintenance', saturate=True)
    return max(INT32_MIN, min(INT32_MAX, mileage))


def normalize_date(
    value,
    field: str,
    required: bool = False,
) -> Optional[date]:
    if value is None or value == '':
        if required:
            raise MaintenanceValidationError(f"{field} is required", field=field)
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            parsed = parse_date(text)
            if parsed is None:
                moment = parse_datetime(text)
                parsed = moment.date() if moment is not None else None
        except ValueError:
            parsed = None
        if parsed is not None:
            return parsed
    raise MaintenanceValidationError(
        f"{field} must be an ISO 8601 date, got {value!r}", field=field
    )


def normalize_decimal(
    value,
    field: str,
    error: Type[ValidationError] = MaintenanceValidationError,
) -> Optional[Decimal]:
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise error(f"{field} must be a number", field=field)
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise error(f"{field} must be a number", field=field)
    if not number.is_finite():
        raise error(f"{field} must be a number", field=field)
    return number
