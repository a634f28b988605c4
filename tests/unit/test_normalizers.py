# tests/unit/test_normalizers.py
"""
Unit Tests for Input Normalizers
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from apps.core.domain import InventoryPartValidationError, MaintenanceValidationError
from apps.core.services.normalizers import (
    INT32_MAX,
    INT32_MIN,
    normalize_date,
    normalize_decimal,
    normalize_integer,
    normalize_mileage,
)


class TestNormalizeMileage:

    @pytest.mark.parametrize('value,expected', [
        (5000, 5000),
        ('5000', 5000),
        (' 42 ', 42),
        (5000.0, 5000),
        (None, 0),
        ('', 0),
        (0, 0),
    ])
    def test_accepted_values(self, value, expected):
        assert normalize_mileage(value) == expected

    def test_huge_values_are_clamped(self):
        assert normalize_mileage(2 ** 40) == INT32_MAX
        assert normalize_mileage(str(10 ** 12)) == INT32_MAX
        assert normalize_mileage(-(2 ** 40)) == INT32_MIN

    def test_exponent_strings_are_clamped_without_expansion(self):
        assert normalize_mileage('1e999999') == INT32_MAX
        assert normalize_mileage('-1e999999') == INT32_MIN
        assert normalize_mileage('1E2000000') == INT32_MAX

    def test_negative_values_pass_through(self):
        assert normalize_mileage(-5) == -5

    @pytest.mark.parametrize('value', ['abc', '12km', 5000.5, '5000.5', True, [], float('nan')])
    def test_rejected_values(self, value):
        with pytest.raises(MaintenanceValidationError):
            normalize_mileage(value)


class TestNormalizeDate:

    def test_iso_string(self):
        assert normalize_date('2025-01-01', 'scheduled_date') == date(2025, 1, 1)

    def test_iso_datetime_string(self):
        assert normalize_date('2025-01-01T09:30:00Z', 'scheduled_date') == date(2025, 1, 1)

    def test_datetime_and_date_objects(self):
        moment = datetime(2025, 3, 4, 12, 0, tzinfo=timezone.utc)

        assert normalize_date(moment, 'actual_date') == date(2025, 3, 4)
        assert normalize_date(date(2025, 3, 4), 'actual_date') == date(2025, 3, 4)

    def test_missing_optional_date(self):
        assert normalize_date(None, 'next_maintenance_recommendation') is None

    def test_missing_required_date(self):
        with pytest.raises(MaintenanceValidationError):
            normalize_date(None, 'scheduled_date', required=True)

    @pytest.mark.parametrize('value', ['tomorrow', '2025-02-30', '01/02/2025', 20250101])
    def test_unparseable_dates_raise(self, value):
        with pytest.raises(MaintenanceValidationError) as exc_info:
            normalize_date(value, 'scheduled_date')

        assert exc_info.value.details == {'field': 'scheduled_date'}


class TestNormalizeNumbers:

    def test_decimal_from_float_and_string(self):
        assert normalize_decimal(89.9, 'total_cost') == Decimal('89.9')
        assert normalize_decimal('120.50', 'total_cost') == Decimal('120.50')
        assert normalize_decimal(None, 'total_cost') is None

    def test_decimal_rejects_text(self):
        with pytest.raises(MaintenanceValidationError):
            normalize_decimal('cheap', 'total_cost')

    def test_integer_uses_given_error_type(self):
        with pytest.raises(InventoryPartValidationError):
            normalize_integer('ten', 'current_stock', error=InventoryPartValidationError)

    @pytest.mark.parametrize('value', ['1e999999', '-1e999999', '1' * 19])
    def test_integer_out_of_range(self, value):
        with pytest.raises(MaintenanceValidationError) as exc_info:
            normalize_integer(value, 'quantity')

        assert exc_info.value.details == {'field': 'quantity'}

    def test_integer_within_range(self):
        assert normalize_integer('1e3', 'quantity') == 1000
        assert normalize_integer('9' * 18, 'quantity') == int('9' * 18)
