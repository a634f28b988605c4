# tests/unit/test_domain.py
"""
Unit Tests for Domain Entities

Stock and lifecycle rules enforced by the entities themselves.
"""

import uuid
from datetime import date
from decimal import Decimal

import pytest

from apps.core.domain import (
    ALLOWED_TRANSITIONS,
    InsufficientStockError,
    InvalidStateTransitionError,
    InventoryPart,
    InventoryPartValidationError,
    Maintenance,
    MaintenanceStatus,
    MaintenanceType,
    MaintenanceValidationError,
    PartCategory,
    ensure_transition,
)


def make_part(**kwargs):
    defaults = {
        'name': 'Brake Pad Set',
        'category': PartCategory.BRAKE_PAD,
        'reference_number': 'T2020563',
        'current_stock': 10,
        'min_stock_threshold': 3,
        'unit_price': Decimal('45.00'),
        'motorcycle_models': ['Tiger 900', 'Speed Triple 1200'],
    }
    defaults.update(kwargs)
    return InventoryPart.create(**defaults)


def make_maintenance(**kwargs):
    defaults = {
        'motorcycle_id': uuid.uuid4(),
        'type': MaintenanceType.PREVENTIVE,
        'scheduled_date': date(2025, 1, 1),
        'mileage_at_maintenance': 5000,
    }
    defaults.update(kwargs)
    return Maintenance.create(**defaults)


class TestInventoryPart:
    """Tests for the InventoryPart entity."""

    def test_create_part(self):
        part = make_part()

        assert part.id is not None
        assert part.category == PartCategory.BRAKE_PAD
        assert part.motorcycle_models == frozenset({'Tiger 900', 'Speed Triple 1200'})

    @pytest.mark.parametrize('field', ['name', 'reference_number'])
    def test_create_requires_name_and_reference(self, field):
        with pytest.raises(InventoryPartValidationError):
            make_part(**{field: '  '})

    @pytest.mark.parametrize('field,value', [
        ('current_stock', -1),
        ('min_stock_threshold', -1),
        ('unit_price', Decimal('-0.01')),
        ('current_stock', 1.5),
        ('category', 'EXHAUST'),
    ])
    def test_create_rejects_invalid_values(self, field, value):
        with pytest.raises(InventoryPartValidationError):
            make_part(**{field: value})

    def test_low_stock_boundary_is_inclusive(self):
        part = make_part(current_stock=5, min_stock_threshold=5)

        assert part.is_low_stock() is True
        assert make_part(current_stock=6, min_stock_threshold=5).is_low_stock() is False

    def test_update_stock_returns_new_part(self):
        part = make_part(current_stock=10)

        updated = part.update_stock(-4)

        assert updated.current_stock == 6
        assert part.current_stock == 10
        assert updated.updated_at >= part.updated_at

    @pytest.mark.parametrize('stock,delta', [(0, -1), (1, -2), (10, -11), (3, -1000)])
    def test_update_stock_never_goes_negative(self, stock, delta):
        part = make_part(current_stock=stock)

        with pytest.raises(InsufficientStockError) as exc_info:
            part.update_stock(delta)

        assert exc_info.value.part_id == part.id
        assert exc_info.value.requested == -delta
        assert exc_info.value.available == stock

    def test_update_stock_to_exactly_zero(self):
        assert make_part(current_stock=2).update_stock(-2).current_stock == 0

    def test_catalogue_update_keeps_stock(self):
        part = make_part(current_stock=7)

        updated = part.update(name='Sintered Brake Pads', min_stock_threshold=8)

        assert updated.name == 'Sintered Brake Pads'
        assert updated.current_stock == 7
        assert updated.is_low_stock() is True

    def test_is_compatible_with(self):
        part = make_part()

        assert part.is_compatible_with('Tiger 900')
        assert not part.is_compatible_with('Bonneville T120')


class TestMaintenanceLifecycle:
    """Tests for the Maintenance state machine."""

    def test_create_defaults_to_scheduled(self):
        maintenance = make_maintenance()

        assert maintenance.status == MaintenanceStatus.SCHEDULED
        assert maintenance.actual_date is None
        assert maintenance.replaced_parts == ()

    @pytest.mark.parametrize('field,value', [
        ('motorcycle_id', None),
        ('motorcycle_id', 'not-a-uuid'),
        ('type', None),
        ('type', 'COSMETIC'),
        ('scheduled_date', None),
        ('status', 'ARCHIVED'),
        ('mileage_at_maintenance', -1),
        ('mileage_at_maintenance', '5000'),
        ('total_cost', Decimal('-1')),
    ])
    def test_create_rejects_invalid_values(self, field, value):
        with pytest.raises(MaintenanceValidationError):
            make_maintenance(**{field: value})

    def test_transition_table(self):
        assert ALLOWED_TRANSITIONS[MaintenanceStatus.SCHEDULED] == {
            MaintenanceStatus.IN_PROGRESS,
            MaintenanceStatus.COMPLETED,
            MaintenanceStatus.CANCELLED,
        }
        assert ALLOWED_TRANSITIONS[MaintenanceStatus.IN_PROGRESS] == {
            MaintenanceStatus.COMPLETED,
            MaintenanceStatus.CANCELLED,
        }
        assert not ALLOWED_TRANSITIONS[MaintenanceStatus.COMPLETED]
        assert not ALLOWED_TRANSITIONS[MaintenanceStatus.CANCELLED]

    def test_ensure_transition_rejects_backwards_move(self):
        with pytest.raises(InvalidStateTransitionError):
            ensure_transition(MaintenanceStatus.IN_PROGRESS, MaintenanceStatus.SCHEDULED)

    def test_start_then_complete(self):
        part_id = uuid.uuid4()
        started = make_maintenance().start()

        completed = started.complete(
            actual_date=date(2025, 1, 3),
            mileage_at_maintenance=5120,
            replaced_parts=[part_id],
            total_cost=Decimal('89.90'),
        )

        assert started.status == MaintenanceStatus.IN_PROGRESS
        assert completed.status == MaintenanceStatus.COMPLETED
        assert completed.actual_date == date(2025, 1, 3)
        assert completed.mileage_at_maintenance == 5120
        assert completed.replaced_parts == (part_id,)
        assert completed.is_terminal

    def test_complete_keeps_unset_optional_fields(self):
        maintenance = make_maintenance(
            technician_notes='Check chain tension',
            total_cost=Decimal('0'),
        )

        completed = maintenance.complete(
            actual_date=date(2025, 1, 2),
            mileage_at_maintenance=5010,
        )

        assert completed.technician_notes == 'Check chain tension'
        assert completed.total_cost == Decimal('0')

    def test_cancel_completed_maintenance_fails(self):
        completed = make_maintenance().complete(
            actual_date=date(2025, 1, 2), mileage_at_maintenance=5000
        )

        with pytest.raises(InvalidStateTransitionError) as exc_info:
            completed.cancel()

        assert exc_info.value.error_code == 'INVALID_STATE_TRANSITION'
        assert exc_info.value.details['current_status'] == 'COMPLETED'

    @pytest.mark.parametrize('terminal', ['complete', 'cancel'])
    def test_terminal_records_accept_no_further_transition(self, terminal):
        maintenance = make_maintenance()
        if terminal == 'complete':
            maintenance = maintenance.complete(
                actual_date=date(2025, 1, 2), mileage_at_maintenance=5000
            )
        else:
            maintenance = maintenance.cancel()

        for transition in (
            maintenance.start,
            maintenance.cancel,
            lambda: maintenance.complete(
                actual_date=date(2025, 1, 5), mileage_at_maintenance=5000
            ),
        ):
            with pytest.raises(InvalidStateTransitionError):
                transition()

    def test_update_preserves_status_and_created_at(self):
        maintenance = make_maintenance().start()

        updated = maintenance.update(
            technician_notes='Replace rear tyre',
            mileage_at_maintenance=5300,
        )

        assert updated.status == MaintenanceStatus.IN_PROGRESS
        assert updated.created_at == maintenance.created_at
        assert updated.technician_notes == 'Replace rear tyre'
        assert updated.mileage_at_maintenance == 5300

    def test_update_rejects_status(self):
        with pytest.raises(MaintenanceValidationError):
            make_maintenance().update(status=MaintenanceStatus.COMPLETED)

    def test_update_rejects_terminal_record(self):
        cancelled = make_maintenance().cancel()

        with pytest.raises(MaintenanceValidationError):
            cancelled.update(technician_notes='too late')

    def test_is_due(self):
        maintenance = make_maintenance(scheduled_date=date(2025, 1, 10))

        assert maintenance.is_due(date(2025, 1, 10))
        assert not maintenance.is_due(date(2025, 1, 9))
        assert not maintenance.start().is_due(date(2025, 1, 10))
