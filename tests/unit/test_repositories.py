# tests/unit/test_repositories.py
"""
Unit Tests for the Django ORM Repositories
"""

import uuid
from dataclasses import replace
from datetime import date

import pytest

from apps.core.domain import (
    InsufficientStockError,
    InventoryPartNotFoundError,
    InventoryPartValidationError,
    MaintenanceStatus,
)
from apps.core.models import InventoryPart, Maintenance, StockMovement
from apps.core.repositories import (
    DjangoInventoryPartRepository,
    DjangoMaintenanceRepository,
    DjangoMotorcycleRepository,
    parse_uuid,
)


def test_parse_uuid():
    value = uuid.uuid4()

    assert parse_uuid(value) is value
    assert parse_uuid(str(value)) == value
    assert parse_uuid('not-a-uuid') is None
    assert parse_uuid(None) is None


@pytest.mark.django_db
class TestInventoryPartRepository:

    def setup_method(self):
        self.repository = DjangoInventoryPartRepository()

    def test_decrease_stock_is_conditional(self, create_part):
        part = create_part(current_stock=5)

        updated = self.repository.decrease_stock(part.id, 5, reason='Workshop use')

        assert updated.current_stock == 0
        with pytest.raises(InsufficientStockError) as exc_info:
            self.repository.decrease_stock(part.id, 1, reason='Workshop use')

        assert exc_info.value.available == 0
        assert InventoryPart.objects.get(id=part.id).current_stock == 0
        assert StockMovement.objects.filter(part_id=part.id).count() == 1

    def test_decrease_unknown_part(self, db):
        with pytest.raises(InventoryPartNotFoundError):
            self.repository.decrease_stock(uuid.uuid4(), 1, reason='x')

    @pytest.mark.parametrize('quantity', [0, -2, True])
    def test_quantity_must_be_positive(self, create_part, quantity):
        part = create_part()

        with pytest.raises(InventoryPartValidationError):
            self.repository.increase_stock(part.id, quantity, reason='x')

    def test_movement_links_maintenance(self, create_part):
        part = create_part(current_stock=4)
        maintenance_id = uuid.uuid4()

        self.repository.decrease_stock(part.id, 1, reason='Consumed', maintenance_id=maintenance_id)

        movement = StockMovement.objects.get(part_id=part.id)
        assert movement.maintenance_id == maintenance_id
        assert movement.stock_after == 3

    def test_find_low_stock_parts(self, create_part):
        low = create_part(current_stock=1, min_stock_threshold=1)
        create_part(current_stock=2, min_stock_threshold=1)

        assert [p.id for p in self.repository.find_low_stock_parts()] == [low.id]

    def test_update_catalogue_keeps_stock(self, create_part):
        part = self.repository.find_by_id(create_part(current_stock=9).id)

        updated = self.repository.update(part.update(name='HF204 Oil Filter'))

        assert updated.name == 'HF204 Oil Filter'
        assert updated.current_stock == 9

    def test_update_to_duplicate_reference(self, create_part):
        taken = create_part()
        part = self.repository.find_by_id(create_part().id)

        with pytest.raises(InventoryPartValidationError):
            self.repository.update(part.update(reference_number=taken.reference_number))

    def test_delete(self, create_part):
        part = create_part()

        assert self.repository.delete(part.id) is True
        assert self.repository.delete(part.id) is False
        assert self.repository.find_by_id(part.id) is None


@pytest.mark.django_db
class TestMaintenanceRepository:

    def setup_method(self):
        self.repository = DjangoMaintenanceRepository()

    def test_round_trip_keeps_replaced_parts(self, create_maintenance):
        part_ids = [uuid.uuid4(), uuid.uuid4()]
        row = create_maintenance(replaced_parts=[str(p) for p in part_ids])

        maintenance = self.repository.find_by_id(row.id)

        assert maintenance.replaced_parts == tuple(part_ids)
        assert maintenance.status == MaintenanceStatus.SCHEDULED

    def test_update_checks_expected_status(self, create_maintenance):
        row = create_maintenance()
        maintenance = self.repository.find_by_id(row.id)
        started = maintenance.start()

        assert self.repository.update(started, expected_statuses=[MaintenanceStatus.SCHEDULED])
        assert not self.repository.update(
            started.cancel(), expected_statuses=[MaintenanceStatus.SCHEDULED]
        )

        row.refresh_from_db()
        assert row.status == Maintenance.Status.IN_PROGRESS

    def test_find_due_ordering(self, create_maintenance):
        same_day = [create_maintenance(scheduled_date=date(2025, 1, 2)) for _ in range(3)]
        first = create_maintenance(scheduled_date=date(2025, 1, 1))

        due = self.repository.find_due_maintenances(date(2025, 1, 2))

        assert [m.id for m in due] == [first.id] + sorted(r.id for r in same_day)

    def test_find_by_motorcycle_id_with_invalid_id(self, create_maintenance):
        create_maintenance()

        assert self.repository.find_by_motorcycle_id('bike-1') == []

    def test_save_and_find_by_status(self, create_maintenance):
        maintenance = self.repository.find_by_id(create_maintenance().id)
        copy = replace(maintenance, id=uuid.uuid4()).cancel()

        self.repository.save(copy)

        assert [m.id for m in self.repository.find_by_status('CANCELLED')] == [copy.id]


@pytest.mark.django_db
class TestMotorcycleRepository:

    def test_find_by_id(self, motorcycle):
        repository = DjangoMotorcycleRepository()

        found = repository.find_by_id(str(motorcycle.id))

        assert found.vin == 'SMTTJ4E60LT000001'
        assert repository.find_by_id(uuid.uuid4()) is None
        assert repository.find_by_id('nope') is None
