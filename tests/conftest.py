# tests/conftest.py
"""
Pytest Configuration and Fixtures

Provides common fixtures for maintenance service tests.
"""

import uuid
from datetime import date
from decimal import Decimal
from unittest import mock

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """Provide API client for testing."""
    return APIClient()


@pytest.fixture
def publisher():
    """Event publisher double that records calls."""
    from apps.core.events import MaintenanceEventPublisher

    return mock.Mock(spec=MaintenanceEventPublisher)


@pytest.fixture
def uow():
    from apps.core.repositories import DjangoUnitOfWork

    return DjangoUnitOfWork()


@pytest.fixture
def motorcycle(db):
    """A Triumph Tiger 900 in the fleet."""
    from apps.core.models import Motorcycle

    return Motorcycle.objects.create(
        brand='Triumph',
        model='Tiger 900',
        vin='SMTTJ4E60LT000001',
        year=2023,
        mileage=4200,
    )


@pytest.fixture
def create_part(db):
    """Factory fixture for creating inventory parts."""
    from apps.core.models import InventoryPart

    def _create_part(**kwargs):
        defaults = {
            'name': 'Oil Filter',
            'category': InventoryPart.Category.OIL_FILTER,
            'reference_number': f"T{uuid.uuid4().hex[:7].upper()}",
            'current_stock': 10,
            'min_stock_threshold': 2,
            'unit_price': Decimal('12.50'),
            'motorcycle_models': ['Tiger 900'],
        }
        defaults.update(kwargs)

        return InventoryPart.objects.create(**defaults)

    return _create_part


@pytest.fixture
def create_maintenance(db, motorcycle):
    """Factory fixture for creating maintenance rows."""
    from apps.core.models import Maintenance

    def _create_maintenance(**kwargs):
        defaults = {
            'motorcycle_id': motorcycle.id,
            'type': Maintenance.Type.PREVENTIVE,
            'status': Maintenance.Status.SCHEDULED,
            'scheduled_date': date(2025, 1, 1),
            'mileage_at_maintenance': 5000,
        }
        defaults.update(kwargs)

        return Maintenance.objects.create(**defaults)

    return _create_maintenance
