# apps/core/repositories/__init__.py
"""
Repositories

Abstract persistence contracts and their Django ORM implementations.
"""

from .base import (
    InventoryPartRepository,
    MaintenanceRepository,
    MotorcycleRepository,
    UnitOfWork,
)
from .django_orm import (
    DjangoInventoryPartRepository,
    DjangoMaintenanceRepository,
    DjangoMotorcycleRepository,
    parse_uuid,
)
from .unit_of_work import DjangoUnitOfWork

__all__ = [
    'InventoryPartRepository',
    'MaintenanceRepository',
    'MotorcycleRepository',
    'UnitOfWork',
    'DjangoInventoryPartRepository',
    'DjangoMaintenanceRepository',
    'DjangoMotorcycleRepository',
    'DjangoUnitOfWork',
    'parse_uuid',
]
