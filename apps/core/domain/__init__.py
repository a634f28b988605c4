# apps/core/domain/__init__.py
"""Domain entities and errors for maintenance and inventory."""

from .errors import (
    InsufficientStockError,
    InvalidStateTransitionError,
    InventoryPartNotFoundError,
    InventoryPartValidationError,
    MaintenanceNotFoundError,
    MaintenanceServiceError,
    MaintenanceValidationError,
    MotorcycleNotFoundError,
    NotFoundError,
    ValidationError,
)
from .inventory_part import InventoryPart, PartCategory
from .maintenance import (
    ACTIVE_STATUSES,
    ALLOWED_TRANSITIONS,
    Maintenance,
    MaintenanceStatus,
    MaintenanceType,
    ensure_transition,
)
from .motorcycle import Motorcycle

__all__ = [
    'InsufficientStockError',
    'InvalidStateTransitionError',
    'InventoryPartNotFoundError',
    'InventoryPartValidationError',
    'MaintenanceNotFoundError',
    'MaintenanceServiceError',
    'MaintenanceValidationError',
    'MotorcycleNotFoundError',
    'NotFoundError',
    'ValidationError',
    'InventoryPart',
    'PartCategory',
    'ACTIVE_STATUSES',
    'ALLOWED_TRANSITIONS',
    'Maintenance',
    'MaintenanceStatus',
    'MaintenanceType',
    'ensure_transition',
    'Motorcycle',
]
