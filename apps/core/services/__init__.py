# apps/core/services/__init__.py
"""
Maintenance Service Business Logic

Use-cases for maintenance lifecycle and parts inventory.
"""

from apps.core.domain import (
    InsufficientStockError,
    InvalidStateTransitionError,
    InventoryPartNotFoundError,
    InventoryPartValidationError,
    MaintenanceNotFoundError,
    MaintenanceServiceError,
    MaintenanceValidationError,
    MotorcycleNotFoundError,
)

from .dtos import (
    CompleteMaintenanceRequest,
    CreateInventoryPartRequest,
    CreateMaintenanceRequest,
    InventoryPartResponse,
    MaintenanceResponse,
    ReplacedPartRequest,
    UpdateInventoryPartRequest,
    UpdateMaintenanceRequest,
    UpdateStockRequest,
)
from .inventory_service import (
    CreateInventoryPartUseCase,
    DeleteInventoryPartUseCase,
    FindInventoryPartsUseCase,
    ManageInventoryStockUseCase,
    UpdateInventoryPartUseCase,
)
from .maintenance_service import (
    CancelMaintenanceUseCase,
    CompleteMaintenanceUseCase,
    CreateMaintenanceUseCase,
    DeleteMaintenanceUseCase,
    FindAllMaintenancesUseCase,
    FindDueMaintenancesUseCase,
    GetMaintenanceUseCase,
    StartMaintenanceUseCase,
    UpdateMaintenanceUseCase,
)

__all__ = [
    # Use-cases
    'CreateMaintenanceUseCase',
    'CompleteMaintenanceUseCase',
    'StartMaintenanceUseCase',
    'CancelMaintenanceUseCase',
    'UpdateMaintenanceUseCase',
    'DeleteMaintenanceUseCase',
    'GetMaintenanceUseCase',
    'FindAllMaintenancesUseCase',
    'FindDueMaintenancesUseCase',
    'CreateInventoryPartUseCase',
    'ManageInventoryStockUseCase',
    'FindInventoryPartsUseCase',
    'UpdateInventoryPartUseCase',
    'DeleteInventoryPartUseCase',

    # Requests / responses
    'ReplacedPartRequest',
    'CreateMaintenanceRequest',
    'CompleteMaintenanceRequest',
    'UpdateMaintenanceRequest',
    'CreateInventoryPartRequest',
    'UpdateInventoryPartRequest',
    'UpdateStockRequest',
    'MaintenanceResponse',
    'InventoryPartResponse',

    # Exceptions
    'MaintenanceServiceError',
    'MaintenanceValidationError',
    'InventoryPartValidationError',
    'MotorcycleNotFoundError',
    'MaintenanceNotFoundError',
    'InventoryPartNotFoundError',
    'InsufficientStockError',
    'InvalidStateTransitionError',
]
