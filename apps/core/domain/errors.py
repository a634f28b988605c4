# apps/core/domain/errors.py
"""
Domain Errors

Exception hierarchy for the maintenance and inventory domain. Every error
carries a stable ``error_code`` and the HTTP status the API layer should use.
"""

from typing import Any, Dict, Optional


class MaintenanceServiceError(Exception):
    """Base exception for maintenance service errors."""

    status_code = 400
    error_code = 'MAINTENANCE_SERVICE_ERROR'
    default_message = 'Maintenance service error.'

    def __init__(self, message: Optional[str] = None, **details: Any):
        self.message = message or self.default_message
        self.details: Dict[str, Any] = details
        super().__init__(self.message)


# =============================================================================
# VALIDATION
# =============================================================================

class ValidationError(MaintenanceServiceError):
    """Malformed or missing input."""
    status_code = 400
    error_code = 'VALIDATION_ERROR'
    default_message = 'Validation error.'


class MaintenanceValidationError(ValidationError):
    """Invalid maintenance data."""
    default_message = 'Invalid maintenance data.'


class InventoryPartValidationError(ValidationError):
    """Invalid inventory part data."""
    default_message = 'Invalid inventory part data.'


# =============================================================================
# NOT FOUND
# =============================================================================

class NotFoundError(MaintenanceServiceError):
    """Referenced entity does not exist."""
    status_code = 404
    error_code = 'NOT_FOUND'
    default_message = 'Resource not found.'


class MotorcycleNotFoundError(NotFoundError):
    """Motorcycle not found."""
    error_code = 'MOTORCYCLE_NOT_FOUND'

    def __init__(self, motorcycle_id):
        super().__init__(
            f"Motorcycle {motorcycle_id} not found",
            motorcycle_id=str(motorcycle_id),
        )


class MaintenanceNotFoundError(NotFoundError):
    """Maintenance record not found."""
    error_code = 'MAINTENANCE_NOT_FOUND'

    def __init__(self, maintenance_id):
        super().__init__(
            f"Maintenance {maintenance_id} not found",
            maintenance_id=str(maintenance_id),
        )


class InventoryPartNotFoundError(NotFoundError):
    """Inventory part not found."""
    error_code = 'INVENTORY_PART_NOT_FOUND'

    def __init__(self, part_id):
        super().__init__(
            f"Inventory part {part_id} not found",
            part_id=str(part_id),
        )


# =============================================================================
# BUSINESS RULES
# =============================================================================

class InsufficientStockError(MaintenanceServiceError):
    """Not enough stock to consume the requested quantity."""
    status_code = 409
    error_code = 'INSUFFICIENT_STOCK'

    def __init__(self, part_id, requested: int, available: int):
        self.part_id = part_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for part {part_id}. "
            f"Requested: {requested}, Available: {available}",
            part_id=str(part_id),
            requested=requested,
            available=available,
        )


class InvalidStateTransitionError(MaintenanceServiceError):
    """Transition not allowed from the current maintenance status."""
    status_code = 409
    error_code = 'INVALID_STATE_TRANSITION'

    def __init__(self, current_status, target_status):
        self.current_status = current_status
        self.target_status = target_status
        current = getattr(current_status, 'value', current_status)
        target = getattr(target_status, 'value', target_status)
        super().__init__(
            f"Cannot move maintenance from {current} to {target}",
            current_status=current,
            target_status=target,
        )
