# apps/core/services/dtos.py
"""
Use-case Requests and Responses
"""

import uuid
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from apps.core.domain import InventoryPart, Maintenance, MaintenanceStatus


def _iso(value: Optional[Any]) -> Optional[str]:
    return value.isoformat() if value is not None else None


# =============================================================================
# REQUESTS
# =============================================================================

@dataclass
class ReplacedPartRequest:
    part_id: Any
    quantity: Any = 1


@dataclass
class CreateMaintenanceRequest:
    motorcycle_id: Any
    type: Any
    scheduled_date: Any
    mileage_at_maintenance: Any = 0
    status: Any = MaintenanceStatus.SCHEDULED
    technician_notes: Optional[str] = None
    total_cost: Any = None
    replaced_parts: List[Any] = field(default_factory=list)
    next_maintenance_recommendation: Any = None


@dataclass
class CompleteMaintenanceRequest:
    maintenance_id: Any
    actual_date: Any
    mileage_at_maintenance: Any
    technician_notes: Optional[str] = None
    replaced_parts: List[ReplacedPartRequest] = field(default_factory=list)
    total_cost: Any = None
    next_maintenance_recommendation: Any = None


@dataclass
class UpdateMaintenanceRequest:
    """Partial update; fields left as None are not changed."""

    motorcycle_id: Any = None
    type: Any = None
    scheduled_date: Any = None
    mileage_at_maintenance: Any = None
    technician_notes: Optional[str] = None
    total_cost: Any = None
    next_maintenance_recommendation: Any = None

    def changes(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class CreateInventoryPartRequest:
    name: str
    category: Any
    reference_number: str
    current_stock: Any = 0
    min_stock_threshold: Any = 0
    unit_price: Any = Decimal('0')
    motorcycle_models: List[str] = field(default_factory=list)


@dataclass
class UpdateInventoryPartRequest:
    """Partial catalogue edit; fields left as None are not changed."""

    name: Optional[str] = None
    category: Any = None
    reference_number: Optional[str] = None
    min_stock_threshold: Any = None
    unit_price: Any = None
    motorcycle_models: Optional[List[str]] = None

    def changes(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class UpdateStockRequest:
    part_id: Any
    quantity_change: Any
    reason: str = ''


# =============================================================================
# RESPONSES
# =============================================================================

@dataclass(frozen=True)
class MaintenanceResponse:
    id: uuid.UUID
    motorcycle_id: uuid.UUID
    type: str
    status: str
    scheduled_date: date
    actual_date: Optional[date]
    mileage_at_maintenance: int
    technician_notes: Optional[str]
    replaced_parts: List[uuid.UUID]
    total_cost: Optional[Decimal]
    next_maintenance_recommendation: Optional[date]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, maintenance: Maintenance) -> 'MaintenanceResponse':
        return cls(
            id=maintenance.id,
            motorcycle_id=maintenance.motorcycle_id,
            type=maintenance.type.value,
            status=maintenance.status.value,
            scheduled_date=maintenance.scheduled_date,
            actual_date=maintenance.actual_date,
            mileage_at_maintenance=maintenance.mileage_at_maintenance,
            technician_notes=maintenance.technician_notes,
            replaced_parts=list(maintenance.replaced_parts),
            total_cost=maintenance.total_cost,
            next_maintenance_recommendation=maintenance.next_maintenance_recommendation,
            created_at=maintenance.created_at,
            updated_at=maintenance.updated_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': str(self.id),
            'motorcycle_id': str(self.motorcycle_id),
            'type': self.type,
            'status': self.status,
            'scheduled_date': _iso(self.scheduled_date),
            'actual_date': _iso(self.actual_date),
            'mileage_at_maintenance': self.mileage_at_maintenance,
            'technician_notes': self.technician_notes,
            'replaced_parts': [str(part_id) for part_id in self.replaced_parts],
            'total_cost': str(self.total_cost) if self.total_cost is not None else None,
            'next_maintenance_recommendation': _iso(self.next_maintenance_recommendation),
            'created_at': _iso(self.created_at),
            'updated_at': _iso(self.updated_at),
        }


@dataclass(frozen=True)
class InventoryPartResponse:
    id: uuid.UUID
    name: str
    category: str
    reference_number: str
    current_stock: int
    min_stock_threshold: int
    unit_price: Decimal
    motorcycle_models: List[str]
    is_low_stock: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, part: InventoryPart) -> 'InventoryPartResponse':
        return cls(
            id=part.id,
            name=part.name,
            category=part.category.value,
            reference_number=part.reference_number,
            current_stock=part.current_stock,
            min_stock_threshold=part.min_stock_threshold,
            unit_price=part.unit_price,
            motorcycle_models=sorted(part.motorcycle_models),
            is_low_stock=part.is_low_stock(),
            created_at=part.created_at,
            updated_at=part.updated_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': str(self.id),
            'name': self.name,
            'category': self.category,
            'reference_number': self.reference_number,
            'current_stock': self.current_stock,
            'min_stock_threshold': self.min_stock_threshold,
            'unit_price': str(self.unit_price),
            'motorcycle_models': list(self.motorcycle_models),
            'is_low_stock': self.is_low_stock,
            'created_at': _iso(self.created_at),
            'updated_at': _iso(self.updated_at),
        }
