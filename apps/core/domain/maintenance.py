# apps/core/domain/maintenance.py
"""
Maintenance Entity

A maintenance job on a motorcycle and its lifecycle:

    SCHEDULED -> IN_PROGRESS -> COMPLETED
         \\            \\
          +-------------+----> CANCELLED

Transitions return new instances; the record itself never mutates.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from .errors import InvalidStateTransitionError, MaintenanceValidationError


class MaintenanceType(str, Enum):
    PREVENTIVE = 'PREVENTIVE'
    CURATIVE = 'CURATIVE'


class MaintenanceStatus(str, Enum):
    SCHEDULED = 'SCHEDULED'
    IN_PROGRESS = 'IN_PROGRESS'
    COMPLETED = 'COMPLETED'
    CANCELLED = 'CANCELLED'


ALLOWED_TRANSITIONS: Dict[MaintenanceStatus, FrozenSet[MaintenanceStatus]] = {
    MaintenanceStatus.SCHEDULED: frozenset({
        MaintenanceStatus.IN_PROGRESS,
        MaintenanceStatus.COMPLETED,
        MaintenanceStatus.CANCELLED,
    }),
    MaintenanceStatus.IN_PROGRESS: frozenset({
        MaintenanceStatus.COMPLETED,
        MaintenanceStatus.CANCELLED,
    }),
    MaintenanceStatus.COMPLETED: frozenset(),
    MaintenanceStatus.CANCELLED: frozenset(),
}

ACTIVE_STATUSES = (MaintenanceStatus.SCHEDULED, MaintenanceStatus.IN_PROGRESS)


def ensure_transition(current: MaintenanceStatus, target: MaintenanceStatus) -> None:
    """Raise InvalidStateTransitionError unless current -> target is allowed."""
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidStateTransitionError(current, target)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _to_enum(enum_cls, value, field_name: str):
    if value is None or value == '':
        raise MaintenanceValidationError(f"{field_name} is required", field=field_name)
    try:
        return enum_cls(value)
    except ValueError:
        raise MaintenanceValidationError(
            f"Unknown {field_name}: {value}", field=field_name
        )


def _to_uuid(value, field_name: str) -> uuid.UUID:
    if value is None or value == '':
        raise MaintenanceValidationError(f"{field_name} is required", field=field_name)
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise MaintenanceValidationError(
            f"{field_name} must be a UUID", field=field_name
        )


def _to_date(value, field_name: str, required: bool = False) -> Optional[date]:
    if value is None:
        if required:
            raise MaintenanceValidationError(
                f"{field_name} is required", field=field_name
            )
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise MaintenanceValidationError(f"{field_name} must be a date", field=field_name)


def _to_mileage(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MaintenanceValidationError(
            'Mileage must be an integer', field='mileage_at_maintenance'
        )
    if value < 0:
        raise MaintenanceValidationError(
            'Mileage cannot be negative', field='mileage_at_maintenance'
        )
    return value


def _to_cost(value) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        cost = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise MaintenanceValidationError(
            'Total cost must be a number', field='total_cost'
        )
    if not cost.is_finite() or cost < 0:
        raise MaintenanceValidationError(
            'Total cost cannot be negative', field='total_cost'
        )
    return cost


def _to_part_ids(values) -> Tuple[uuid.UUID, ...]:
    if not values:
        return ()
    return tuple(_to_uuid(v, 'replaced_parts') for v in values)


@dataclass(frozen=True)
class Maintenance:
    """Maintenance record for one motorcycle."""

    id: uuid.UUID
    motorcycle_id: uuid.UUID
    type: MaintenanceType
    status: MaintenanceStatus
    scheduled_date: date
    mileage_at_maintenance: int
    actual_date: Optional[date] = None
    technician_notes: Optional[str] = None
    replaced_parts: Tuple[uuid.UUID, ...] = ()
    total_cost: Optional[Decimal] = None
    next_maintenance_recommendation: Optional[date] = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def create(
        cls,
        motorcycle_id,
        type,
        scheduled_date,
        mileage_at_maintenance: int = 0,
        status=MaintenanceStatus.SCHEDULED,
        actual_date=None,
        technician_notes: Optional[str] = None,
        replaced_parts=None,
        total_cost=None,
        next_maintenance_recommendation=None,
        id: Optional[uuid.UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> 'Maintenance':
        """
        Build a validated maintenance record.

        Used both for new records and to rehydrate rows from storage, so the
        status is accepted as given rather than forced to SCHEDULED.
        """
        now = _now()
        return cls(
            id=id or uuid.uuid4(),
            motorcycle_id=_to_uuid(motorcycle_id, 'motorcycle_id'),
            type=_to_enum(MaintenanceType, type, 'type'),
            status=_to_enum(MaintenanceStatus, status, 'status'),
            scheduled_date=_to_date(scheduled_date, 'scheduled_date', required=True),
            mileage_at_maintenance=_to_mileage(mileage_at_maintenance),
            actual_date=_to_date(actual_date, 'actual_date'),
            technician_notes=technician_notes,
            replaced_parts=_to_part_ids(replaced_parts),
            total_cost=_to_cost(total_cost),
            next_maintenance_recommendation=_to_date(
                next_maintenance_recommendation, 'next_maintenance_recommendation'
            ),
            created_at=created_at or now,
            updated_at=updated_at or now,
        )

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self.status]

    def is_due(self, on_date: date) -> bool:
        return (
            self.status == MaintenanceStatus.SCHEDULED
            and self.scheduled_date <= on_date
        )

    def start(self) -> 'Maintenance':
        ensure_transition(self.status, MaintenanceStatus.IN_PROGRESS)
        return replace(self, status=MaintenanceStatus.IN_PROGRESS, updated_at=_now())

    def complete(
        self,
        actual_date,
        mileage_at_maintenance: int,
        technician_notes: Optional[str] = None,
        replaced_parts=None,
        total_cost=None,
        next_maintenance_recommendation=None,
    ) -> 'Maintenance':
        """
        Mark the job done.

        Optional arguments left as None keep the values already on the record.
        """
        ensure_transition(self.status, MaintenanceStatus.COMPLETED)

        return replace(
            self,
            status=MaintenanceStatus.COMPLETED,
            actual_date=_to_date(actual_date, 'actual_date', required=True),
            mileage_at_maintenance=_to_mileage(mileage_at_maintenance),
            technician_notes=(
                technician_notes if technician_notes is not None
                else self.technician_notes
            ),
            replaced_parts=(
                _to_part_ids(replaced_parts) if replaced_parts is not None
                else self.replaced_parts
            ),
            total_cost=(
                _to_cost(total_cost) if total_cost is not None
                else self.total_cost
            ),
            next_maintenance_recommendation=(
                _to_date(next_maintenance_recommendation, 'next_maintenance_recommendation')
                if next_maintenance_recommendation is not None
                else self.next_maintenance_recommendation
            ),
            updated_at=_now(),
        )

    def cancel(self) -> 'Maintenance':
        ensure_transition(self.status, MaintenanceStatus.CANCELLED)
        return replace(self, status=MaintenanceStatus.CANCELLED, updated_at=_now())

    # ==========================================================================
    # Edits
    # ==========================================================================

    EDITABLE_FIELDS = frozenset({
        'motorcycle_id',
        'type',
        'scheduled_date',
        'mileage_at_maintenance',
        'technician_notes',
        'total_cost',
        'next_maintenance_recommendation',
    })

    def update(self, **changes) -> 'Maintenance':
        """Partial edit of non-status fields on an open record."""
        if 'status' in changes:
            raise MaintenanceValidationError(
                'Status can only change through start, complete or cancel',
                field='status',
            )
        unknown = set(changes) - self.EDITABLE_FIELDS
        if unknown:
            raise MaintenanceValidationError(
                f"Unknown fields: {', '.join(sorted(unknown))}"
            )
        if self.is_terminal:
            raise MaintenanceValidationError(
                f"Cannot edit a {self.status.value} maintenance",
                status=self.status.value,
            )
        if not changes:
            return self

        values = {}
        for name, value in changes.items():
            if name == 'motorcycle_id':
                values[name] = _to_uuid(value, name)
            elif name == 'type':
                values[name] = _to_enum(MaintenanceType, value, name)
            elif name == 'scheduled_date':
                values[name] = _to_date(value, name, required=True)
            elif name == 'mileage_at_maintenance':
                values[name] = _to_mileage(value)
            elif name == 'total_cost':
                values[name] = _to_cost(value)
            elif name == 'next_maintenance_recommendation':
                values[name] = _to_date(value, name)
            else:
                values[name] = value

        return replace(self, updated_at=_now(), **values)
