# apps/core/services/maintenance_service.py
"""
Maintenance Use-cases

Create, transition, edit and query maintenance records. Completion is the
one operation that touches inventory: it consumes the replaced parts in the
same transaction that marks the record COMPLETED.
"""

import uuid
import logging
from dataclasses import replace
from datetime import date
from functools import partial
from typing import Any, Dict, List, Optional, Sequence, Tuple

from django.utils import timezone

from apps.core.domain import (
    ACTIVE_STATUSES,
    InvalidStateTransitionError,
    InventoryPartNotFoundError,
    Maintenance,
    MaintenanceNotFoundError,
    MaintenanceStatus,
    MaintenanceType,
    MaintenanceValidationError,
    MotorcycleNotFoundError,
)
from apps.core.repositories import parse_uuid

from .base import UseCase
from .dtos import (
    CompleteMaintenanceRequest,
    CreateMaintenanceRequest,
    MaintenanceResponse,
    ReplacedPartRequest,
    UpdateMaintenanceRequest,
)
from .normalizers import (
    normalize_date,
    normalize_decimal,
    normalize_integer,
    normalize_mileage,
)

logger = logging.getLogger(__name__)


def _to_choice(enum_cls, value, field: str):
    if value is None or value == '':
        return None
    try:
        return enum_cls(value)
    except ValueError:
        raise MaintenanceValidationError(f"Unknown {field}: {value}", field=field)


def _load(uow, maintenance_id, for_update: bool = False) -> Maintenance:
    maintenance = uow.maintenances.find_by_id(maintenance_id, for_update=for_update)
    if maintenance is None:
        raise MaintenanceNotFoundError(maintenance_id)
    return maintenance


def _write(uow, previous: Maintenance, updated: Maintenance, expected) -> None:
    """
    Compare-and-swap write of ``updated``.

    Raises when the stored status is no longer one of ``expected``.
    """
    if uow.maintenances.update(updated, expected_statuses=expected):
        return
    current = uow.maintenances.find_by_id(previous.id)
    if current is None:
        raise MaintenanceNotFoundError(previous.id)
    raise InvalidStateTransitionError(current.status, updated.status)


# =============================================================================
# CREATE
# =============================================================================

class CreateMaintenanceUseCase(UseCase):
    """Schedule a maintenance for an existing motorcycle."""

    def execute(self, request: CreateMaintenanceRequest) -> MaintenanceResponse:
        maintenance = Maintenance.create(
            motorcycle_id=request.motorcycle_id,
            type=request.type,
            status=request.status or MaintenanceStatus.SCHEDULED,
            scheduled_date=normalize_date(
                request.scheduled_date, 'scheduled_date', required=True
            ),
            mileage_at_maintenance=normalize_mileage(request.mileage_at_maintenance),
            technician_notes=request.technician_notes,
            replaced_parts=request.replaced_parts,
            total_cost=normalize_decimal(request.total_cost, 'total_cost'),
            next_maintenance_recommendation=normalize_date(
                request.next_maintenance_recommendation,
                'next_maintenance_recommendation',
            ),
        )
        # Back-filled records are dated on their scheduled day
        if maintenance.status == MaintenanceStatus.COMPLETED:
            maintenance = replace(maintenance, actual_date=maintenance.scheduled_date)

        with self.uow as uow:
            if uow.motorcycles.find_by_id(maintenance.motorcycle_id) is None:
                raise MotorcycleNotFoundError(maintenance.motorcycle_id)

            # Back-filled records cite parts but do not consume stock
            for part_id in maintenance.replaced_parts:
                if uow.parts.find_by_id(part_id) is None:
                    raise InventoryPartNotFoundError(part_id)

            saved = uow.maintenances.save(maintenance)
            uow.on_commit(partial(self.publisher.maintenance_created, saved))

        logger.info(
            f"Created {saved.type.value} maintenance {saved.id} "
            f"for motorcycle {saved.motorcycle_id} on {saved.scheduled_date}"
        )
        return MaintenanceResponse.from_entity(saved)


# =============================================================================
# COMPLETE
# =============================================================================

class CompleteMaintenanceUseCase(UseCase):
    """
    Complete a maintenance and consume its replaced parts.

    Everything happens in one unit of work:

    1. lock the maintenance row and check the transition
    2. lock every part in ascending id order and check its stock
    3. decrement stock with conditional updates
    4. write the maintenance back only if it is still open

    Any failure rolls back every write. Events go out after commit.
    """

    def execute(self, request: CompleteMaintenanceRequest) -> MaintenanceResponse:
        parts = self.merge_parts(request.replaced_parts)
        actual_date = normalize_date(request.actual_date, 'actual_date', required=True)
        mileage = normalize_mileage(request.mileage_at_maintenance)
        total_cost = normalize_decimal(request.total_cost, 'total_cost')
        next_recommendation = normalize_date(
            request.next_maintenance_recommendation, 'next_maintenance_recommendation'
        )

        with self.uow as uow:
            maintenance = _load(uow, request.maintenance_id, for_update=True)
            completed = maintenance.complete(
                actual_date=actual_date,
                mileage_at_maintenance=mileage,
                technician_notes=request.technician_notes,
                replaced_parts=[part_id for part_id, _ in parts] if parts else None,
                total_cost=total_cost,
                next_maintenance_recommendation=next_recommendation,
            )

            for part_id, quantity in parts:
                part = uow.parts.find_by_id(part_id, for_update=True)
                if part is None:
                    raise InventoryPartNotFoundError(part_id)
                part.update_stock(-quantity)

            consumed = []
            for part_id, quantity in parts:
                part = uow.parts.decrease_stock(
                    part_id,
                    quantity,
                    reason=f"Consumed by maintenance {maintenance.id}",
                    maintenance_id=maintenance.id,
                )
                consumed.append((part, quantity))

            _write(uow, maintenance, completed, ACTIVE_STATUSES)
            uow.on_commit(partial(self._publish, completed, consumed))

        logger.info(
            f"Completed maintenance {completed.id}, "
            f"consumed {sum(q for _, q in parts)} part(s) across {len(parts)} reference(s)"
        )
        return MaintenanceResponse.from_entity(completed)

    @staticmethod
    def merge_parts(replaced_parts: Optional[Sequence[Any]]) -> List[Tuple[uuid.UUID, int]]:
        """
        Sum quantities per part id and order the result by part id.

        Accepts ReplacedPartRequest instances or ``{'part_id', 'quantity'}``
        mappings.
        """
        totals: Dict[uuid.UUID, int] = {}
        for item in replaced_parts or []:
            if isinstance(item, ReplacedPartRequest):
                raw_id, raw_quantity = item.part_id, item.quantity
            else:
                raw_id, raw_quantity = item.get('part_id'), item.get('quantity', 1)

            part_id = parse_uuid(raw_id)
            if part_id is None:
                raise MaintenanceValidationError(
                    f"Invalid part id: {raw_id}", field='replaced_parts'
                )
            quantity = normalize_integer(raw_quantity, 'quantity')
            if quantity <= 0:
                raise MaintenanceValidationError(
                    f"Quantity for part {part_id} must be positive",
                    field='quantity',
                    part_id=str(part_id),
                )
            totals[part_id] = totals.get(part_id, 0) + quantity

        return sorted(totals.items(), key=lambda item: str(item[0]))

    def _publish(self, maintenance: Maintenance, consumed) -> None:
        self.publisher.maintenance_completed(maintenance)
        for part, quantity in consumed:
            self.publisher.part_consumed(part, quantity, maintenance_id=maintenance.id)
        self.publisher.low_stock_alerts(part for part, _ in consumed)


# =============================================================================
# START / CANCEL
# =============================================================================

class StartMaintenanceUseCase(UseCase):

    def execute(self, maintenance_id) -> MaintenanceResponse:
        with self.uow as uow:
            maintenance = _load(uow, maintenance_id, for_update=True)
            started = maintenance.start()
            _write(uow, maintenance, started, [maintenance.status])
            uow.on_commit(partial(self.publisher.maintenance_started, started))

        logger.info(f"Started maintenance {started.id}")
        return MaintenanceResponse.from_entity(started)


class CancelMaintenanceUseCase(UseCase):
    """Cancel an open maintenance. Stock is not touched."""

    def execute(self, maintenance_id) -> MaintenanceResponse:
        with self.uow as uow:
            maintenance = _load(uow, maintenance_id, for_update=True)
            cancelled = maintenance.cancel()
            _write(uow, maintenance, cancelled, ACTIVE_STATUSES)
            uow.on_commit(partial(self.publisher.maintenance_cancelled, cancelled))

        logger.info(f"Cancelled maintenance {cancelled.id} (was {maintenance.status.value})")
        return MaintenanceResponse.from_entity(cancelled)


# =============================================================================
# UPDATE / DELETE
# =============================================================================

class UpdateMaintenanceUseCase(UseCase):
    """Edit the non-status fields of an open maintenance."""

    def execute(
        self, maintenance_id, request: UpdateMaintenanceRequest
    ) -> MaintenanceResponse:
        changes = request.changes()
        if 'mileage_at_maintenance' in changes:
            changes['mileage_at_maintenance'] = normalize_mileage(
                changes['mileage_at_maintenance']
            )
        for name in ('scheduled_date', 'next_maintenance_recommendation'):
            if name in changes:
                changes[name] = normalize_date(changes[name], name)
        if 'total_cost' in changes:
            changes['total_cost'] = normalize_decimal(changes['total_cost'], 'total_cost')

        with self.uow as uow:
            maintenance = _load(uow, maintenance_id, for_update=True)
            updated = maintenance.update(**changes)

            if updated.motorcycle_id != maintenance.motorcycle_id:
                if uow.motorcycles.find_by_id(updated.motorcycle_id) is None:
                    raise MotorcycleNotFoundError(updated.motorcycle_id)

            if updated is not maintenance:
                _write(uow, maintenance, updated, ACTIVE_STATUSES)
                uow.on_commit(partial(self.publisher.maintenance_updated, updated))

        logger.info(f"Updated maintenance {updated.id}: {', '.join(sorted(changes)) or 'no changes'}")
        return MaintenanceResponse.from_entity(updated)


class DeleteMaintenanceUseCase(UseCase):

    def execute(self, maintenance_id) -> None:
        with self.uow as uow:
            maintenance = _load(uow, maintenance_id)
            uow.maintenances.delete(maintenance.id)
            uow.on_commit(partial(self.publisher.maintenance_deleted, maintenance.id))

        logger.info(f"Deleted maintenance {maintenance.id}")


# =============================================================================
# QUERIES
# =============================================================================

class GetMaintenanceUseCase(UseCase):

    def execute(self, maintenance_id) -> MaintenanceResponse:
        with self.uow as uow:
            maintenance = _load(uow, maintenance_id)
        return MaintenanceResponse.from_entity(maintenance)


class FindAllMaintenancesUseCase(UseCase):
    """List maintenances, optionally filtered, ordered by scheduled date."""

    def execute(
        self,
        motorcycle_id=None,
        type=None,
        status=None,
    ) -> List[MaintenanceResponse]:
        type = _to_choice(MaintenanceType, type, 'type')
        status = _to_choice(MaintenanceStatus, status, 'status')

        with self.uow as uow:
            repository = uow.maintenances
            if motorcycle_id:
                maintenances = repository.find_by_motorcycle_id(motorcycle_id)
            elif status is not None:
                maintenances = repository.find_by_status(status)
            elif type is not None:
                maintenances = repository.find_by_type(type)
            else:
                maintenances = repository.find_all()

        if type is not None:
            maintenances = [m for m in maintenances if m.type == type]
        if status is not None:
            maintenances = [m for m in maintenances if m.status == status]
        return [MaintenanceResponse.from_entity(m) for m in maintenances]


class FindDueMaintenancesUseCase(UseCase):
    """Scheduled maintenances whose date is on or before ``current_date``."""

    def execute(self, current_date=None) -> List[MaintenanceResponse]:
        on_date: date = (
            normalize_date(current_date, 'current_date') or timezone.localdate()
        )
        with self.uow as uow:
            maintenances = uow.maintenances.find_due_maintenances(on_date)
        return [MaintenanceResponse.from_entity(m) for m in maintenances]
