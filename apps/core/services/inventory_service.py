# apps/core/services/inventory_service.py
"""
Inventory Use-cases

Parts catalogue and manual stock movements.
"""

import logging
from functools import partial
from typing import List, Optional

from apps.core.domain import (
    InventoryPart,
    InventoryPartNotFoundError,
    InventoryPartValidationError,
    PartCategory,
)

from .base import UseCase
from .dtos import (
    CreateInventoryPartRequest,
    InventoryPartResponse,
    UpdateInventoryPartRequest,
    UpdateStockRequest,
)
from .normalizers import normalize_decimal, normalize_integer

logger = logging.getLogger(__name__)


class CreateInventoryPartUseCase(UseCase):
    """Register a new spare part."""

    def execute(self, request: CreateInventoryPartRequest) -> InventoryPartResponse:
        unit_price = normalize_decimal(
            request.unit_price, 'unit_price', error=InventoryPartValidationError
        )
        part = InventoryPart.create(
            name=request.name,
            category=request.category,
            reference_number=request.reference_number,
            current_stock=normalize_integer(
                request.current_stock or 0, 'current_stock',
                error=InventoryPartValidationError,
            ),
            min_stock_threshold=normalize_integer(
                request.min_stock_threshold or 0, 'min_stock_threshold',
                error=InventoryPartValidationError,
            ),
            unit_price=unit_price if unit_price is not None else 0,
            motorcycle_models=request.motorcycle_models,
        )

        with self.uow as uow:
            saved = uow.parts.save(part)
            uow.on_commit(partial(self.publisher.part_created, saved))
            uow.on_commit(partial(self.publisher.low_stock_alerts, [saved]))

        logger.info(f"Created part: {saved.reference_number} with stock {saved.current_stock}")
        return InventoryPartResponse.from_entity(saved)


class ManageInventoryStockUseCase(UseCase):
    """
    Manual stock movements.

    A positive ``quantity_change`` restocks, a negative one removes stock and
    fails with InsufficientStockError rather than going below zero.
    """

    DEFAULT_REASON = 'Manual stock adjustment'

    def execute(self, request: UpdateStockRequest) -> InventoryPartResponse:
        change = normalize_integer(
            request.quantity_change, 'quantity_change',
            error=InventoryPartValidationError,
        )
        if change == 0:
            raise InventoryPartValidationError(
                'Quantity change cannot be zero', field='quantity_change'
            )
        reason = (request.reason or '').strip() or self.DEFAULT_REASON

        with self.uow as uow:
            if uow.parts.find_by_id(request.part_id, for_update=True) is None:
                raise InventoryPartNotFoundError(request.part_id)

            if change > 0:
                part = uow.parts.increase_stock(request.part_id, change, reason)
            else:
                part = uow.parts.decrease_stock(request.part_id, -change, reason)

            uow.on_commit(partial(self.publisher.part_stock_changed, part, change, reason))
            uow.on_commit(partial(self.publisher.low_stock_alerts, [part]))

        logger.info(
            f"Stock of {part.reference_number} changed by {change:+d}, "
            f"now {part.current_stock}"
        )
        return InventoryPartResponse.from_entity(part)

    def find_low_stock_parts(self) -> List[InventoryPartResponse]:
        with self.uow as uow:
            parts = uow.parts.find_low_stock_parts()
        return [InventoryPartResponse.from_entity(p) for p in parts]


class UpdateInventoryPartUseCase(UseCase):
    """Edit catalogue fields. Stock is left to ManageInventoryStockUseCase."""

    def execute(
        self, part_id, request: UpdateInventoryPartRequest
    ) -> InventoryPartResponse:
        changes = request.changes()
        if 'min_stock_threshold' in changes:
            changes['min_stock_threshold'] = normalize_integer(
                changes['min_stock_threshold'], 'min_stock_threshold',
                error=InventoryPartValidationError,
            )
        if 'unit_price' in changes:
            changes['unit_price'] = normalize_decimal(
                changes['unit_price'], 'unit_price',
                error=InventoryPartValidationError,
            )

        with self.uow as uow:
            part = uow.parts.find_by_id(part_id, for_update=True)
            if part is None:
                raise InventoryPartNotFoundError(part_id)

            updated = part.update(**changes)
            if updated is not part:
                updated = uow.parts.update(updated)
                uow.on_commit(partial(self.publisher.part_updated, updated, list(changes)))
                uow.on_commit(partial(self.publisher.low_stock_alerts, [updated]))

        logger.info(
            f"Updated part {updated.reference_number}: "
            f"{', '.join(sorted(changes)) or 'no changes'}"
        )
        return InventoryPartResponse.from_entity(updated)


class DeleteInventoryPartUseCase(UseCase):

    def execute(self, part_id) -> None:
        with self.uow as uow:
            if not uow.parts.delete(part_id):
                raise InventoryPartNotFoundError(part_id)
            uow.on_commit(partial(self.publisher.part_deleted, part_id))

        logger.info(f"Deleted inventory part {part_id}")


class FindInventoryPartsUseCase(UseCase):

    def execute(
        self,
        category=None,
        motorcycle_model: Optional[str] = None,
    ) -> List[InventoryPartResponse]:
        if category:
            try:
                category = PartCategory(category)
            except ValueError:
                raise InventoryPartValidationError(
                    f"Unknown part category: {category}", field='category'
                )

        with self.uow as uow:
            if motorcycle_model:
                parts = uow.parts.find_by_motorcycle_model(motorcycle_model)
                if category:
                    parts = [p for p in parts if p.category == category]
            elif category:
                parts = uow.parts.find_by_category(category)
            else:
                parts = uow.parts.find_all()

        return [InventoryPartResponse.from_entity(p) for p in parts]

    def get(self, part_id) -> InventoryPartResponse:
        with self.uow as uow:
            part = uow.parts.find_by_id(part_id)
        if part is None:
            raise InventoryPartNotFoundError(part_id)
        return InventoryPartResponse.from_entity(part)
