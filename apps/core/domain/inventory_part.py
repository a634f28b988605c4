# apps/core/domain/inventory_part.py
"""
Inventory Part Entity

A stock-tracked spare part. Instances are immutable; every change returns a
new value and persistence is left to the repository.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import FrozenSet, Iterable, Optional

from .errors import InsufficientStockError, InventoryPartValidationError


class PartCategory(str, Enum):
    OIL_FILTER = 'OIL_FILTER'
    BRAKE_PAD = 'BRAKE_PAD'
    BRAKE_SYSTEM = 'BRAKE_SYSTEM'
    TIRE = 'TIRE'
    CHAIN = 'CHAIN'
    SPARK_PLUG = 'SPARK_PLUG'
    OTHER = 'OTHER'


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _to_category(value) -> PartCategory:
    try:
        return PartCategory(value)
    except ValueError:
        raise InventoryPartValidationError(
            f"Unknown part category: {value}", field='category'
        )


def _to_count(value, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InventoryPartValidationError(
            f"{field_name} must be an integer", field=field_name
        )
    if value < 0:
        raise InventoryPartValidationError(
            f"{field_name} cannot be negative", field=field_name
        )
    return value


def _to_price(value) -> Decimal:
    try:
        price = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise InventoryPartValidationError(
            "unit_price must be a number", field='unit_price'
        )
    if not price.is_finite() or price < 0:
        raise InventoryPartValidationError(
            "unit_price cannot be negative", field='unit_price'
        )
    return price


def _to_models(values: Optional[Iterable[str]]) -> FrozenSet[str]:
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    return frozenset(v.strip() for v in values if v and v.strip())


@dataclass(frozen=True)
class InventoryPart:
    """
    Spare part with its current stock level.

    ``current_stock`` is only ever changed through ``update_stock``, which
    refuses any delta that would take the stock below zero.
    """

    id: uuid.UUID
    name: str
    category: PartCategory
    reference_number: str
    current_stock: int
    min_stock_threshold: int
    unit_price: Decimal
    motorcycle_models: FrozenSet[str] = frozenset()
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def create(
        cls,
        name: str,
        category,
        reference_number: str,
        current_stock: int = 0,
        min_stock_threshold: int = 0,
        unit_price=Decimal('0'),
        motorcycle_models: Optional[Iterable[str]] = None,
        id: Optional[uuid.UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> 'InventoryPart':
        """Build a validated part."""
        name = (name or '').strip()
        reference_number = (reference_number or '').strip()
        if not name or not reference_number:
            raise InventoryPartValidationError(
                'Name and reference number are required'
            )

        now = _now()
        return cls(
            id=id or uuid.uuid4(),
            name=name,
            category=_to_category(category),
            reference_number=reference_number,
            current_stock=_to_count(current_stock, 'current_stock'),
            min_stock_threshold=_to_count(min_stock_threshold, 'min_stock_threshold'),
            unit_price=_to_price(unit_price),
            motorcycle_models=_to_models(motorcycle_models),
            created_at=created_at or now,
            updated_at=updated_at or now,
        )

    # ==========================================================================
    # Stock
    # ==========================================================================

    def update_stock(self, delta: int) -> 'InventoryPart':
        """Return a copy with ``current_stock + delta``."""
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise InventoryPartValidationError(
                'Stock delta must be an integer', field='delta'
            )
        new_stock = self.current_stock + delta
        if new_stock < 0:
            raise InsufficientStockError(
                self.id, requested=-delta, available=self.current_stock
            )
        return replace(self, current_stock=new_stock, updated_at=_now())

    def is_low_stock(self) -> bool:
        return self.current_stock <= self.min_stock_threshold

    # ==========================================================================
    # Catalogue
    # ==========================================================================

    def update(
        self,
        name: Optional[str] = None,
        category=None,
        reference_number: Optional[str] = None,
        min_stock_threshold: Optional[int] = None,
        unit_price=None,
        motorcycle_models: Optional[Iterable[str]] = None,
    ) -> 'InventoryPart':
        """Partial catalogue edit. Stock is not editable here."""
        changes = {}
        if name is not None:
            if not name.strip():
                raise InventoryPartValidationError('Name cannot be empty', field='name')
            changes['name'] = name.strip()
        if category is not None:
            changes['category'] = _to_category(category)
        if reference_number is not None:
            if not reference_number.strip():
                raise InventoryPartValidationError(
                    'Reference number cannot be empty', field='reference_number'
                )
            changes['reference_number'] = reference_number.strip()
        if min_stock_threshold is not None:
            changes['min_stock_threshold'] = _to_count(
                min_stock_threshold, 'min_stock_threshold'
            )
        if unit_price is not None:
            changes['unit_price'] = _to_price(unit_price)
        if motorcycle_models is not None:
            changes['motorcycle_models'] = _to_models(motorcycle_models)

        if not changes:
            return self
        return replace(self, updated_at=_now(), **changes)

    def is_compatible_with(self, model_name: str) -> bool:
        return model_name in self.motorcycle_models
