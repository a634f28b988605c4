# apps/core/repositories/base.py
"""
Repository Contracts

Storage-agnostic interfaces consumed by the use-cases. The Django ORM
implementations live in ``apps.core.repositories.django``.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, Iterable, List, Optional

from apps.core.domain import (
    InventoryPart,
    Maintenance,
    MaintenanceStatus,
    MaintenanceType,
    Motorcycle,
    PartCategory,
)


class MotorcycleRepository(ABC):

    @abstractmethod
    def find_by_id(self, motorcycle_id: uuid.UUID) -> Optional[Motorcycle]:
        pass


class InventoryPartRepository(ABC):
    """Persistence for spare parts and their stock levels."""

    @abstractmethod
    def find_by_id(
        self, part_id: uuid.UUID, for_update: bool = False
    ) -> Optional[InventoryPart]:
        pass

    @abstractmethod
    def find_all(self) -> List[InventoryPart]:
        pass

    @abstractmethod
    def find_by_category(self, category: PartCategory) -> List[InventoryPart]:
        pass

    @abstractmethod
    def find_by_motorcycle_model(self, model_name: str) -> List[InventoryPart]:
        pass

    @abstractmethod
    def find_low_stock_parts(self) -> List[InventoryPart]:
        pass

    @abstractmethod
    def save(self, part: InventoryPart) -> InventoryPart:
        pass

    @abstractmethod
    def update(self, part: InventoryPart) -> InventoryPart:
        """Persist catalogue fields. Stock is left untouched."""

    @abstractmethod
    def delete(self, part_id: uuid.UUID) -> bool:
        pass

    @abstractmethod
    def decrease_stock(
        self,
        part_id: uuid.UUID,
        quantity: int,
        reason: str,
        maintenance_id: Optional[uuid.UUID] = None,
    ) -> InventoryPart:
        """
        Atomically subtract ``quantity`` from the part's stock.

        Must succeed only when the stored stock covers the quantity at write
        time, and raise InsufficientStockError otherwise.
        """

    @abstractmethod
    def increase_stock(
        self,
        part_id: uuid.UUID,
        quantity: int,
        reason: str,
        maintenance_id: Optional[uuid.UUID] = None,
    ) -> InventoryPart:
        pass


class MaintenanceRepository(ABC):
    """Persistence for maintenance records."""

    @abstractmethod
    def find_by_id(
        self, maintenance_id: uuid.UUID, for_update: bool = False
    ) -> Optional[Maintenance]:
        pass

    @abstractmethod
    def find_all(self) -> List[Maintenance]:
        pass

    @abstractmethod
    def find_by_motorcycle_id(self, motorcycle_id: uuid.UUID) -> List[Maintenance]:
        pass

    @abstractmethod
    def find_by_type(self, type: MaintenanceType) -> List[Maintenance]:
        pass

    @abstractmethod
    def find_by_status(self, status: MaintenanceStatus) -> List[Maintenance]:
        pass

    @abstractmethod
    def find_due_maintenances(self, current_date: date) -> List[Maintenance]:
        pass

    @abstractmethod
    def save(self, maintenance: Maintenance) -> Maintenance:
        pass

    @abstractmethod
    def update(
        self,
        maintenance: Maintenance,
        expected_statuses: Optional[Iterable[MaintenanceStatus]] = None,
    ) -> bool:
        """
        Write the record back.

        With ``expected_statuses`` the write only happens while the stored
        status is one of them. Returns whether a row was written.
        """

    @abstractmethod
    def delete(self, maintenance_id: uuid.UUID) -> bool:
        pass


class UnitOfWork(ABC):
    """
    Transaction boundary shared by the repositories it exposes.

    Used as a context manager: leaving the block normally commits, leaving
    it with an exception rolls back.
    """

    motorcycles: MotorcycleRepository
    parts: InventoryPartRepository
    maintenances: MaintenanceRepository

    @abstractmethod
    def __enter__(self) -> 'UnitOfWork':
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        pass

    @abstractmethod
    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once the outermost transaction commits."""
