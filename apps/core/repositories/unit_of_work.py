# apps/core/repositories/unit_of_work.py
"""
Django Unit of Work

One ``transaction.atomic`` block shared by the ORM repositories. Nested use
opens a savepoint, so a use-case may run inside a caller's transaction.
"""

from typing import Callable

from django.db import DEFAULT_DB_ALIAS, transaction

from .base import UnitOfWork
from .django_orm import (
    DjangoInventoryPartRepository,
    DjangoMaintenanceRepository,
    DjangoMotorcycleRepository,
)


class DjangoUnitOfWork(UnitOfWork):

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using
        self.motorcycles = DjangoMotorcycleRepository(using)
        self.parts = DjangoInventoryPartRepository(using)
        self.maintenances = DjangoMaintenanceRepository(using)
        self._blocks = []

    def __enter__(self) -> 'DjangoUnitOfWork':
        block = transaction.atomic(using=self.using)
        block.__enter__()
        self._blocks.append(block)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        block = self._blocks.pop()
        block.__exit__(exc_type, exc_value, traceback)
        return False

    def on_commit(self, callback: Callable[[], None]) -> None:
        transaction.on_commit(callback, using=self.using)
