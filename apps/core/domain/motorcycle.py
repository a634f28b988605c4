# apps/core/domain/motorcycle.py
"""Motorcycle reference record. Maintenance only needs to know it exists."""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Motorcycle:
    id: uuid.UUID
    brand: str
    model: str
    vin: str
    year: Optional[int] = None
    mileage: int = 0
    status: str = 'AVAILABLE'
