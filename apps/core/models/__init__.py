# apps/core/models/__init__.py
"""
Maintenance Service Models

Persistence tables for motorcycles, maintenance records and parts stock.
"""

from .motorcycle import Motorcycle
from .maintenance import Maintenance
from .inventory_part import InventoryPart, StockMovement

__all__ = [
    'Motorcycle',
    'Maintenance',
    'InventoryPart',
    'StockMovement',
]
