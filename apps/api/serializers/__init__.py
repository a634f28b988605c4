# apps/api/serializers/__init__.py
"""
API Serializers
"""

from .maintenance import (
    MaintenanceCreateSerializer,
    MaintenanceUpdateSerializer,
    MaintenanceCompleteSerializer,
    ReplacedPartSerializer,
)
from .inventory_part import (
    InventoryPartCreateSerializer,
    InventoryPartUpdateSerializer,
    StockUpdateSerializer,
)

__all__ = [
    'MaintenanceCreateSerializer',
    'MaintenanceUpdateSerializer',
    'MaintenanceCompleteSerializer',
    'ReplacedPartSerializer',
    'InventoryPartCreateSerializer',
    'InventoryPartUpdateSerializer',
    'StockUpdateSerializer',
]
