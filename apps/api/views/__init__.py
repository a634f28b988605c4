# apps/api/views/__init__.py
"""
API Views
"""

from .maintenance import MaintenanceViewSet
from .inventory_part import InventoryPartViewSet

__all__ = [
    'MaintenanceViewSet',
    'InventoryPartViewSet',
]
