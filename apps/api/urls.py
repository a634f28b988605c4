# apps/api/urls.py
"""
Maintenance Service API URL Configuration
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.api.views import InventoryPartViewSet, MaintenanceViewSet

app_name = 'api'

router = DefaultRouter()

# Maintenance
router.register(r'maintenances', MaintenanceViewSet, basename='maintenance')

# Parts Inventory
router.register(r'parts', InventoryPartViewSet, basename='inventory-part')

urlpatterns = [
    path('', include(router.urls)),
]
