from django.contrib import admin
from .models import Motorcycle, Maintenance, InventoryPart, StockMovement


@admin.register(Motorcycle)
class MotorcycleAdmin(admin.ModelAdmin):
    list_display = ['brand', 'model', 'vin', 'year', 'mileage', 'status']
    list_filter = ['brand', 'status']
    search_fields = ['brand', 'model', 'vin']
    ordering = ['brand', 'model']


@admin.register(Maintenance)
class MaintenanceAdmin(admin.ModelAdmin):
    list_display = ['id', 'motorcycle_id', 'type', 'status', 'scheduled_date', 'actual_date']
    list_filter = ['type', 'status']
    search_fields = ['technician_notes']
    ordering = ['scheduled_date']
    # Status changes go through the API so stock stays consistent
    readonly_fields = ['status', 'actual_date', 'replaced_parts']


@admin.register(InventoryPart)
class InventoryPartAdmin(admin.ModelAdmin):
    list_display = ['reference_number', 'name', 'category', 'current_stock', 'min_stock_threshold', 'unit_price']
    list_filter = ['category']
    search_fields = ['reference_number', 'name']
    ordering = ['name']
    readonly_fields = ['current_stock']


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = ['part', 'delta', 'stock_after', 'reason', 'maintenance_id', 'created_at']
    search_fields = ['part__reference_number', 'reason']
    ordering = ['-created_at']

    def has_change_permission(self, request, obj=None):
        return False
