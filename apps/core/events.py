# apps/core/events.py
"""
Maintenance Service Events

Event definitions published after maintenance and stock changes commit.
"""

import json
import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Iterable
from uuid import UUID

from django.conf import settings

logger = logging.getLogger(__name__)


class DecimalEncoder(json.JSONEncoder):
    """Custom JSON encoder for Decimal, UUID and date types."""

    def default(self, obj):
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


class MaintenanceEventTypes:
    """Event type constants for maintenance service."""

    # Maintenance Events
    MAINTENANCE_CREATED = 'maintenance.created'
    MAINTENANCE_UPDATED = 'maintenance.updated'
    MAINTENANCE_STARTED = 'maintenance.started'
    MAINTENANCE_COMPLETED = 'maintenance.completed'
    MAINTENANCE_CANCELLED = 'maintenance.cancelled'
    MAINTENANCE_DELETED = 'maintenance.deleted'

    # Inventory Events
    PART_CREATED = 'inventory.part.created'
    PART_UPDATED = 'inventory.part.updated'
    PART_DELETED = 'inventory.part.deleted'
    PART_CONSUMED = 'inventory.part.consumed'
    PART_RESTOCKED = 'inventory.part.restocked'
    PART_ADJUSTED = 'inventory.part.adjusted'
    PART_LOW_STOCK = 'inventory.part.low_stock'


class MaintenanceEventPublisher:
    """
    Publisher for maintenance service events.

    Events are serialized and written to the service log; callers schedule
    publication with ``transaction.on_commit`` so rolled back work is never
    announced.
    """

    def __init__(self, service_name: str = None):
        self.service_name = service_name

    def _serialize_event(self, event_type: str, data: Dict[str, Any]) -> str:
        """Serialize event to JSON."""
        event = {
            'event_type': event_type,
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'service': self.service_name or getattr(
                settings, 'SERVICE_NAME', 'maintenance-service'
            ),
            'data': data,
        }
        return json.dumps(event, cls=DecimalEncoder)

    def publish(self, event_type: str, data: Dict[str, Any]) -> bool:
        """Publish an event."""
        try:
            message = self._serialize_event(event_type, data)
        except (TypeError, ValueError):
            logger.exception(f"Failed to serialize event {event_type}")
            return False

        logger.info(f"Publishing event: {event_type}")
        logger.debug(f"Event data: {message}")
        return True

    # ==========================================================================
    # Maintenance Events
    # ==========================================================================

    def _maintenance_payload(self, maintenance) -> Dict[str, Any]:
        return {
            'maintenance_id': str(maintenance.id),
            'motorcycle_id': str(maintenance.motorcycle_id),
            'type': maintenance.type.value,
            'status': maintenance.status.value,
            'scheduled_date': maintenance.scheduled_date,
        }

    def maintenance_created(self, maintenance) -> bool:
        return self.publish(
            MaintenanceEventTypes.MAINTENANCE_CREATED,
            self._maintenance_payload(maintenance),
        )

    def maintenance_updated(self, maintenance) -> bool:
        return self.publish(
            MaintenanceEventTypes.MAINTENANCE_UPDATED,
            self._maintenance_payload(maintenance),
        )

    def maintenance_started(self, maintenance) -> bool:
        return self.publish(
            MaintenanceEventTypes.MAINTENANCE_STARTED,
            self._maintenance_payload(maintenance),
        )

    def maintenance_completed(self, maintenance) -> bool:
        """Publish maintenance completed event."""
        payload = self._maintenance_payload(maintenance)
        payload.update({
            'actual_date': maintenance.actual_date,
            'mileage_at_maintenance': maintenance.mileage_at_maintenance,
            'replaced_parts': [str(part_id) for part_id in maintenance.replaced_parts],
            'total_cost': maintenance.total_cost,
            'next_maintenance_recommendation': maintenance.next_maintenance_recommendation,
        })
        return self.publish(MaintenanceEventTypes.MAINTENANCE_COMPLETED, payload)

    def maintenance_cancelled(self, maintenance) -> bool:
        return self.publish(
            MaintenanceEventTypes.MAINTENANCE_CANCELLED,
            self._maintenance_payload(maintenance),
        )

    def maintenance_deleted(self, maintenance_id: UUID) -> bool:
        return self.publish(MaintenanceEventTypes.MAINTENANCE_DELETED, {
            'maintenance_id': str(maintenance_id),
        })

    # ==========================================================================
    # Inventory Events
    # ==========================================================================

    def part_created(self, part) -> bool:
        return self.publish(MaintenanceEventTypes.PART_CREATED, {
            'part_id': str(part.id),
            'reference_number': part.reference_number,
            'category': part.category.value,
            'current_stock': part.current_stock,
        })

    def part_updated(self, part, fields: Iterable[str]) -> bool:
        return self.publish(MaintenanceEventTypes.PART_UPDATED, {
            'part_id': str(part.id),
            'reference_number': part.reference_number,
            'fields': sorted(fields),
        })

    def part_deleted(self, part_id: UUID) -> bool:
        return self.publish(MaintenanceEventTypes.PART_DELETED, {
            'part_id': str(part_id),
        })

    def part_consumed(self, part, quantity: int, maintenance_id: UUID = None) -> bool:
        """Publish part consumed by a maintenance event."""
        return self.publish(MaintenanceEventTypes.PART_CONSUMED, {
            'part_id': str(part.id),
            'reference_number': part.reference_number,
            'quantity': quantity,
            'current_stock': part.current_stock,
            'maintenance_id': str(maintenance_id) if maintenance_id else None,
        })

    def part_stock_changed(self, part, quantity_change: int, reason: str) -> bool:
        """Publish a manual restock or adjustment event."""
        event_type = (
            MaintenanceEventTypes.PART_RESTOCKED if quantity_change > 0
            else MaintenanceEventTypes.PART_ADJUSTED
        )
        return self.publish(event_type, {
            'part_id': str(part.id),
            'reference_number': part.reference_number,
            'quantity_change': quantity_change,
            'current_stock': part.current_stock,
            'reason': reason,
        })

    def part_low_stock(self, part) -> bool:
        """Publish low stock alert event."""
        return self.publish(MaintenanceEventTypes.PART_LOW_STOCK, {
            'part_id': str(part.id),
            'reference_number': part.reference_number,
            'name': part.name,
            'current_stock': part.current_stock,
            'min_stock_threshold': part.min_stock_threshold,
        })

    def low_stock_alerts(self, parts: Iterable) -> int:
        """Publish a low stock alert for each part at or below its threshold."""
        sent = 0
        for part in parts:
            if part.is_low_stock() and self.part_low_stock(part):
                sent += 1
        return sent


# Singleton instance
event_publisher = MaintenanceEventPublisher()
