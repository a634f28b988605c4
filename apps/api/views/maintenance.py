# apps/api/views/maintenance.py
"""
Maintenance API Views
"""

from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import (
    CancelMaintenanceUseCase,
    CompleteMaintenanceRequest,
    CompleteMaintenanceUseCase,
    CreateMaintenanceRequest,
    CreateMaintenanceUseCase,
    DeleteMaintenanceUseCase,
    FindAllMaintenancesUseCase,
    FindDueMaintenancesUseCase,
    GetMaintenanceUseCase,
    ReplacedPartRequest,
    StartMaintenanceUseCase,
    UpdateMaintenanceRequest,
    UpdateMaintenanceUseCase,
)
from apps.api.serializers import (
    MaintenanceCompleteSerializer,
    MaintenanceCreateSerializer,
    MaintenanceUpdateSerializer,
)


class MaintenanceViewSet(viewsets.ViewSet):
    """
    ViewSet for maintenance records.

    Provides CRUD operations and lifecycle actions (start, complete, cancel).
    Domain errors propagate to the exception handler, which maps them to
    404/409/400 responses.
    """

    def list(self, request):
        """List maintenances, filtered by motorcycle_id, type or status."""
        params = request.query_params
        results = FindAllMaintenancesUseCase().execute(
            motorcycle_id=params.get('motorcycle_id'),
            type=params.get('type'),
            status=params.get('status'),
        )
        return Response([r.to_dict() for r in results])

    def create(self, request):
        serializer = MaintenanceCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = CreateMaintenanceUseCase().execute(
            CreateMaintenanceRequest(**serializer.validated_data)
        )
        return Response(result.to_dict(), status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        return Response(GetMaintenanceUseCase().execute(pk).to_dict())

    def update(self, request, pk=None, partial=False):
        serializer = MaintenanceUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        result = UpdateMaintenanceUseCase().execute(
            pk, UpdateMaintenanceRequest(**serializer.validated_data)
        )
        return Response(result.to_dict())

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):
        DeleteMaintenanceUseCase().execute(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    @action(detail=True, methods=['post'])
    def start(self, request, pk=None):
        """Start a scheduled maintenance."""
        return Response(StartMaintenanceUseCase().execute(pk).to_dict())

    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        """Complete a maintenance and consume its replaced parts."""
        serializer = MaintenanceCompleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = CompleteMaintenanceUseCase().execute(CompleteMaintenanceRequest(
            maintenance_id=pk,
            actual_date=data.get('actual_date') or timezone.localdate(),
            mileage_at_maintenance=data['mileage_at_maintenance'],
            technician_notes=data.get('technician_notes'),
            replaced_parts=[
                ReplacedPartRequest(part_id=item['part_id'], quantity=item['quantity'])
                for item in data.get('replaced_parts', [])
            ],
            total_cost=data.get('total_cost'),
            next_maintenance_recommendation=data.get('next_maintenance_recommendation'),
        ))
        return Response(result.to_dict())

    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        """Cancel an open maintenance."""
        return Response(CancelMaintenanceUseCase().execute(pk).to_dict())

    @action(detail=False, methods=['get'])
    def due(self, request):
        """Scheduled maintenances due on or before ?date= (default today)."""
        results = FindDueMaintenancesUseCase().execute(request.query_params.get('date'))
        return Response([r.to_dict() for r in results])
