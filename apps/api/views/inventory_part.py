# apps/api/views/inventory_part.py
"""
Inventory Part API Views
"""

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import (
    CreateInventoryPartRequest,
    CreateInventoryPartUseCase,
    DeleteInventoryPartUseCase,
    FindInventoryPartsUseCase,
    ManageInventoryStockUseCase,
    UpdateInventoryPartRequest,
    UpdateInventoryPartUseCase,
    UpdateStockRequest,
)
from apps.api.serializers import (
    InventoryPartCreateSerializer,
    InventoryPartUpdateSerializer,
    StockUpdateSerializer,
)


class InventoryPartViewSet(viewsets.ViewSet):
    """
    ViewSet for the parts inventory.

    Stock only changes through the ``stock`` action or by completing a
    maintenance.
    """

    def list(self, request):
        """List parts, filtered by category or compatible motorcycle model."""
        results = FindInventoryPartsUseCase().execute(
            category=request.query_params.get('category'),
            motorcycle_model=request.query_params.get('model'),
        )
        return Response([r.to_dict() for r in results])

    def create(self, request):
        serializer = InventoryPartCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = CreateInventoryPartUseCase().execute(
            CreateInventoryPartRequest(**serializer.validated_data)
        )
        return Response(result.to_dict(), status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        return Response(FindInventoryPartsUseCase().get(pk).to_dict())

    def partial_update(self, request, pk=None):
        """Edit catalogue fields."""
        serializer = InventoryPartUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        result = UpdateInventoryPartUseCase().execute(
            pk, UpdateInventoryPartRequest(**serializer.validated_data)
        )
        return Response(result.to_dict())

    def destroy(self, request, pk=None):
        DeleteInventoryPartUseCase().execute(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['patch'])
    def stock(self, request, pk=None):
        """Apply a signed stock change."""
        serializer = StockUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ManageInventoryStockUseCase().execute(UpdateStockRequest(
            part_id=pk,
            quantity_change=serializer.validated_data['quantity_change'],
            reason=serializer.validated_data.get('reason', ''),
        ))
        return Response(result.to_dict())

    @action(detail=False, methods=['get'], url_path='low-stock')
    def low_stock(self, request):
        """Parts at or below their minimum stock threshold."""
        results = ManageInventoryStockUseCase().find_low_stock_parts()
        return Response([r.to_dict() for r in results])
