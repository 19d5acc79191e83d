from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.serializers import ErrorResponseSerializer, PageQuerySerializer

from .serializers import (
    OrderCreateSerializer,
    OrderPublicSerializer,
    OrderUpdateSerializer,
)
from .services import (
    complete_order,
    create_order,
    delete_order,
    get_all_orders,
    get_order_by_id,
    get_order_queue,
    get_orders_page,
    update_order,
)


class OrderViewSet(viewsets.ViewSet):
    """
    ViewSet for Order operations.

    list: Get all orders, optionally one page of them
    create: Place an order
    retrieve: Get an order with its barista and coffees
    update: Replace an order
    destroy: Delete an order

    Custom actions:
    queue: Open orders, oldest first
    complete: Finalize an order now
    """

    lookup_value_regex = r'-?\d+'

    @extend_schema(
        parameters=[
            OpenApiParameter('page', OpenApiTypes.INT, description='Zero-based page number'),
            OpenApiParameter('limit', OpenApiTypes.INT, description='Rows per page'),
        ],
        responses={200: OrderPublicSerializer(many=True), 400: ErrorResponseSerializer},
        tags=['orders'],
    )
    def list(self, request, *args, **kwargs):
        query = PageQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        paging = query.get_paging()
        if paging is None:
            orders = get_all_orders()
        else:
            page, limit = paging
            orders = get_orders_page(page=page, limit=limit)
        return Response(OrderPublicSerializer(orders, many=True).data)

    @extend_schema(
        responses={200: OrderPublicSerializer, 404: ErrorResponseSerializer},
        tags=['orders'],
    )
    def retrieve(self, request, *args, **kwargs):
        order = get_order_by_id(order_id=int(kwargs['pk']))
        return Response(OrderPublicSerializer(order).data)

    @extend_schema(
        request=OrderCreateSerializer,
        responses={
            201: OrderPublicSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['orders'],
    )
    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = create_order(data=serializer.to_dto())
        return Response(
            OrderPublicSerializer(order).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        request=OrderUpdateSerializer,
        responses={
            200: OrderPublicSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
        },
        tags=['orders'],
    )
    def update(self, request, *args, **kwargs):
        serializer = OrderUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = update_order(data=serializer.to_dto(int(kwargs['pk'])))
        return Response(OrderPublicSerializer(order).data)

    @extend_schema(
        responses={200: None, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['orders'],
    )
    def destroy(self, request, *args, **kwargs):
        delete_order(order_id=int(kwargs['pk']))
        return Response(status=status.HTTP_200_OK)

    @extend_schema(
        responses={200: OrderPublicSerializer(many=True)},
        description="Open orders in the order they should be prepared.",
        tags=['orders'],
    )
    @action(detail=False, methods=['get'])
    def queue(self, request):
        """Get open orders, oldest first."""
        return Response(OrderPublicSerializer(get_order_queue(), many=True).data)

    @extend_schema(
        request=None,
        responses={
            200: OrderPublicSerializer,
            404: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
        },
        tags=['orders'],
    )
    @action(detail=True, methods=['put'])
    def complete(self, request, pk=None):
        """Mark an order as completed now."""
        order = complete_order(order_id=int(pk))
        return Response(OrderPublicSerializer(order).data)
