from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from apps.core.serializers import ErrorResponseSerializer, PageQuerySerializer

from .serializers import (
    CoffeeCreateSerializer,
    CoffeePublicSerializer,
    CoffeeUpdateSerializer,
)
from .services import (
    create_coffee,
    delete_coffee,
    get_all_coffees,
    get_coffee_by_id,
    get_coffees_page,
    update_coffee,
)


class CoffeeViewSet(viewsets.ViewSet):
    """
    ViewSet for Coffee CRUD operations.

    list: Get the menu, optionally one page of it
    create: Add a coffee
    retrieve: Get a coffee with the orders it is part of
    update: Replace a coffee and its order links
    destroy: Remove a coffee
    """

    lookup_value_regex = r'-?\d+'

    @extend_schema(
        parameters=[
            OpenApiParameter('page', OpenApiTypes.INT, description='Zero-based page number'),
            OpenApiParameter('limit', OpenApiTypes.INT, description='Rows per page'),
        ],
        responses={200: CoffeePublicSerializer(many=True), 400: ErrorResponseSerializer},
        tags=['coffees'],
    )
    def list(self, request, *args, **kwargs):
        query = PageQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        paging = query.get_paging()
        if paging is None:
            coffees = get_all_coffees()
        else:
            page, limit = paging
            coffees = get_coffees_page(page=page, limit=limit)
        return Response(CoffeePublicSerializer(coffees, many=True).data)

    @extend_schema(
        responses={200: CoffeePublicSerializer, 404: ErrorResponseSerializer},
        tags=['coffees'],
    )
    def retrieve(self, request, *args, **kwargs):
        coffee = get_coffee_by_id(coffee_id=int(kwargs['pk']))
        return Response(CoffeePublicSerializer(coffee).data)

    @extend_schema(
        request=CoffeeCreateSerializer,
        responses={201: CoffeePublicSerializer, 400: ErrorResponseSerializer},
        tags=['coffees'],
    )
    def create(self, request, *args, **kwargs):
        serializer = CoffeeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        coffee = create_coffee(data=serializer.to_dto())
        return Response(
            CoffeePublicSerializer(coffee).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        request=CoffeeUpdateSerializer,
        responses={
            200: CoffeePublicSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['coffees'],
    )
    def update(self, request, *args, **kwargs):
        serializer = CoffeeUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        coffee = update_coffee(data=serializer.to_dto(int(kwargs['pk'])))
        return Response(CoffeePublicSerializer(coffee).data)

    @extend_schema(
        responses={200: None, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['coffees'],
    )
    def destroy(self, request, *args, **kwargs):
        delete_coffee(coffee_id=int(kwargs['pk']))
        return Response(status=status.HTTP_200_OK)
