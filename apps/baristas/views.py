from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from apps.core.serializers import ErrorResponseSerializer, PageQuerySerializer

from .serializers import (
    BaristaCreateSerializer,
    BaristaPublicSerializer,
    BaristaUpdateSerializer,
)
from .services import (
    create_barista,
    delete_barista,
    get_all_baristas,
    get_barista_by_id,
    get_baristas_page,
    update_barista,
)

PAGE_PARAMETERS = [
    OpenApiParameter('page', OpenApiTypes.INT, description='Zero-based page number'),
    OpenApiParameter('limit', OpenApiTypes.INT, description='Rows per page'),
]


class BaristaViewSet(viewsets.ViewSet):
    """
    ViewSet for Barista CRUD operations.

    list: Get all baristas, optionally one page of them
    create: Create a new barista
    retrieve: Get a specific barista with their orders
    update: Replace a barista and their order assignments
    destroy: Delete a barista, moving their orders to the default barista
    """

    lookup_value_regex = r'-?\d+'

    @extend_schema(
        parameters=PAGE_PARAMETERS,
        responses={200: BaristaPublicSerializer(many=True), 400: ErrorResponseSerializer},
        tags=['baristas'],
    )
    def list(self, request, *args, **kwargs):
        query = PageQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        paging = query.get_paging()
        if paging is None:
            baristas = get_all_baristas()
        else:
            page, limit = paging
            baristas = get_baristas_page(page=page, limit=limit)
        return Response(BaristaPublicSerializer(baristas, many=True).data)

    @extend_schema(
        responses={200: BaristaPublicSerializer, 404: ErrorResponseSerializer},
        tags=['baristas'],
    )
    def retrieve(self, request, *args, **kwargs):
        barista = get_barista_by_id(barista_id=int(kwargs['pk']))
        return Response(BaristaPublicSerializer(barista).data)

    @extend_schema(
        request=BaristaCreateSerializer,
        responses={201: BaristaPublicSerializer, 400: ErrorResponseSerializer},
        tags=['baristas'],
    )
    def create(self, request, *args, **kwargs):
        serializer = BaristaCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        barista = create_barista(data=serializer.to_dto())
        return Response(
            BaristaPublicSerializer(barista).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        request=BaristaUpdateSerializer,
        responses={
            200: BaristaPublicSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['baristas'],
    )
    def update(self, request, *args, **kwargs):
        serializer = BaristaUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        barista = update_barista(data=serializer.to_dto(int(kwargs['pk'])))
        return Response(BaristaPublicSerializer(barista).data)

    @extend_schema(
        responses={200: None, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['baristas'],
    )
    def destroy(self, request, *args, **kwargs):
        delete_barista(barista_id=int(kwargs['pk']))
        return Response(status=status.HTTP_200_OK)
