from typing import Optional, Tuple

from django.conf import settings
from rest_framework import serializers

# ISO-8601 with seconds precision, rendered in UTC.
TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S'


class PageQuerySerializer(serializers.Serializer):
    """
    Validate paging query parameters.

    Only the types are checked here; range checks (page >= 0,
    limit >= 1) belong to the service layer.

    Query Parameters:
        page (int): Zero-based page number
        limit (int): Rows per page
    """

    page = serializers.IntegerField(required=False)
    limit = serializers.IntegerField(required=False)

    def get_paging(self) -> Optional[Tuple[int, int]]:
        """Return (page, limit) when paging was requested, else None."""
        params = self.validated_data
        if 'page' not in params and 'limit' not in params:
            return None
        return (
            params.get('page', 0),
            params.get('limit', settings.SHOP_DEFAULT_PAGE_LIMIT),
        )


# =============================================================================
# Summary Serializers
# =============================================================================
# Scalar-only views of each entity, nested inside the other apps'
# responses. Kept here so the app serializers don't import each other.

class BaristaNoRefSerializer(serializers.Serializer):
    """Barista without orders."""

    id = serializers.IntegerField()
    fullName = serializers.CharField(source='full_name')
    tipSize = serializers.FloatField(source='tip_size')


class CoffeeNoRefSerializer(serializers.Serializer):
    """Coffee without orders."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.FloatField()


class OrderNoRefSerializer(serializers.Serializer):
    """Order with the barista reduced to its id and without coffees."""

    id = serializers.IntegerField()
    baristaId = serializers.IntegerField(source='barista_id')
    created = serializers.DateTimeField(format=TIMESTAMP_FORMAT)
    completed = serializers.DateTimeField(format=TIMESTAMP_FORMAT, allow_null=True)
    price = serializers.FloatField()


class ErrorResponseSerializer(serializers.Serializer):
    """Body of every error raised by the service layer."""

    error = serializers.CharField()
    code = serializers.CharField()
    status = serializers.IntegerField()
