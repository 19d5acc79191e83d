from rest_framework import serializers

from apps.core.serializers import (
    TIMESTAMP_FORMAT,
    BaristaNoRefSerializer,
    CoffeeNoRefSerializer,
)

from .dto import OrderCreate, OrderUpdate


def _id_tuple(values):
    return tuple(values) if values is not None else None


# =============================================================================
# Input Serializers
# =============================================================================

class OrderCreateSerializer(serializers.Serializer):
    """
    Validate input for placing an order.

    Fields:
        baristaId (int): Barista preparing the order
        coffeeIdList (list[int]): Coffees in the order, no duplicates
    """

    baristaId = serializers.IntegerField(required=False, allow_null=True)
    coffeeIdList = serializers.ListField(
        child=serializers.IntegerField(),
        required=False,
        allow_null=True,
    )

    def to_dto(self) -> OrderCreate:
        data = self.validated_data
        return OrderCreate(
            barista_id=data.get('baristaId'),
            coffee_id_list=_id_tuple(data.get('coffeeIdList')),
        )


class OrderUpdateSerializer(serializers.Serializer):
    """
    Validate input for replacing an order.

    Fields:
        id (int): Ignored, the id from the URL wins
        baristaId (int): Barista preparing the order
        created (datetime): Optional, the stored value is kept when absent
        completed (datetime): Optional completion time
        price (float): Ignored, the price is always recomputed
        coffeeIdList (list[int]): Coffees in the order
    """

    id = serializers.IntegerField(required=False, allow_null=True)
    baristaId = serializers.IntegerField(required=False, allow_null=True)
    created = serializers.DateTimeField(required=False, allow_null=True)
    completed = serializers.DateTimeField(required=False, allow_null=True)
    price = serializers.FloatField(required=False, allow_null=True)
    coffeeIdList = serializers.ListField(
        child=serializers.IntegerField(),
        required=False,
        allow_null=True,
    )

    def to_dto(self, order_id: int) -> OrderUpdate:
        data = self.validated_data
        return OrderUpdate(
            id=order_id,
            barista_id=data.get('baristaId'),
            coffee_id_list=_id_tuple(data.get('coffeeIdList')),
            created=data.get('created'),
            completed=data.get('completed'),
            price=data.get('price'),
        )


# =============================================================================
# Output Serializers
# =============================================================================

class OrderPublicSerializer(serializers.Serializer):
    """Order with its barista and coffees as summaries."""

    id = serializers.IntegerField()
    baristaId = BaristaNoRefSerializer(source='barista')
    created = serializers.DateTimeField(format=TIMESTAMP_FORMAT)
    completed = serializers.DateTimeField(format=TIMESTAMP_FORMAT, allow_null=True)
    price = serializers.FloatField()
    coffees = CoffeeNoRefSerializer(many=True)
