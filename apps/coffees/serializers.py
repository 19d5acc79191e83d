from rest_framework import serializers

from apps.core.serializers import OrderNoRefSerializer

from .dto import CoffeeCreate, CoffeeUpdate


class CoffeeCreateSerializer(serializers.Serializer):
    """
    Validate input for adding a coffee.

    Fields:
        name (str): Menu name, must not be empty
        price (float): Non-negative price
    """

    name = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    price = serializers.FloatField(required=False, allow_null=True)

    def to_dto(self) -> CoffeeCreate:
        data = self.validated_data
        return CoffeeCreate(name=data.get('name'), price=data.get('price'))


class CoffeeUpdateSerializer(serializers.Serializer):
    """Validate input for replacing a coffee and its order links."""

    id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    price = serializers.FloatField(required=False, allow_null=True)
    orderIdList = serializers.ListField(
        child=serializers.IntegerField(),
        required=False,
        allow_null=True,
    )

    def to_dto(self, coffee_id: int) -> CoffeeUpdate:
        data = self.validated_data
        order_ids = data.get('orderIdList')
        return CoffeeUpdate(
            id=coffee_id,
            name=data.get('name'),
            price=data.get('price'),
            order_id_list=tuple(order_ids) if order_ids is not None else None,
        )


class CoffeePublicSerializer(serializers.Serializer):
    """Coffee with the orders it is part of."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.FloatField()
    orders = OrderNoRefSerializer(many=True)
