from rest_framework import serializers

from apps.core.serializers import OrderNoRefSerializer

from .dto import BaristaCreate, BaristaUpdate
from .models import DEFAULT_TIP_SIZE


# =============================================================================
# Input Serializers
# =============================================================================
# Only JSON types are checked here. Missing, empty or out-of-range values
# are passed through and rejected by the domain with a specific error.

class BaristaCreateSerializer(serializers.Serializer):
    """
    Validate input for creating a barista.

    Fields:
        fullName (str): Display name, must not be empty
        tipSize (float): Fraction added to order prices, defaults to 0.1
    """

    fullName = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    tipSize = serializers.FloatField(required=False, allow_null=True, default=DEFAULT_TIP_SIZE)

    def to_dto(self) -> BaristaCreate:
        data = self.validated_data
        return BaristaCreate(
            full_name=data.get('fullName'),
            tip_size=data.get('tipSize'),
        )


class BaristaUpdateSerializer(serializers.Serializer):
    """
    Validate input for replacing a barista.

    Fields:
        id (int): Ignored, the id from the URL wins
        fullName (str): Display name
        tipSize (float): Fraction added to order prices
        orderIdList (list[int]): Every order this barista should own
    """

    id = serializers.IntegerField(required=False, allow_null=True)
    fullName = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    tipSize = serializers.FloatField(required=False, allow_null=True)
    orderIdList = serializers.ListField(
        child=serializers.IntegerField(),
        required=False,
        allow_null=True,
    )

    def to_dto(self, barista_id: int) -> BaristaUpdate:
        data = self.validated_data
        order_ids = data.get('orderIdList')
        return BaristaUpdate(
            id=barista_id,
            full_name=data.get('fullName'),
            tip_size=data.get('tipSize'),
            order_id_list=tuple(order_ids) if order_ids is not None else None,
        )


# =============================================================================
# Output Serializers
# =============================================================================

class BaristaPublicSerializer(serializers.Serializer):
    """Barista with the orders assigned to them."""

    id = serializers.IntegerField()
    fullName = serializers.CharField(source='full_name')
    tipSize = serializers.FloatField(source='tip_size')
    orders = OrderNoRefSerializer(many=True)
