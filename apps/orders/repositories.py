"""
Order and order-coffee persistence gateways.

Order rows are read together with their barista (one join). Coffees
are not loaded here; use ``CoffeeRepository.find_by_order_ids`` or let
the service layer populate them.
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set

from apps.baristas.repositories import BaristaRepository
from apps.coffees.models import CoffeeRecord
from apps.core.entities import validate_id
from apps.core.exceptions import KeyNotPresentError, OrderNotFoundError
from apps.core.persistence import page_slice, translate_database_errors

from .entities import Order
from .models import OrderCoffeeRecord, OrderRecord


class OrderRepository:

    @staticmethod
    def to_entity(record: OrderRecord) -> Order:
        return Order(
            id=record.id,
            barista=BaristaRepository.to_entity(record.barista),
            coffees=[],
            created=record.created,
            completed=record.completed,
            price=record.price,
        )

    @staticmethod
    def _queryset():
        return OrderRecord.objects.select_related('barista').order_by('id')

    @translate_database_errors
    def create(self, order: Order) -> Order:
        record = OrderRecord.objects.create(
            barista_id=order.barista.id,
            created=order.created,
            completed=order.completed,
            price=order.price,
        )
        return self.find_by_id(record.id)

    @translate_database_errors
    def update(self, order: Order) -> Order:
        updated = OrderRecord.objects.filter(id=order.id).update(
            barista_id=order.barista.id,
            created=order.created,
            completed=order.completed,
            price=order.price,
        )
        if not updated:
            raise OrderNotFoundError(order.id)
        return self.find_by_id(order.id)

    @translate_database_errors
    def delete(self, order_id: int) -> None:
        deleted, _ = OrderRecord.objects.filter(id=validate_id(order_id)).delete()
        if not deleted:
            raise OrderNotFoundError(order_id)

    @translate_database_errors
    def find_by_id(self, order_id: int) -> Optional[Order]:
        record = self._queryset().filter(id=validate_id(order_id)).first()
        return self.to_entity(record) if record is not None else None

    @translate_database_errors
    def find_all(self) -> List[Order]:
        return [self.to_entity(record) for record in self._queryset()]

    @translate_database_errors
    def find_all_by_page(self, page: int, limit: int) -> List[Order]:
        return [self.to_entity(record) for record in page_slice(self._queryset(), page, limit)]

    @translate_database_errors
    def find_all_by_id(self, ids: Iterable[int]) -> List[Order]:
        records = self._queryset().filter(id__in=list(ids))
        return [self.to_entity(record) for record in records]

    @translate_database_errors
    def find_by_barista_id(self, barista_id: int) -> List[Order]:
        records = self._queryset().filter(barista_id=validate_id(barista_id))
        return [self.to_entity(record) for record in records]

    @translate_database_errors
    def find_by_barista_ids(self, barista_ids: Iterable[int]) -> Dict[int, List[Order]]:
        by_barista = defaultdict(list)
        for record in self._queryset().filter(barista_id__in=list(barista_ids)):
            by_barista[record.barista_id].append(self.to_entity(record))
        return dict(by_barista)

    @translate_database_errors
    def find_by_coffee_id(self, coffee_id: int) -> List[Order]:
        records = self._queryset().filter(coffee_links__coffee_id=validate_id(coffee_id))
        return [self.to_entity(record) for record in records]

    @translate_database_errors
    def find_by_coffee_ids(self, coffee_ids: Iterable[int]) -> Dict[int, List[Order]]:
        links = (
            OrderCoffeeRecord.objects
            .filter(coffee_id__in=list(coffee_ids))
            .select_related('order__barista')
            .order_by('coffee_id', 'order_id')
        )
        by_coffee = defaultdict(list)
        for link in links:
            by_coffee[link.coffee_id].append(self.to_entity(link.order))
        return dict(by_coffee)

    @translate_database_errors
    def reassign_barista(self, order_ids: Iterable[int], barista_id: int) -> int:
        """
        Point the given orders at another barista.

        Returns:
            Number of orders changed
        """
        order_ids = list(order_ids)
        if not order_ids:
            return 0
        return OrderRecord.objects.filter(id__in=order_ids).update(
            barista_id=validate_id(barista_id),
        )

    @translate_database_errors
    def update_prices(self, prices: Dict[int, float]) -> None:
        for order_id, price in prices.items():
            OrderRecord.objects.filter(id=order_id).update(price=price)


class OrderCoffeeRepository:
    """Gateway for the (order, coffee) association set."""

    @translate_database_errors
    def link(self, order_id: int, coffee_id: int) -> None:
        """
        Add the pair unless it already exists.

        Raises:
            KeyNotPresentError: If the order or the coffee row is missing
        """
        order_id = validate_id(order_id)
        coffee_id = validate_id(coffee_id)
        if not OrderRecord.objects.filter(id=order_id).exists():
            raise KeyNotPresentError(f"Order '{order_id}' does not exist.")
        if not CoffeeRecord.objects.filter(id=coffee_id).exists():
            raise KeyNotPresentError(f"Coffee '{coffee_id}' does not exist.")
        OrderCoffeeRecord.objects.get_or_create(order_id=order_id, coffee_id=coffee_id)

    @translate_database_errors
    def unlink(self, order_id: int, coffee_id: int) -> int:
        deleted, _ = OrderCoffeeRecord.objects.filter(
            order_id=validate_id(order_id),
            coffee_id=validate_id(coffee_id),
        ).delete()
        return deleted

    @translate_database_errors
    def unlink_by_order(self, order_id: int) -> int:
        deleted, _ = OrderCoffeeRecord.objects.filter(order_id=validate_id(order_id)).delete()
        return deleted

    @translate_database_errors
    def unlink_by_coffee(self, coffee_id: int) -> int:
        deleted, _ = OrderCoffeeRecord.objects.filter(coffee_id=validate_id(coffee_id)).delete()
        return deleted

    @translate_database_errors
    def coffee_ids_for_order(self, order_id: int) -> Set[int]:
        return set(
            OrderCoffeeRecord.objects
            .filter(order_id=validate_id(order_id))
            .values_list('coffee_id', flat=True)
        )

    @translate_database_errors
    def order_ids_for_coffee(self, coffee_id: int) -> Set[int]:
        return set(
            OrderCoffeeRecord.objects
            .filter(coffee_id=validate_id(coffee_id))
            .values_list('order_id', flat=True)
        )
