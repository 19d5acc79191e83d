"""Coffee persistence gateway."""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from apps.core.entities import validate_id
from apps.core.exceptions import CoffeeNotFoundError
from apps.core.persistence import page_slice, translate_database_errors

from .entities import Coffee
from .models import CoffeeRecord


class CoffeeRepository:

    @staticmethod
    def to_entity(record: CoffeeRecord) -> Coffee:
        return Coffee(id=record.id, name=record.name, price=record.price)

    @translate_database_errors
    def create(self, coffee: Coffee) -> Coffee:
        record = CoffeeRecord.objects.create(name=coffee.name, price=coffee.price)
        return self.to_entity(record)

    @translate_database_errors
    def update(self, coffee: Coffee) -> Coffee:
        updated = CoffeeRecord.objects.filter(id=coffee.id).update(
            name=coffee.name,
            price=coffee.price,
        )
        if not updated:
            raise CoffeeNotFoundError(coffee.id)
        return self.to_entity(CoffeeRecord.objects.get(id=coffee.id))

    @translate_database_errors
    def delete(self, coffee_id: int) -> None:
        deleted, _ = CoffeeRecord.objects.filter(id=validate_id(coffee_id)).delete()
        if not deleted:
            raise CoffeeNotFoundError(coffee_id)

    @translate_database_errors
    def find_by_id(self, coffee_id: int) -> Optional[Coffee]:
        record = CoffeeRecord.objects.filter(id=validate_id(coffee_id)).first()
        return self.to_entity(record) if record is not None else None

    @translate_database_errors
    def find_all(self) -> List[Coffee]:
        return [self.to_entity(record) for record in CoffeeRecord.objects.order_by('id')]

    @translate_database_errors
    def find_all_by_page(self, page: int, limit: int) -> List[Coffee]:
        records = page_slice(CoffeeRecord.objects.order_by('id'), page, limit)
        return [self.to_entity(record) for record in records]

    @translate_database_errors
    def find_all_by_id(self, ids: Iterable[int]) -> List[Coffee]:
        records = CoffeeRecord.objects.filter(id__in=list(ids)).order_by('id')
        return [self.to_entity(record) for record in records]

    @translate_database_errors
    def find_by_order_id(self, order_id: int) -> List[Coffee]:
        records = CoffeeRecord.objects.filter(
            order_links__order_id=validate_id(order_id),
        ).order_by('id')
        return [self.to_entity(record) for record in records]

    @translate_database_errors
    def find_by_order_ids(self, order_ids: Iterable[int]) -> Dict[int, List[Coffee]]:
        """
        Load the coffees of several orders with one query.

        Returns:
            Mapping of order id to its coffees; orders without coffees
            are absent from the mapping
        """
        records = (
            CoffeeRecord.objects
            .filter(order_links__order_id__in=list(order_ids))
            .values_list('order_links__order_id', 'id', 'name', 'price')
            .order_by('order_links__order_id', 'id')
        )
        by_order = defaultdict(list)
        for order_id, coffee_id, name, price in records:
            by_order[order_id].append(Coffee(id=coffee_id, name=name, price=price))
        return dict(by_order)
