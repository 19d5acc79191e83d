"""
Barista persistence gateway.

Converts between ``BaristaRecord`` rows and ``Barista`` entities. Orders
are not loaded here; the service layer fills ``order_list`` when needed.
"""
from typing import Iterable, List, Optional

from apps.core.entities import validate_id
from apps.core.exceptions import BaristaNotFoundError
from apps.core.persistence import page_slice, translate_database_errors

from .entities import Barista
from .models import BaristaRecord


class BaristaRepository:

    @staticmethod
    def to_entity(record: BaristaRecord) -> Barista:
        return Barista(
            id=record.id,
            full_name=record.full_name,
            tip_size=record.tip_size,
        )

    @translate_database_errors
    def create(self, barista: Barista) -> Barista:
        record = BaristaRecord.objects.create(
            full_name=barista.full_name,
            tip_size=barista.tip_size,
        )
        return self.to_entity(record)

    @translate_database_errors
    def update(self, barista: Barista) -> Barista:
        updated = BaristaRecord.objects.filter(id=barista.id).update(
            full_name=barista.full_name,
            tip_size=barista.tip_size,
        )
        if not updated:
            raise BaristaNotFoundError(barista.id)
        return self.to_entity(BaristaRecord.objects.get(id=barista.id))

    @translate_database_errors
    def delete(self, barista_id: int) -> None:
        deleted, _ = BaristaRecord.objects.filter(id=validate_id(barista_id)).delete()
        if not deleted:
            raise BaristaNotFoundError(barista_id)

    @translate_database_errors
    def find_by_id(self, barista_id: int) -> Optional[Barista]:
        record = BaristaRecord.objects.filter(id=validate_id(barista_id)).first()
        return self.to_entity(record) if record is not None else None

    @translate_database_errors
    def find_all(self) -> List[Barista]:
        return [self.to_entity(record) for record in BaristaRecord.objects.order_by('id')]

    @translate_database_errors
    def find_all_by_page(self, page: int, limit: int) -> List[Barista]:
        records = page_slice(BaristaRecord.objects.order_by('id'), page, limit)
        return [self.to_entity(record) for record in records]

    @translate_database_errors
    def find_all_by_id(self, ids: Iterable[int]) -> List[Barista]:
        records = BaristaRecord.objects.filter(id__in=list(ids)).order_by('id')
        return [self.to_entity(record) for record in records]
