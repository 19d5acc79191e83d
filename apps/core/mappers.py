"""Shared DTO-to-entity mapping helpers."""
from collections import Counter
from typing import Callable, Iterable, List, Type

from .entities import require, validate_id
from .exceptions import DuplicatedElementsError, EntityNotFoundError


def resolve_references(
    id_list: Iterable[int],
    find_all_by_id: Callable[[List[int]], list],
    not_found_error: Type[EntityNotFoundError],
) -> list:
    """
    Resolve a list of ids to entities with one bulk lookup.

    Args:
        id_list: Ids supplied by the client
        find_all_by_id: Gateway method returning the entities that exist
        not_found_error: Raised with every id that has no row

    Returns:
        Entities in the order of ``id_list``

    Raises:
        NullParamError: If the list is missing
        NoValidIdError: If an id is negative
        DuplicatedElementsError: If an id appears more than once
        EntityNotFoundError: Subclass given in ``not_found_error``
    """
    require(id_list)
    ids = [validate_id(value) for value in id_list]
    if not ids:
        return []

    duplicates = [value for value, count in Counter(ids).items() if count > 1]
    if duplicates:
        raise DuplicatedElementsError(duplicates)

    found = {entity.id: entity for entity in find_all_by_id(ids)}
    missing = [value for value in ids if value not in found]
    if missing:
        raise not_found_error(missing)

    return [found[value] for value in ids]
