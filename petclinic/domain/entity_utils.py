"""
Helpers for working with already loaded entity collections.
"""

from typing import Iterable, Type, TypeVar

from .exceptions import EntityNotFoundException

E = TypeVar("E")


def get_by_id(entities: Iterable[object], entity_class: Type[E], entity_id: int) -> E:
    """
    Pick the entity of the given class and id out of a collection.

    Args:
        entities: Collection to search
        entity_class: Expected entity class
        entity_id: Entity id

    Returns:
        The matching entity

    Raises:
        EntityNotFoundException: If no entity of that class has that id
    """
    for entity in entities:
        if isinstance(entity, entity_class) and getattr(entity, "id", None) == entity_id:
            return entity
    raise EntityNotFoundException(entity_class.__name__, entity_id)
