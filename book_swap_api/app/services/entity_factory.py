"""
Construction of new entities.

``EntityFactory`` stamps a validated payload with a fresh id and the
current time.  Both come from callables passed to the factory so tests
can substitute deterministic ones.
"""

import uuid
from datetime import datetime, timezone
from typing import Callable, Type, TypeVar

from pydantic import BaseModel

EntityT = TypeVar("EntityT", bound=BaseModel)

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityFactory:
    """Build entities from already-validated payloads."""

    def __init__(self, id_factory: IdFactory = new_id, clock: Clock = utcnow) -> None:
        self.id_factory = id_factory
        self.clock = clock

    def build(self, entity_cls: Type[EntityT], payload: BaseModel) -> EntityT:
        """Return an ``entity_cls`` carrying the payload fields verbatim.

        The payload has been validated already, so the entity is created
        with ``model_construct`` and its values are not checked or
        normalised again.
        """
        return entity_cls.model_construct(
            id=self.id_factory(),
            **payload.model_dump(),
            created_at=self.clock(),
        )
