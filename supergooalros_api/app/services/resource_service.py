"""
Request handling rules shared by every record type.

An ``EntityResourceService`` is built from two collaborators passed to
its constructor: the entity repository (system of record) and the
search repository (mirror).  Writes go to the store first and the
persisted record is then copied to the index.  The two writes are not
atomic; if the second one fails the index is stale until
``reindex.py`` is run.
"""

from __future__ import annotations

import logging
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from supergooalros_api.app.core.pagination import Page, SortOrder
from supergooalros_api.app.repositories.entity_repository import EntityRepository
from supergooalros_api.app.repositories.search_repository import SearchRepository


R = TypeVar("R", bound=BaseModel)


class InvalidRequestError(ValueError):
    """The request is well formed but cannot be processed.

    ``error_key`` is the translation key sent back to clients in the
    failure alert header.
    """

    def __init__(self, entity_name: str, error_key: str, message: str) -> None:
        super().__init__(message)
        self.entity_name = entity_name
        self.error_key = error_key
        self.message = message


class EntityResourceService(Generic[R]):
    """Create, update, read, delete and search one record type."""

    def __init__(
        self,
        entity_name: str,
        repository: EntityRepository[R],
        search_repository: SearchRepository[R],
    ) -> None:
        self.entity_name = entity_name
        self.repository = repository
        self.search_repository = search_repository
        self.logger = logging.getLogger(f"{__name__}.{entity_name}")

    async def create(self, entity: BaseModel) -> R:
        """Persist a new record and index it.

        Raises :class:`InvalidRequestError` when the payload already
        carries an id; nothing is written in that case.
        """
        if getattr(entity, "id", None) is not None:
            raise InvalidRequestError(
                self.entity_name,
                "idexists",
                f"A new {self.entity_name} cannot already have an ID",
            )
        result = self.repository.save(entity)
        self.search_repository.save(result)
        return result

    async def update(self, entity: BaseModel) -> R:
        """Upsert the record under the payload's id and re-index it.

        A payload without id is handled by the endpoints as a create and
        never reaches this method.  An id unknown to the store inserts
        the record under that id.
        """
        result = self.repository.save(entity)
        self.search_repository.save(result)
        return result

    async def get_all(self, page: int, size: int, sort: Optional[SortOrder] = None) -> Page[R]:
        return self.repository.find_all(page, size, sort)

    async def get(self, entity_id: int) -> Optional[R]:
        return self.repository.find_one(entity_id)

    async def delete(self, entity_id: int) -> None:
        """Remove a record from the store and the index; unknown ids are ignored."""
        self.repository.delete(entity_id)
        self.search_repository.delete(entity_id)

    async def search(self, query: str, page: int, size: int, sort: Optional[SortOrder] = None) -> Page[R]:
        return self.search_repository.search(query, page, size, sort)
