"""
Rebuild the search index from the entity store.

Writes to the store and to the index are two separate calls, so the
index can drift (a crash between the two writes, an index file
restored from an old backup...).  Reindexing drops every document of a
record type and indexes each stored row again.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from supergooalros_api.app.services.resource_service import EntityResourceService


logger = logging.getLogger(__name__)


class ReindexService:
    """Service class for rebuilding search indexes."""

    @classmethod
    async def reindex(cls, service: EntityResourceService) -> int:
        """Rebuild the index of ``service`` and return the number of documents written."""
        service.search_repository.clear()
        count = 0
        for entity in service.repository.iter_all():
            service.search_repository.save(entity)
            count += 1
        logger.info("Reindexed %s %s documents", count, service.entity_name)
        return count

    @classmethod
    async def reindex_all(cls, services: Iterable[EntityResourceService]) -> Dict[str, int]:
        return {service.entity_name: await cls.reindex(service) for service in services}
