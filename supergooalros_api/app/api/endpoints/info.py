"""
Information endpoint.

Returns the application name and version together with the number of
records held by the entity store and by the search index for each
record type.  Operators use the two counts to spot an index that has
drifted from the store and needs ``reindex.py``.
"""

from typing import Any, Dict

from fastapi import APIRouter

from supergooalros_api.app.core.config import settings
from supergooalros_api.app.services.absence_service import absence_service
from supergooalros_api.app.services.conge_service import conge_service

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def get_info() -> Dict[str, Any]:
    entities: Dict[str, Dict[str, int]] = {}
    for service in (absence_service, conge_service):
        entities[service.entity_name] = {
            "stored": service.repository.count(),
            "indexed": service.search_repository.count(),
        }
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "entities": entities,
    }
