"""Conge records: service instance and FastAPI provider."""

from supergooalros_api.app.repositories.conge import CongeRepository, CongeSearchRepository
from supergooalros_api.app.schemas.conge import CongeRead
from supergooalros_api.app.services.resource_service import EntityResourceService


conge_service: EntityResourceService[CongeRead] = EntityResourceService(
    "conge",
    CongeRepository(),
    CongeSearchRepository(),
)


def get_conge_service() -> EntityResourceService[CongeRead]:
    return conge_service
