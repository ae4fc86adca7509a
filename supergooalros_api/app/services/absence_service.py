"""Absence records: service instance and FastAPI provider."""

from supergooalros_api.app.repositories.absence import AbsenceRepository, AbsenceSearchRepository
from supergooalros_api.app.schemas.absence import AbsenceRead
from supergooalros_api.app.services.resource_service import EntityResourceService


absence_service: EntityResourceService[AbsenceRead] = EntityResourceService(
    "absence",
    AbsenceRepository(),
    AbsenceSearchRepository(),
)


def get_absence_service() -> EntityResourceService[AbsenceRead]:
    return absence_service
