"""Entity store and search index repositories for absences."""

from supergooalros_api.app.repositories.entity_repository import EntityRepository
from supergooalros_api.app.repositories.search_repository import SearchRepository
from supergooalros_api.app.schemas.absence import AbsenceRead


class AbsenceRepository(EntityRepository[AbsenceRead]):
    table = "absences"
    columns = ("start_date", "end_date", "absence_type", "reason", "justified", "employee_id")
    read_schema = AbsenceRead


class AbsenceSearchRepository(SearchRepository[AbsenceRead]):
    index = "absence_index"
    read_schema = AbsenceRead
