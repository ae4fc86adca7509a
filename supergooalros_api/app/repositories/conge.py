"""Entity store and search index repositories for conges."""

from supergooalros_api.app.repositories.entity_repository import EntityRepository
from supergooalros_api.app.repositories.search_repository import SearchRepository
from supergooalros_api.app.schemas.conge import CongeRead


class CongeRepository(EntityRepository[CongeRead]):
    table = "conges"
    columns = ("start_date", "end_date", "leave_type", "day_count", "status", "comment", "employee_id")
    read_schema = CongeRead


class CongeSearchRepository(SearchRepository[CongeRead]):
    index = "conge_index"
    read_schema = CongeRead
