"""
Absence endpoints.

CRUD and search routes for absences.  Every write is mirrored into
the search index by the service; responses carry alert headers so that
clients can display a notification, and list/search responses carry
pagination headers (``X-Total-Count`` and ``Link``).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from supergooalros_api.app.core.config import settings
from supergooalros_api.app.core.headers import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)
from supergooalros_api.app.core.pagination import (
    generate_pagination_headers,
    generate_search_pagination_headers,
    parse_sort,
)
from supergooalros_api.app.schemas.absence import AbsenceRead, AbsenceWrite
from supergooalros_api.app.schemas.identifiers import SQLITE_MAX_INTEGER, SQLITE_MIN_INTEGER
from supergooalros_api.app.services.absence_service import get_absence_service
from supergooalros_api.app.services.resource_service import EntityResourceService, InvalidRequestError


logger = logging.getLogger(__name__)

router = APIRouter()

ENTITY_NAME = "absence"


@router.post("/absences", response_model=AbsenceRead, status_code=status.HTTP_201_CREATED)
async def create_absence(
    absence: AbsenceWrite,
    response: Response,
    service: EntityResourceService = Depends(get_absence_service),
) -> AbsenceRead:
    """Create a new absence.

    Returns 201 with the new absence and its ``Location``, or 400 if
    the absence already has an ID.
    """
    logger.debug("REST request to save Absence : %s", absence)
    try:
        result = await service.create(absence)
    except InvalidRequestError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
            headers=create_failure_alert(e.entity_name, e.error_key, e.message),
        ) from e
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"/api/absences/{result.id}"
    response.headers.update(create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put("/absences", response_model=AbsenceRead)
async def update_absence(
    absence: AbsenceWrite,
    response: Response,
    service: EntityResourceService = Depends(get_absence_service),
) -> AbsenceRead:
    """Update an existing absence.

    An absence without ID is created instead, exactly as ``POST``
    would.
    """
    logger.debug("REST request to update Absence : %s", absence)
    if absence.id is None:
        return await create_absence(absence, response, service)
    result = await service.update(absence)
    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(absence.id)))
    return result


@router.get("/absences", response_model=List[AbsenceRead])
async def get_all_absences(
    response: Response,
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sort: Optional[List[str]] = Query(None),
    service: EntityResourceService = Depends(get_absence_service),
) -> List[AbsenceRead]:
    """Return a page of absences.

    - **page**, **size** — page index (from 0) and page size.
    - **sort** — ``field`` or ``field,asc|desc``; may be repeated.
    """
    logger.debug("REST request to get a page of Absences")
    result = await service.get_all(page, size, parse_sort(sort, service.repository.sortable_fields))
    response.headers.update(generate_pagination_headers(result, "/api/absences"))
    return result.items


@router.get("/absences/{absence_id}", response_model=AbsenceRead)
async def get_absence(
    absence_id: int = Path(..., ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER),
    service: EntityResourceService = Depends(get_absence_service),
):
    """Return one absence, or 404 with an empty body."""
    logger.debug("REST request to get Absence : %s", absence_id)
    absence = await service.get(absence_id)
    if absence is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return absence


@router.delete("/absences/{absence_id}")
async def delete_absence(
    absence_id: int = Path(..., ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER),
    service: EntityResourceService = Depends(get_absence_service),
) -> Response:
    """Delete an absence.  Deleting an unknown ID still returns 200."""
    logger.debug("REST request to delete Absence : %s", absence_id)
    await service.delete(absence_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=create_entity_deletion_alert(ENTITY_NAME, str(absence_id)),
    )


@router.get("/_search/absences", response_model=List[AbsenceRead])
async def search_absences(
    response: Response,
    query: str = Query(...),
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sort: Optional[List[str]] = Query(None),
    service: EntityResourceService = Depends(get_absence_service),
) -> List[AbsenceRead]:
    """Search absences with a free text query (``*`` matches everything).

    Results are ranked by relevance; **sort** only orders absences that
    are equally relevant, and orders the whole result for ``*``.
    """
    logger.debug("REST request to search for a page of Absences for query %s", query)
    result = await service.search(query, page, size, parse_sort(sort, service.repository.sortable_fields))
    response.headers.update(generate_search_pagination_headers(query, result, "/api/_search/absences"))
    return result.items
