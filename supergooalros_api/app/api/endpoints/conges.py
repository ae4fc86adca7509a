"""
Conge (leave) endpoints.

Same contract as the absence routes: writes go to the entity store and
are mirrored into the ``conge_index`` search table.
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
from supergooalros_api.app.schemas.conge import CongeRead, CongeWrite
from supergooalros_api.app.schemas.identifiers import SQLITE_MAX_INTEGER, SQLITE_MIN_INTEGER
from supergooalros_api.app.services.conge_service import get_conge_service
from supergooalros_api.app.services.resource_service import EntityResourceService, InvalidRequestError


logger = logging.getLogger(__name__)

router = APIRouter()

ENTITY_NAME = "conge"


@router.post("/conges", response_model=CongeRead, status_code=status.HTTP_201_CREATED)
async def create_conge(
    conge: CongeWrite,
    response: Response,
    service: EntityResourceService = Depends(get_conge_service),
) -> CongeRead:
    """Create a new conge.

    Returns 201 with the new conge and its ``Location``, or 400 if
    the conge already has an ID.
    """
    logger.debug("REST request to save Conge : %s", conge)
    try:
        result = await service.create(conge)
    except InvalidRequestError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
            headers=create_failure_alert(e.entity_name, e.error_key, e.message),
        ) from e
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"/api/conges/{result.id}"
    response.headers.update(create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put("/conges", response_model=CongeRead)
async def update_conge(
    conge: CongeWrite,
    response: Response,
    service: EntityResourceService = Depends(get_conge_service),
) -> CongeRead:
    """Update an existing conge.

    A conge without ID is created instead, exactly as ``POST``
    would.
    """
    logger.debug("REST request to update Conge : %s", conge)
    if conge.id is None:
        return await create_conge(conge, response, service)
    result = await service.update(conge)
    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(conge.id)))
    return result


@router.get("/conges", response_model=List[CongeRead])
async def get_all_conges(
    response: Response,
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sort: Optional[List[str]] = Query(None),
    service: EntityResourceService = Depends(get_conge_service),
) -> List[CongeRead]:
    """Return a page of conges.

    - **page**, **size** — page index (from 0) and page size.
    - **sort** — ``field`` or ``field,asc|desc``; may be repeated.
    """
    logger.debug("REST request to get a page of Conges")
    result = await service.get_all(page, size, parse_sort(sort, service.repository.sortable_fields))
    response.headers.update(generate_pagination_headers(result, "/api/conges"))
    return result.items


@router.get("/conges/{conge_id}", response_model=CongeRead)
async def get_conge(
    conge_id: int = Path(..., ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER),
    service: EntityResourceService = Depends(get_conge_service),
):
    """Return one conge, or 404 with an empty body."""
    logger.debug("REST request to get Conge : %s", conge_id)
    conge = await service.get(conge_id)
    if conge is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return conge


@router.delete("/conges/{conge_id}")
async def delete_conge(
    conge_id: int = Path(..., ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER),
    service: EntityResourceService = Depends(get_conge_service),
) -> Response:
    """Delete a conge.  Deleting an unknown ID still returns 200."""
    logger.debug("REST request to delete Conge : %s", conge_id)
    await service.delete(conge_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=create_entity_deletion_alert(ENTITY_NAME, str(conge_id)),
    )


@router.get("/_search/conges", response_model=List[CongeRead])
async def search_conges(
    response: Response,
    query: str = Query(...),
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sort: Optional[List[str]] = Query(None),
    service: EntityResourceService = Depends(get_conge_service),
) -> List[CongeRead]:
    """Search conges with a free text query (``*`` matches everything).

    Results are ranked by relevance; **sort** only orders conges that
    are equally relevant, and orders the whole result for ``*``.
    """
    logger.debug("REST request to search for a page of Conges for query %s", query)
    result = await service.search(query, page, size, parse_sort(sort, service.repository.sortable_fields))
    response.headers.update(generate_search_pagination_headers(query, result, "/api/_search/conges"))
    return result.items
