"""
Top‑level API router.

Aggregates the record routers under a unified router which the
application mounts under ``/api``.  The absence and conge routers
define their own paths internally because each of them owns two path
roots (``/absences`` and ``/_search/absences``).
"""

from fastapi import APIRouter

from .endpoints import absences, conges, info

router = APIRouter()

router.include_router(absences.router, tags=["absences"])
router.include_router(conges.router, tags=["conges"])
router.include_router(info.router, prefix="/info", tags=["info"])
