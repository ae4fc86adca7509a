"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
record type (absences, conges) or for operational information.  The
routers are aggregated in ``api/router.py``.
"""
