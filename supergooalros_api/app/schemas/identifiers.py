"""Bounds shared by every record identifier.

Identifiers live in a signed 64-bit SQLite ``INTEGER`` column.  Path
parameters accept that whole range, so an unknown id is a 404 (or a
no-op delete) rather than a driver overflow.  Ids sent in a request
body must be positive: the store assigns ids from 1 upwards and
reindexing walks them in that order.
"""

from typing import Annotated

from pydantic import Field


SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1

EntityId = Annotated[int, Field(ge=1, le=SQLITE_MAX_INTEGER)]
