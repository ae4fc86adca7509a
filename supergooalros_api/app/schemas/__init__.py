"""
Pydantic schema definitions for API payloads.

Each record type defines a ``Write`` model for request bodies (the
``id`` is optional there) and a ``Read`` model for responses.  Schemas
are separated from the storage layer to decouple API representation
from persistence.
"""
