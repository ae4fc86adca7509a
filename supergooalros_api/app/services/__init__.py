"""
Service layer abstraction.

Each service encapsulates the request handling rules for a record
type: identifier checks, the write to the entity store and its mirror
into the search index.
"""
