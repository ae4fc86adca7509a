"""
Storage adapters.

Two kinds of repositories live here: entity repositories backed by the
SQLite system of record, and search repositories backed by the FTS5
search index.  Services receive one of each through their constructor.
"""
