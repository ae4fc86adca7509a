#!/usr/bin/env python3
"""
Rebuild the Supergooalros search index from the entity store.

Run this after restoring a database backup, after deleting the index
file, or whenever ``GET /api/info`` shows that stored and indexed
counts differ.

Usage:
    python reindex.py                  # every record type
    python reindex.py --entity conges

The database locations are read from ``DATABASE_URL`` and
``SEARCH_INDEX_URL`` like the API itself.
"""

import argparse
import asyncio
import logging
import sys

from supergooalros_api.app.core.config import settings
from supergooalros_api.app.core.db import init_db
from supergooalros_api.app.core.logging_config import setup_logging
from supergooalros_api.app.core.search_index import init_search_index
from supergooalros_api.app.services.absence_service import absence_service
from supergooalros_api.app.services.conge_service import conge_service
from supergooalros_api.app.services.reindex_service import ReindexService


SERVICES = {
    "absences": absence_service,
    "conges": conge_service,
}


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Rebuild the search index from the entity store.")
    ap.add_argument(
        "--entity",
        choices=sorted(SERVICES) + ["all"],
        default="all",
        help="Record type to reindex (default: all)",
    )
    args = ap.parse_args(argv)

    setup_logging(settings.log_level, settings.log_file or None)
    init_db()
    init_search_index()

    if args.entity == "all":
        services = list(SERVICES.values())
    else:
        services = [SERVICES[args.entity]]

    counts = asyncio.run(ReindexService.reindex_all(services))
    for name, count in counts.items():
        print(f"[+] {name}: {count} documents indexed")
    logging.getLogger(__name__).info("Reindex finished: %s", counts)
    return 0


if __name__ == "__main__":
    sys.exit(main())
