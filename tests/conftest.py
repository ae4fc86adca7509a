"""Shared fixtures: isolated SQLite files for the store and the index."""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so that
# imports like `from supergooalros_api...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from supergooalros_api.app.core.config import settings  # noqa: E402
from supergooalros_api.app.core.db import init_db  # noqa: E402
from supergooalros_api.app.core.search_index import init_search_index  # noqa: E402
from supergooalros_api.app.main import app  # noqa: E402


@pytest.fixture
def storage(tmp_path, monkeypatch):
    """Point the store and the index at fresh files and create the schema."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "store.db"))
    monkeypatch.setattr(settings, "search_index_url", str(tmp_path / "index.db"))
    monkeypatch.setattr(settings, "startup_sleep", 0)
    init_db()
    init_search_index()
    return tmp_path


@pytest.fixture
def client(storage):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def absence_payload():
    return {
        "start_date": "2016-05-02",
        "end_date": "2016-05-04",
        "absence_type": "MALADIE",
        "reason": "Grippe saisonniere",
        "justified": True,
        "employee_id": 42,
    }


@pytest.fixture
def conge_payload():
    return {
        "start_date": "2016-08-01",
        "end_date": "2016-08-19",
        "leave_type": "ANNUEL",
        "day_count": 15,
        "status": "ACCEPTE",
        "comment": "Congé d'été",
        "employee_id": 42,
    }
