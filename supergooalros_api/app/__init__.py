"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each HR record type (absences, conges) has its own
schema, repository pair and service, and exposes a router defined in
``api/endpoints``.
"""

from .main import app  # noqa: F401
