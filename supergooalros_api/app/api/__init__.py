"""
API package containing the REST routes.

The top‑level ``router`` in ``router.py`` includes all domain routers
and is mounted by the application under ``/api``.
"""
