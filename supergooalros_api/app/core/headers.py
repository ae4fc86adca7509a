"""
Alert headers attached to write responses.

Front‑ends display a notification after each create, update or delete
by reading two headers: ``X-<app>-alert`` holds a translation key such
as ``supergooalrosApp.absence.created`` and ``X-<app>-params`` holds
its parameter (usually the record id).  Failures use
``X-<app>-error`` instead, with an ``error.<key>`` translation key.
"""

import logging
from typing import Dict

from .config import settings


logger = logging.getLogger(__name__)


def create_alert(message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{settings.app_name}-alert": message,
        f"X-{settings.app_name}-params": param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{settings.app_name}.{entity_name}.created", param)


def create_entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{settings.app_name}.{entity_name}.updated", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{settings.app_name}.{entity_name}.deleted", param)


def create_failure_alert(entity_name: str, error_key: str, default_message: str) -> Dict[str, str]:
    """Headers describing a rejected request.

    ``default_message`` is only logged; clients translate ``error_key``.
    """
    logger.error("Entity processing failed, %s", default_message)
    return {
        f"X-{settings.app_name}-error": f"error.{error_key}",
        f"X-{settings.app_name}-params": entity_name,
    }
