"""Supergooalros search client.

Thin client for the free text search endpoints of the Supergooalros
API, used by front‑ends and scripts that need to look up absences or
conges.  Each record type gets a :class:`SearchResource` bound to its
search URL (``/api/_search/absences``, ``/api/_search/conges``) with a
single read-only operation, :meth:`SearchResource.query`.

The client uses the ``requests`` library.  There is no caching and no
retry: every call issues exactly one ``GET``.

Example::

    client = SupergooalrosClient(base_url="http://localhost:8080")
    conges, error = client.conge_search.query("annuel")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class SearchResource:
    """Search endpoint of one record type.

    Attributes:
        client: The owning :class:`SupergooalrosClient`.
        entity: Plural record name as it appears in the URL
            (``absences``, ``conges``).
    """

    def __init__(self, client: "SupergooalrosClient", entity: str) -> None:
        self.client = client
        self.entity = entity

    @property
    def path(self) -> str:
        return f"/api/_search/{self.entity}"

    def query(
        self, text: str, page: Optional[int] = None, size: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Run a free text search.

        Args:
            text: Query text; ``*`` matches every record.
            page: Optional page index (from 0).
            size: Optional page size.
        Returns:
            A tuple ``(items, error)``.  ``items`` is the list of matching
            records, empty on failure.
        """
        params: Dict[str, Any] = {"query": text}
        if page is not None:
            params["page"] = page
        if size is not None:
            params["size"] = size
        data, error = self.client._request("GET", self.path, params=params)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None


class SupergooalrosClient:
    """Client for the Supergooalros API search endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is sent.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds before a request is abandoned.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout
        self.absence_search = SearchResource(self, "absences")
        self.conge_search = SearchResource(self, "conges")

    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
