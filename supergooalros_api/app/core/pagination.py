"""
Pagination helpers.

``Page`` is the envelope returned by repositories for list and search
queries.  The API does not put it in the response body: the body is
the plain list of items and the paging metadata travels in headers,
``X-Total-Count`` and an RFC 5988 ``Link`` header, e.g.::

    Link: </api/absences?page=1&size=20>; rel="next",
          </api/absences?page=4&size=20>; rel="last",
          </api/absences?page=0&size=20>; rel="first"
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar
from urllib.parse import urlencode


T = TypeVar("T")

SortOrder = List[Tuple[str, str]]


@dataclass
class Page(Generic[T]):
    """One page of results and the information needed to navigate."""

    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = 20

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def offset(self) -> int:
        return self.page * self.size

    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    def has_previous(self) -> bool:
        return self.page > 0


def parse_sort(
    sort_params: Optional[Iterable[str]],
    allowed: Sequence[str],
    default: str = "id",
) -> SortOrder:
    """Turn ``sort=field,dir`` query parameters into an ORDER BY list.

    Unknown fields are ignored, a missing direction means ascending.
    ``id`` is always appended as the last key so that pages are stable
    when the requested field has duplicates.
    """
    order: SortOrder = []
    for param in sort_params or []:
        parts = [p.strip() for p in param.split(",") if p.strip()]
        if not parts:
            continue
        name = parts[0]
        direction = parts[1].lower() if len(parts) > 1 else "asc"
        if name not in allowed or direction not in {"asc", "desc"}:
            continue
        if any(existing == name for existing, _ in order):
            continue
        order.append((name, direction))
    if not order:
        order.append((default, "asc"))
    if not any(name == "id" for name, _ in order):
        order.append(("id", "asc"))
    return order


def _generate_uri(base_url: str, page: int, size: int, query: Optional[str] = None) -> str:
    params: Dict[str, object] = {}
    if query is not None:
        params["query"] = query
    params["page"] = page
    params["size"] = size
    return f"{base_url}?{urlencode(params)}"


def _link_header(page: Page, base_url: str, query: Optional[str] = None) -> str:
    links: List[str] = []
    if page.has_next():
        links.append(f'<{_generate_uri(base_url, page.page + 1, page.size, query)}>; rel="next"')
    if page.has_previous():
        links.append(f'<{_generate_uri(base_url, page.page - 1, page.size, query)}>; rel="prev"')
    last_page = page.total_pages - 1 if page.total_pages > 0 else 0
    links.append(f'<{_generate_uri(base_url, last_page, page.size, query)}>; rel="last"')
    links.append(f'<{_generate_uri(base_url, 0, page.size, query)}>; rel="first"')
    return ",".join(links)


def generate_pagination_headers(page: Page, base_url: str) -> Dict[str, str]:
    """Build the ``X-Total-Count`` and ``Link`` headers for a list page."""
    return {
        "X-Total-Count": str(page.total),
        "Link": _link_header(page, base_url),
    }


def generate_search_pagination_headers(query: str, page: Page, base_url: str) -> Dict[str, str]:
    """Same as :func:`generate_pagination_headers` with the query kept in the links."""
    return {
        "X-Total-Count": str(page.total),
        "Link": _link_header(page, base_url, query=query),
    }
