"""
Hosted Data Service Client

Thin async client for the hosted relational database's REST interface
(PostgREST dialect). Every portal screen reads and writes its rows through
this client; the service itself owns persistence.

Query dialect:
- Filters are (column, operator, value) triples -> ?column=operator.value
- Ordering -> ?order=column.asc|desc
- Exact counts come back in the Content-Range header (e.g. "0-9/42")
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import httpx

from campus_portal.core.errors import DataServiceError

logger = logging.getLogger(__name__)

Filter = Tuple[str, str, Any]

OPERATORS = {"eq", "neq", "gt", "gte", "lt", "lte"}


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_params(
    filters: Iterable[Filter] = (),
    order: Optional[str] = None,
    ascending: bool = True,
    limit: Optional[int] = None,
    columns: Optional[str] = "*",
) -> List[Tuple[str, str]]:
    """
    Translate filters and ordering into query parameters

    Returns:
        List of (name, value) pairs; a list keeps repeated columns intact
    """
    params: List[Tuple[str, str]] = []
    if columns:
        params.append(("select", columns))
    for column, operator, value in filters:
        if operator not in OPERATORS:
            raise ValueError(f"Unsupported filter operator: {operator}")
        params.append((column, f"{operator}.{_format_value(value)}"))
    if order:
        params.append(("order", f"{order}.{'asc' if ascending else 'desc'}"))
    if limit is not None:
        params.append(("limit", str(limit)))
    return params


def parse_content_range(header: Optional[str]) -> int:
    """Total row count from a Content-Range header such as '0-9/42' or '*/0'"""
    if not header or "/" not in header:
        return 0
    total = header.rsplit("/", 1)[1].strip()
    if not total.isdigit():
        return 0
    return int(total)


class DataServiceClient:
    """Async client for the hosted data service"""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: REST root, e.g. https://project.example.co/rest/v1
            api_key: Service key sent as both apikey and bearer token
            timeout: Per-request timeout in seconds
            transport: Optional transport override (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        if extra:
            headers.update(extra)
        return headers

    async def _request(
        self,
        method: str,
        table: str,
        params: Optional[Sequence[Tuple[str, str]]] = None,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        url = f"{self.base_url}/{table}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=self._headers(headers),
                )
            except httpx.HTTPError as exc:
                logger.error("Data service %s %s failed: %s", method, table, exc)
                raise DataServiceError(f"Data service unreachable: {exc}") from exc

        if response.status_code >= 400:
            logger.error(
                "Data service %s %s returned %d: %s",
                method,
                table,
                response.status_code,
                response.text,
            )
            raise DataServiceError(
                f"Data service rejected {method} {table} ({response.status_code})",
                status_code=response.status_code,
                body=response.text,
            )
        return response

    @staticmethod
    def _rows(response: httpx.Response) -> List[Dict[str, Any]]:
        if not response.content:
            return []
        data = response.json()
        if isinstance(data, dict):
            return [data]
        return list(data or [])

    async def select(
        self,
        table: str,
        filters: Iterable[Filter] = (),
        order: Optional[str] = None,
        ascending: bool = True,
        limit: Optional[int] = None,
        columns: str = "*",
    ) -> List[Dict[str, Any]]:
        """Fetch rows matching every filter"""
        params = build_params(filters, order=order, ascending=ascending, limit=limit, columns=columns)
        response = await self._request("GET", table, params=params)
        return self._rows(response)

    async def select_one(
        self,
        table: str,
        filters: Iterable[Filter] = (),
        columns: str = "*",
    ) -> Optional[Dict[str, Any]]:
        """First matching row, or None"""
        rows = await self.select(table, filters, limit=1, columns=columns)
        return rows[0] if rows else None

    async def count(self, table: str, filters: Iterable[Filter] = ()) -> int:
        """Exact number of rows matching the filters"""
        params = build_params(filters, columns="*")
        response = await self._request("HEAD", table, params=params, headers={"Prefer": "count=exact"})
        return parse_content_range(response.headers.get("Content-Range"))

    async def insert(self, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert rows and return them as stored"""
        response = await self._request(
            "POST",
            table,
            json=rows,
            headers={"Prefer": "return=representation"},
        )
        return self._rows(response)

    async def update(
        self,
        table: str,
        values: Dict[str, Any],
        filters: Iterable[Filter],
    ) -> List[Dict[str, Any]]:
        """Update matching rows and return them as stored"""
        filters = list(filters)
        if not filters:
            raise ValueError(f"Refusing to update every row of {table}")
        response = await self._request(
            "PATCH",
            table,
            params=build_params(filters, columns=None),
            json=values,
            headers={"Prefer": "return=representation"},
        )
        return self._rows(response)

    async def delete(self, table: str, filters: Iterable[Filter]) -> None:
        """Delete matching rows"""
        filters = list(filters)
        if not filters:
            raise ValueError(f"Refusing to delete every row of {table}")
        await self._request("DELETE", table, params=build_params(filters, columns=None))


__all__ = ["Filter", "OPERATORS", "build_params", "parse_content_range", "DataServiceClient"]
