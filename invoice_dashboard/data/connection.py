"""
Client for the hosted store's row API (PostgREST dialect).

Design rules:
- One short-lived httpx.AsyncClient per remote call; nothing is shared between calls.
- The client only moves rows. Shaping belongs to service.py.
- Non-success responses raise StoreError; callers decide how to report them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx

from invoice_dashboard.config import AppConfig


class StoreConfigError(RuntimeError):
    pass


class StoreError(RuntimeError):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


# Accept header asking PostgREST for exactly one object instead of an array
SINGLE_OBJECT = "application/vnd.pgrst.object+json"


@dataclass(frozen=True)
class TableQuery:
    table: str
    select: str = "*"
    # (param, expression) pairs, e.g. ("id", "eq.42") or ("customers.or", "(...)")
    filters: tuple[tuple[str, str], ...] = ()
    order: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    single: bool = False

    def params(self) -> list[tuple[str, str]]:
        params = [("select", self.select)]
        params.extend(self.filters)
        if self.order:
            params.append(("order", self.order))
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        if self.offset:
            params.append(("offset", str(self.offset)))
        return params


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict):
        return body.get("message") or body.get("hint") or str(body)
    return str(body)


def _raise_for_status(resp: httpx.Response) -> None:
    if resp.status_code >= 300:
        raise StoreError(resp.status_code, _error_message(resp))


def parse_content_range(value: Optional[str]) -> int:
    """
    Total row count from a PostgREST Content-Range header.

    "0-24/3573" -> 3573, "*/0" -> 0. An unknown total ("*/*") is an error
    because counts are always requested as exact.
    """
    if not value or "/" not in value:
        raise StoreError(200, f"Missing row count in Content-Range: {value!r}")
    total = value.rsplit("/", 1)[1].strip()
    if not total.isdigit():
        raise StoreError(200, f"Unknown row count in Content-Range: {value!r}")
    return int(total)


@dataclass(frozen=True)
class StoreClient:
    cfg: AppConfig
    # Injected by tests; None means real network transport
    transport: Optional[httpx.AsyncBaseTransport] = None

    def __post_init__(self) -> None:
        if not self.cfg.store_url or not self.cfg.store_anon_key:
            raise StoreConfigError(
                "Missing SUPABASE_URL or SUPABASE_ANON_KEY for the data store. "
                "Set both in the environment or in a local .env file."
            )

    def _headers(self, **extra: str) -> dict[str, str]:
        headers = {
            "apikey": self.cfg.store_anon_key or "",
            "Authorization": f"Bearer {self.cfg.store_anon_key}",
        }
        headers.update(extra)
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.cfg.rest_url,
            timeout=self.cfg.store_timeout_seconds,
            transport=self.transport,
        )

    async def select(self, query: TableQuery) -> Any:
        """
        Run a read query. Returns a list of row dicts, or a single row dict
        when the query is in single-object mode.
        """
        headers = self._headers(Accept=SINGLE_OBJECT) if query.single else self._headers()
        async with self._client() as client:
            resp = await client.get(f"/{query.table}", params=query.params(), headers=headers)
        _raise_for_status(resp)
        return resp.json()

    async def count(self, query: TableQuery) -> int:
        """Exact number of rows matching the query, without transferring them."""
        async with self._client() as client:
            resp = await client.head(
                f"/{query.table}",
                params=query.params(),
                headers=self._headers(Prefer="count=exact"),
            )
        _raise_for_status(resp)
        return parse_content_range(resp.headers.get("content-range"))

    async def insert(self, table: str, rows: list[dict[str, Any]], ignore_duplicates: bool = False) -> None:
        if not rows:
            return
        prefer = "return=minimal"
        if ignore_duplicates:
            prefer += ",resolution=ignore-duplicates"
        async with self._client() as client:
            resp = await client.post(f"/{table}", json=rows, headers=self._headers(Prefer=prefer))
        _raise_for_status(resp)


def get_store_client(cfg: AppConfig) -> StoreClient:
    return StoreClient(cfg=cfg)
