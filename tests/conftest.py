"""Pytest configuration and fixtures."""

import httpx
import pytest

from invoice_dashboard.config import AppConfig
from invoice_dashboard.data import service
from invoice_dashboard.data.connection import StoreClient


class FakeStore:
    """
    Stand-in for the hosted row API behind httpx.MockTransport.

    Responses are registered per (method, table) and replayed; every request
    is recorded so tests can assert on the query that was pushed down.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def reply(self, method, table, status=200, json=None, headers=None):
        self.routes[(method, table)] = (status, json, headers or {})

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path.rsplit("/", 1)[-1])
        if key not in self.routes:
            return httpx.Response(404, json={"message": f"relation {key[1]} does not exist"})
        status, body, headers = self.routes[key]
        if body is None:
            return httpx.Response(status, headers=headers)
        return httpx.Response(status, json=body, headers=headers)

    def last(self, method=None):
        requests = [r for r in self.requests if method is None or r.method == method]
        return requests[-1]


@pytest.fixture
def cfg():
    return AppConfig(
        store_url="https://store.example.test",
        store_anon_key="anon-key",
        store_timeout_seconds=5.0,
        log_level="INFO",
    )


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def client(cfg, store):
    return StoreClient(cfg=cfg, transport=httpx.MockTransport(store.handle))


@pytest.fixture
def live_store(monkeypatch, store):
    """Route every facade call through the fake store."""
    monkeypatch.setattr(
        service,
        "get_store_client",
        lambda c: StoreClient(cfg=c, transport=httpx.MockTransport(store.handle)),
    )
    return store
