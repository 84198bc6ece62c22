"""Shared fixtures: a fake exchange service behind httpx.MockTransport."""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from moada.main import app
from moada.remote import get_client

BASE_URL = "http://exchange.test"
PUBLIC_ID = "a" * 64


def file_data(**overrides) -> dict:
    data = {
        "idPublic": PUBLIC_ID,
        "idPrivate": "priv123",
        "name": "a.txt",
        "size": 10,
        "savedDate": "2024-03-05T08:30:00Z",
        "expireDate": "2024-03-06T08:30:00Z",
        "email": "",
    }
    data.update(overrides)
    return data


def account_data(**overrides) -> dict:
    data = {
        "Ip": "5f1c0c2d9b",
        "Files": [PUBLIC_ID, "b" * 64],
        "FilesNumber": 2,
        "UsedSpace": 2048,
        "IpSavedDate": "2024-03-01T10:00:00Z",
        "IpExpireDate": "2024-03-31T10:00:00Z",
        "APICalls": 4,
        "APILastCallDate": "2024-03-05T08:30:00Z",
    }
    data.update(overrides)
    return data


class FakeExchange:
    """Routes requests to per-path handlers and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, handler):
        """Register a handler; a plain Response is served as-is."""
        self.routes[(method, path)] = handler
        return self

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"error": "no route"})
        if isinstance(handler, httpx.Response):
            # Fresh copy per request; a Response is bound to one request
            return httpx.Response(handler.status_code, headers=handler.headers, content=handler.content)
        if isinstance(handler, Exception):
            raise handler
        result = handler(request)
        if asyncio.iscoroutine(result):
            result = await result
        return result

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(self.handle))


@pytest.fixture
def exchange():
    return FakeExchange()


@pytest.fixture
def run():
    """Run a coroutine built around a fresh client for the fake exchange."""
    return asyncio.run


@pytest.fixture
def web(exchange):
    async def override():
        async with exchange.client() as client:
            yield client

    app.dependency_overrides[get_client] = override
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
