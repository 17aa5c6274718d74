# tests/conftest.py
from __future__ import annotations

import json
from typing import Any, Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from grok_proxy.llm.utils import get_grok_client, grok_client
from grok_proxy.main import app


GROK_COMPLETION = {
    "id": "abc",
    "object": "chat.completion",
    "model": "grok-beta",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello from mock Grok."},
            "finish_reason": "stop",
        }
    ],
}


class FakeGrok:
    """
    Stand-in for the Grok HTTP API.
    Records every outbound request; `responder` decides the reply (or raises).
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=GROK_COMPLETION)
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def grok():
    """Production Grok client (timeout, retries) with its HTTP transport swapped for FakeGrok."""
    fake = FakeGrok()
    fake_client = grok_client.with_options(
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(fake)),
    )
    app.dependency_overrides[get_grok_client] = lambda: fake_client
    yield fake
    app.dependency_overrides.pop(get_grok_client, None)


@pytest.fixture
def chat_payload() -> dict[str, Any]:
    return {
        "apiKey": "gsk_test",
        "messages": [{"role": "user", "content": "hi"}],
    }


@pytest.fixture
def completion() -> dict[str, Any]:
    return GROK_COMPLETION
