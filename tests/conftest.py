"""Shared test fixtures."""

from __future__ import annotations

import json

import httpx
import pytest


class FakeEndpoint:
    """Mock webhook that records requests and answers with a fixed body."""

    def __init__(self, response: str = '{"errmsg":"ok","errcode":0}', status: int = 200) -> None:
        self.response = response
        self.status = status
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, content=self.response.encode("utf-8"))

    @property
    def bodies(self) -> list[str]:
        return [r.content.decode("utf-8") for r in self.requests]

    @property
    def json_bodies(self) -> list[dict]:
        return [json.loads(b) for b in self.bodies]


@pytest.fixture
def endpoint() -> FakeEndpoint:
    """A webhook that accepts every message."""
    return FakeEndpoint()


@pytest.fixture
def make_endpoint():
    """Factory for webhooks with a custom response body/status."""
    return FakeEndpoint
