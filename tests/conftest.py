"""Shared fixtures: a fake engine endpoint served through httpx.MockTransport."""

import json

import httpx
import pytest

from dagger_client.api.client import Client
from dagger_client.core.executor import GraphQLExecutor
from dagger_client.core.query_builder import Selection

ENDPOINT = "http://127.0.0.1:8080/query"


class FakeEngine:
    """Replies to each request with the next queued response and records the queries."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(self, data=None, *, errors=None, status_code=200):
        body = {"data": data}
        if errors is not None:
            body["errors"] = errors
        self._responses.append(httpx.Response(status_code, json=body))

    def reply_raw(self, response: httpx.Response):
        self._responses.append(response)

    @property
    def queries(self) -> list[str]:
        return [json.loads(r.content)["query"] for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.content!r}")
        return self._responses.pop(0)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def executor(engine):
    return GraphQLExecutor(ENDPOINT, transport=engine.transport)


@pytest.fixture
def client(executor):
    return Client(Selection(), executor)
