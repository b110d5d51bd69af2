"""Shared test fixtures and helpers."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from steambot.client import SteamClient
from steambot.guard import SteamGuard

RFC_SECRET = "MTIzNDU2Nzg5MDEyMzQ1Njc4OTA="
ZERO_SECRET = "AAAAAAAAAAAAAAAAAAAAAAAAAAA="


class CountingLimiter:
    """Stand-in limiter that never blocks and records each acquire."""

    def __init__(self) -> None:
        self.acquired = 0
        self.closed = False

    def acquire(self) -> None:
        self.acquired += 1

    def close(self) -> None:
        self.closed = True


class Recorder:
    """Collects requests seen by a MockTransport and answers from a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_form(self) -> dict[str, str]:
        from urllib.parse import parse_qsl

        return dict(parse_qsl(self.last.content.decode()))


def json_response(payload, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return handler


@pytest.fixture()
def make_client():
    """Build a SteamClient backed by a MockTransport and a CountingLimiter."""
    clients: list[SteamClient] = []

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        *,
        guard: SteamGuard | None = None,
        session_id: str = "sess123",
        clock: Callable[[], float] = lambda: 1_000_000_000.0,
    ) -> tuple[SteamClient, Recorder, CountingLimiter]:
        recorder = Recorder(handler)
        limiter = CountingLimiter()
        http = httpx.Client(transport=httpx.MockTransport(recorder))
        client = SteamClient(
            "test-key",
            guard=guard,
            limiter=limiter,  # type: ignore[arg-type]
            session_id=session_id,
            http=http,
            clock=clock,
        )
        clients.append(client)
        return client, recorder, limiter

    yield _make
    for client in clients:
        client.close()
        client._http.close()
