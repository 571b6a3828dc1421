# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from dashfeed.cache.memory import ResponseCache
from dashfeed.client.http import ApiClient

BASE_URL = "https://api.example.com"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SleepRecorder:
    """Stand-in for ``asyncio.sleep`` that records delays and returns at once."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class ScriptedTransport(httpx.AsyncBaseTransport):
    """Replays a fixed sequence of responses or exceptions.

    The last outcome repeats once the script runs out.
    """

    def __init__(self, *outcomes: httpx.Response | Exception) -> None:
        self.outcomes = outcomes
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes[min(len(self.requests), len(self.outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return httpx.Response(
            outcome.status_code,
            content=outcome.content,
            headers=outcome.headers,
            request=request,
        )


class SlowTransport(httpx.AsyncBaseTransport):
    """Answers 200 only after ``delay`` seconds of real time."""

    def __init__(self, delay: float, payload: Any = None) -> None:
        self.delay = delay
        self.payload = payload if payload is not None else {}
        self.call_count = 0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.call_count += 1
        await asyncio.sleep(self.delay)
        return httpx.Response(200, json=self.payload, request=request)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recorded_sleep() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def cache(clock: FakeClock) -> ResponseCache:
    return ResponseCache(default_ttl=300.0, clock=clock)


@pytest.fixture
async def make_client(
    cache: ResponseCache, recorded_sleep: SleepRecorder
) -> AsyncIterator[Callable[..., ApiClient]]:
    """Factory for clients sharing the test cache and sleep recorder."""
    created: list[ApiClient] = []

    def factory(**kwargs: Any) -> ApiClient:
        kwargs.setdefault("base_url", BASE_URL)
        kwargs.setdefault("cache", cache)
        kwargs.setdefault("sleep", recorded_sleep)
        api = ApiClient(**kwargs)
        created.append(api)
        return api

    yield factory
    for api in created:
        await api.aclose()


@pytest.fixture
def client(make_client: Callable[..., ApiClient]) -> ApiClient:
    return make_client()


@pytest.fixture
def scripted() -> type[ScriptedTransport]:
    return ScriptedTransport


@pytest.fixture
def slow() -> type[SlowTransport]:
    return SlowTransport


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep developer .env files and DASHFEED_* variables out of tests."""
    monkeypatch.chdir(tmp_path)

    for name in list(os.environ):
        if name.startswith("DASHFEED_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _reset_dashfeed_logger():
    """setup_logging() mutates the package logger; undo it between tests."""
    logger = logging.getLogger("dashfeed")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
