# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Async HTTP client with response caching, retry/backoff and timeouts.

Every public call returns a :class:`~dashfeed.client.models.RequestResult`.
Failures of any kind (transport errors, non-2xx statuses, undecodable
bodies, timeouts) are folded into the envelope and never raised.
"""

from __future__ import annotations

import asyncio
import copy
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from dashfeed import __version__
from dashfeed.cache.memory import CacheStats, ResponseCache
from dashfeed.client.models import RequestOptions, RequestResult, RetryPolicy
from dashfeed.client.retry import backoff_delay, check_status, describe, is_retryable
from dashfeed.core.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    JSON_CONTENT_TYPE,
    HttpMethod,
)
from dashfeed.core.exceptions import DecodeError, HttpStatusError

logger = logging.getLogger("dashfeed.client.http")

_USER_AGENT = f"dashfeed/{__version__}"
_NO_BODY = object()

OptionsLike = RequestOptions | Mapping[str, Any] | None


class _Attempts:
    """Progress of one call, readable after the retry loop is cancelled."""

    __slots__ = ("count", "status_code")

    def __init__(self) -> None:
        self.count = 0
        self.status_code: int | None = None


def _log_context(method: HttpMethod, target: str, **fields: Any) -> dict[str, Any]:
    return {"method": str(method), "target": target, **fields}


def _decode(response: httpx.Response) -> Any:
    """Decode a JSON body.  An empty body decodes to ``None``."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise DecodeError(f"Invalid JSON in response body: {exc}") from exc


class ApiClient:
    """Resilient JSON client shared by all content providers.

    Construct one per process at the composition root and pass it to the
    consumers that need it.

    Parameters
    ----------
    base_url:
        Prefix for relative targets.
    timeout:
        Default per-call budget in seconds, covering every attempt and
        backoff sleep.
    retry_policy:
        Default policy for calls that do not pass their own.  Without one,
        failed calls are not retried.
    cache:
        Response cache for GET requests.  A fresh in-memory cache is used
        when omitted.
    headers:
        Extra headers sent with every request.
    transport:
        Custom httpx transport (useful for testing).
    sleep:
        Coroutine used for backoff waits.
    """

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        retry_policy: RetryPolicy | None = None,
        cache: ResponseCache | None = None,
        headers: Mapping[str, str] | None = None,
        user_agent: str = _USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._cache = cache if cache is not None else ResponseCache()
        self._timeout = timeout
        self._retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep
        default_headers = {"User-Agent": user_agent}
        default_headers.update(headers or {})
        # The per-call budget is enforced with asyncio.timeout, not by httpx.
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers=default_headers,
            timeout=httpx.Timeout(None),
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    async def get(self, target: str, options: OptionsLike = None) -> RequestResult:
        """GET *target*, serving from the cache when a live entry exists."""
        return await self._execute(HttpMethod.GET, target, options=options)

    async def post(
        self, target: str, body: Any, options: OptionsLike = None
    ) -> RequestResult:
        return await self._execute(HttpMethod.POST, target, body=body, options=options)

    async def put(
        self, target: str, body: Any, options: OptionsLike = None
    ) -> RequestResult:
        return await self._execute(HttpMethod.PUT, target, body=body, options=options)

    async def delete(self, target: str, options: OptionsLike = None) -> RequestResult:
        return await self._execute(HttpMethod.DELETE, target, options=options)

    # ------------------------------------------------------------------
    # Cache administration
    # ------------------------------------------------------------------

    def clear_cache(self) -> int:
        """Drop every cached response.  Returns the number removed."""
        count = self._cache.clear()
        logger.info("Response cache cleared: %d entries removed", count)
        return count

    def delete_from_cache(self, key: str) -> bool:
        return self._cache.delete(key)

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    @property
    def stats(self) -> CacheStats:
        return self._cache.stats

    @property
    def default_retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    # ------------------------------------------------------------------
    # Execution path
    # ------------------------------------------------------------------

    def cache_key_for(self, target: str, params: Mapping[str, str | int] | None = None) -> str:
        """Default cache key: the target, plus its query string if any."""
        if not params:
            return target
        return str(httpx.URL(target, params=params))

    async def _execute(
        self,
        method: HttpMethod,
        target: str,
        *,
        body: Any = _NO_BODY,
        options: OptionsLike,
    ) -> RequestResult:
        try:
            opts = (
                options
                if isinstance(options, RequestOptions)
                else RequestOptions.model_validate(options or {})
            )
        except ValidationError as exc:
            logger.error("Invalid options for %s %s: %s", method, target, exc)
            return RequestResult.fail(f"Invalid request options: {exc}")

        if not isinstance(target, str) or not target.strip():
            return RequestResult.fail("Request target must be a non-empty string")

        content: bytes | None = None
        if body is not _NO_BODY:
            try:
                content = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as exc:
                logger.error("%s %s: body is not JSON serialisable: %s", method, target, exc)
                return RequestResult.fail(f"Request body is not JSON serialisable: {exc}")

        is_get = method is HttpMethod.GET
        cache_key: str | None = None
        if is_get and opts.use_cache:
            cache_key = opts.cache_key or self.cache_key_for(target, opts.params)
            entry = self._cache.lookup(cache_key)
            if entry is not None:
                logger.debug("Cache HIT for %s", cache_key)
                return RequestResult.ok(copy.deepcopy(entry.value), cached=True)
            logger.debug("Cache MISS for %s", cache_key)

        headers = {"Content-Type": JSON_CONTENT_TYPE}
        headers.update(opts.headers)
        policy = opts.retries or self._retry_policy
        timeout = opts.timeout if opts.timeout is not None else self._timeout
        attempts = _Attempts()

        scope = asyncio.timeout(timeout)
        try:
            async with scope:
                data = await self._send_with_retry(
                    method, target, content, headers, opts.params, policy, attempts
                )
        except HttpStatusError as exc:
            logger.error(
                "%s %s failed: %s", method, target, exc,
                extra=_log_context(
                    method, target, attempt=attempts.count, status_code=exc.status_code
                ),
            )
            return RequestResult.fail(
                str(exc), status_code=exc.status_code, attempts=attempts.count
            )
        except Exception as exc:
            # A transport may raise its own TimeoutError; only an expired
            # budget is reported as a timeout.
            if scope.expired():
                logger.error(
                    "%s %s: request timeout after %gs (%d attempt(s))",
                    method, target, timeout, attempts.count,
                    extra=_log_context(method, target, attempt=attempts.count),
                )
                return RequestResult.fail(
                    f"Request timeout after {timeout:g}s",
                    status_code=attempts.status_code,
                    attempts=attempts.count,
                )
            logger.error(
                "%s %s failed after %d attempt(s): %s",
                method, target, attempts.count, describe(exc),
                extra=_log_context(method, target, attempt=attempts.count),
            )
            return RequestResult.fail(
                describe(exc),
                status_code=attempts.status_code,
                attempts=attempts.count,
            )

        if cache_key is not None:
            self._cache.set(cache_key, copy.deepcopy(data), opts.cache_ttl)

        return RequestResult.ok(
            data,
            cached=False if is_get else None,
            status_code=attempts.status_code,
            attempts=attempts.count,
        )

    async def _send_with_retry(
        self,
        method: HttpMethod,
        target: str,
        content: bytes | None,
        headers: dict[str, str],
        params: Mapping[str, str | int] | None,
        policy: RetryPolicy,
        attempts: _Attempts,
    ) -> Any:
        """Run the attempt loop.  Raises the last error once retries run out."""
        for attempt in range(policy.max_attempts):
            attempts.count = attempt + 1
            try:
                response = await self._http.request(
                    str(method),
                    target,
                    content=content,
                    headers=headers,
                    params=params,
                )
                attempts.status_code = response.status_code
                check_status(response)
                return _decode(response)
            except Exception as exc:
                if not is_retryable(exc) or attempt >= policy.max_retries:
                    raise
                delay = backoff_delay(attempt, policy)
                logger.warning(
                    "%s %s failed (attempt %d/%d), retrying in %.2fs: %s",
                    method, target, attempt + 1, policy.max_attempts, delay, describe(exc),
                    extra=_log_context(method, target, attempt=attempt + 1, delay=delay),
                )
                await self._sleep(delay)
