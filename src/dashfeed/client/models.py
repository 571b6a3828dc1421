# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pydantic models for request configuration and the result envelope."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dashfeed.core.constants import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_DELAY,
    DEFAULT_MAX_RETRIES,
)


class RetryPolicy(BaseModel):
    """Bounded exponential backoff configuration.

    All delays are in seconds.  At most ``1 + max_retries`` attempts are made.
    """

    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    base_delay: float = Field(default=DEFAULT_BASE_DELAY, ge=0)
    max_delay: float = Field(default=DEFAULT_MAX_DELAY, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_delay_bounds(self) -> RetryPolicy:
        if self.base_delay > self.max_delay:
            raise ValueError(
                f"base_delay ({self.base_delay}) must not exceed max_delay ({self.max_delay})"
            )
        return self

    @property
    def max_attempts(self) -> int:
        return 1 + self.max_retries


class RequestOptions(BaseModel):
    """Per-call options recognised by :class:`~dashfeed.client.http.ApiClient`."""

    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = Field(default=None, gt=0)
    retries: RetryPolicy | None = None
    params: dict[str, str | int] | None = None
    cache_key: str | None = None
    cache_ttl: float | None = Field(default=None, ge=0)
    use_cache: bool = True

    model_config = ConfigDict(frozen=True)


class RequestResult(BaseModel):
    """Uniform envelope returned by every client call.

    Exactly one of these holds: ``success`` with ``error`` unset, or a
    failure with a non-empty ``error`` and no ``data``.  ``cached`` is only
    set for GET requests.
    """

    success: bool
    data: Any = None
    error: str | None = None
    cached: bool | None = None
    status_code: int | None = None
    attempts: int = 0

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_envelope(self) -> RequestResult:
        if self.success and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.success:
            if not self.error:
                raise ValueError("a failed result must carry an error message")
            if self.data is not None:
                raise ValueError("a failed result cannot carry data")
        return self

    @classmethod
    def ok(
        cls,
        data: Any,
        *,
        cached: bool | None = None,
        status_code: int | None = None,
        attempts: int = 0,
    ) -> RequestResult:
        return cls(
            success=True,
            data=data,
            cached=cached,
            status_code=status_code,
            attempts=attempts,
        )

    @classmethod
    def fail(
        cls,
        error: str,
        *,
        status_code: int | None = None,
        attempts: int = 0,
    ) -> RequestResult:
        return cls(
            success=False,
            error=error or "Unknown error",
            status_code=status_code,
            attempts=attempts,
        )

    def with_data(self, data: Any) -> RequestResult:
        """Return a copy carrying *data*.  Only valid on a successful result."""
        if not self.success:
            raise ValueError("cannot attach data to a failed result")
        return self.model_copy(update={"data": data})
