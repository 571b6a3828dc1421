# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Backoff computation and failure classification."""

from __future__ import annotations

import httpx

from dashfeed.client.models import RetryPolicy
from dashfeed.core.exceptions import DecodeError, HttpStatusError


def backoff_delay(attempt: int, policy: RetryPolicy) -> float:
    """Delay in seconds before retry *attempt* (0-indexed).

    ``min(base_delay * 2**attempt, max_delay)``
    """
    return min(policy.base_delay * (2**attempt), policy.max_delay)


def is_retryable(error: Exception) -> bool:
    """Return ``True`` if *error* is worth another attempt.

    Transport failures, 5xx responses and any other unexpected exception
    raised while sending are retried.  4xx responses and undecodable bodies
    are not.
    """
    if isinstance(error, HttpStatusError):
        return error.retryable
    return not isinstance(error, DecodeError)


def describe(error: Exception) -> str:
    """Human-readable message for *error*, falling back to its type name."""
    return str(error) or type(error).__name__


def check_status(response: httpx.Response) -> None:
    """Raise :class:`HttpStatusError` for non-2xx responses."""
    if response.is_success:
        return
    status = response.status_code
    reason = response.reason_phrase
    if 400 <= status < 500:
        kind = "Client error"
    elif status >= 500:
        kind = "Server error"
    else:
        kind = "HTTP error"
    msg = f"{kind}: {status} {reason}".rstrip()
    raise HttpStatusError(msg, status_code=status)
