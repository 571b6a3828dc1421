# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for dashfeed."""


class DashfeedError(Exception):
    """Base exception for all dashfeed errors."""


class ConfigurationError(DashfeedError):
    """Invalid or missing configuration."""


class RequestError(DashfeedError):
    """A request attempt failed."""


class HttpStatusError(RequestError):
    """The server answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return not 400 <= self.status_code < 500


class DecodeError(RequestError):
    """The response body could not be decoded as JSON."""
