# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Resilient HTTP client: caching, retry with backoff, timeouts."""

from dashfeed.client.http import ApiClient
from dashfeed.client.models import RequestOptions, RequestResult, RetryPolicy

__all__ = ["ApiClient", "RequestOptions", "RequestResult", "RetryPolicy"]
