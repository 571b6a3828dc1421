# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""dashfeed - Resilient content fetching for the personalised dashboard."""

__version__ = "0.1.0"

from dashfeed.cache import CacheEntry, ResponseCache
from dashfeed.client import ApiClient, RequestOptions, RequestResult, RetryPolicy
from dashfeed.services import Services, build_services

__all__ = [
    "ApiClient",
    "CacheEntry",
    "RequestOptions",
    "RequestResult",
    "ResponseCache",
    "RetryPolicy",
    "Services",
    "__version__",
    "build_services",
]
