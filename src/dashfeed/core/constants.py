# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and default durations shared across the client."""

from enum import StrEnum


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class FeedType(StrEnum):
    NEWS = "news"
    MOVIES = "movies"
    SOCIAL = "socialPosts"


JSON_CONTENT_TYPE = "application/json"

# All durations are in seconds.
DEFAULT_CACHE_TTL = 300.0
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_BASE_DELAY = 1.0
DEFAULT_MAX_DELAY = 10.0
DEFAULT_MAX_RETRIES = 0
