# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""In-memory response caching for GET requests."""

from dashfeed.cache.memory import CacheEntry, CacheStats, ResponseCache

__all__ = ["CacheEntry", "CacheStats", "ResponseCache"]
