# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""News headlines and search backed by a NewsAPI-compatible endpoint."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from dashfeed.client.http import ApiClient
from dashfeed.client.models import RequestOptions, RequestResult
from dashfeed.core.constants import FeedType
from dashfeed.core.exceptions import ConfigurationError
from dashfeed.providers.models import ContentItem

logger = logging.getLogger("dashfeed.providers.news")

BASE_URL = "https://newsapi.org/v2"
HEADLINES_TTL = 300.0
SEARCH_TTL = 180.0


def _to_item(
    article: dict[str, Any],
    index: int,
    prefix: str,
    *,
    category: str | None = None,
    query: str | None = None,
) -> ContentItem:
    source = article.get("source")
    return ContentItem(
        id=article.get("url") or f"{prefix}-{index}",
        type=FeedType.NEWS,
        title=article.get("title") or "",
        description=article.get("description"),
        url=article.get("url"),
        image=article.get("urlToImage"),
        source=source.get("name") if isinstance(source, dict) else None,
        published_at=article.get("publishedAt"),
        category=category,
        query=query,
    )


def _articles(data: Any) -> list[dict[str, Any]]:
    if not isinstance(data, dict):
        return []
    return [a for a in data.get("articles") or [] if isinstance(a, dict)]


class NewsService:
    """Fetch news articles through the shared :class:`ApiClient`.

    Parameters
    ----------
    client:
        The process-wide API client.
    api_key:
        NewsAPI key.  Calls raise :class:`ConfigurationError` when empty.
    base_url:
        Override the API base URL (useful for testing).
    """

    def __init__(self, client: ApiClient, api_key: str = "", base_url: str = BASE_URL) -> None:
        self._client = client
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")

    def _require_key(self) -> str:
        if not self._api_key:
            raise ConfigurationError(
                "News API key is not configured. Set DASHFEED_NEWS_API_KEY."
            )
        return self._api_key

    async def top_headlines(
        self,
        categories: Sequence[str] = ("general",),
        country: str = "us",
        page_size: int = 20,
    ) -> RequestResult:
        """Top headlines for the given categories, cached for five minutes."""
        category = ",".join(categories)
        options = RequestOptions(
            params={
                "category": category,
                "country": country,
                "pageSize": page_size,
                "apiKey": self._require_key(),
            },
            cache_key=f"news-headlines-{category}-{country}-{page_size}",
            cache_ttl=HEADLINES_TTL,
        )
        result = await self._client.get(f"{self.base_url}/top-headlines", options)
        if not result.success:
            return result

        items = [
            _to_item(a, i, "news", category=category)
            for i, a in enumerate(_articles(result.data))
        ]
        logger.debug("Fetched %d headlines for %s/%s", len(items), category, country)
        return result.with_data(items)

    async def search(
        self,
        query: str,
        sort_by: str = "publishedAt",
        page_size: int = 20,
    ) -> RequestResult:
        """Full-text article search, cached for three minutes."""
        options = RequestOptions(
            params={
                "q": query,
                "sortBy": sort_by,
                "pageSize": page_size,
                "apiKey": self._require_key(),
            },
            cache_key=f"news-search-{query}-{sort_by}-{page_size}",
            cache_ttl=SEARCH_TTL,
        )
        result = await self._client.get(f"{self.base_url}/everything", options)
        if not result.success:
            return result

        items = [
            _to_item(a, i, "news-search", query=query)
            for i, a in enumerate(_articles(result.data))
        ]
        return result.with_data(items)
