# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Movie listings backed by the TMDB API."""

from __future__ import annotations

import logging
from typing import Any

from dashfeed.client.http import ApiClient
from dashfeed.client.models import RequestOptions, RequestResult
from dashfeed.core.constants import FeedType
from dashfeed.core.exceptions import ConfigurationError
from dashfeed.providers.models import ContentItem

logger = logging.getLogger("dashfeed.providers.movies")

BASE_URL = "https://api.themoviedb.org/3"
IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
MOVIE_PAGE_URL = "https://www.themoviedb.org/movie"

POPULAR_TTL = 600.0
SEARCH_TTL = 300.0
TRENDING_TTL = 3600.0

_TIME_WINDOWS = frozenset({"day", "week"})


class MovieService:
    """Fetch movie metadata through the shared :class:`ApiClient`."""

    def __init__(
        self,
        client: ApiClient,
        api_key: str = "",
        base_url: str = BASE_URL,
        image_base_url: str = IMAGE_BASE_URL,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.image_base_url = image_base_url.rstrip("/")

    def _require_key(self) -> str:
        if not self._api_key:
            raise ConfigurationError(
                "TMDB API key is not configured. Set DASHFEED_TMDB_API_KEY."
            )
        return self._api_key

    def _to_item(
        self,
        movie: dict[str, Any],
        prefix: str,
        *,
        query: str | None = None,
        trending: bool = False,
    ) -> ContentItem:
        poster = movie.get("poster_path")
        return ContentItem(
            id=f"{prefix}-{movie.get('id')}",
            type=FeedType.MOVIES,
            title=movie.get("title") or "",
            description=movie.get("overview"),
            url=f"{MOVIE_PAGE_URL}/{movie['id']}" if movie.get("id") is not None else None,
            image=f"{self.image_base_url}{poster}" if poster else None,
            rating=movie.get("vote_average"),
            release_date=movie.get("release_date"),
            trending=trending,
            query=query,
        )

    async def _fetch(
        self,
        path: str,
        params: dict[str, str | int],
        cache_key: str,
        ttl: float,
    ) -> tuple[RequestResult, list[dict[str, Any]]]:
        params = {"api_key": self._require_key(), **params}
        result = await self._client.get(
            f"{self.base_url}{path}",
            RequestOptions(params=params, cache_key=cache_key, cache_ttl=ttl),
        )
        movies: list[dict[str, Any]] = []
        if result.success and isinstance(result.data, dict):
            movies = [m for m in result.data.get("results") or [] if isinstance(m, dict)]
        return result, movies

    async def popular(self, page: int = 1) -> RequestResult:
        result, movies = await self._fetch(
            "/movie/popular", {"page": page}, f"tmdb-popular-{page}", POPULAR_TTL
        )
        if not result.success:
            return result
        return result.with_data([self._to_item(m, "movie") for m in movies])

    async def search(self, query: str, page: int = 1) -> RequestResult:
        result, movies = await self._fetch(
            "/search/movie",
            {"query": query, "page": page},
            f"tmdb-search-{query}-{page}",
            SEARCH_TTL,
        )
        if not result.success:
            return result
        return result.with_data(
            [self._to_item(m, "movie-search", query=query) for m in movies]
        )

    async def trending(self, time_window: str = "week") -> RequestResult:
        """Trending movies for ``"day"`` or ``"week"``, cached for an hour."""
        if time_window not in _TIME_WINDOWS:
            raise ValueError(f"time_window must be 'day' or 'week', got {time_window!r}")
        result, movies = await self._fetch(
            f"/trending/movie/{time_window}", {}, f"tmdb-trending-{time_window}", TRENDING_TTL
        )
        if not result.success:
            return result
        logger.debug("Fetched %d trending movies (%s)", len(movies), time_window)
        return result.with_data(
            [self._to_item(m, "movie-trending", trending=True) for m in movies]
        )
