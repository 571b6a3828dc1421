# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Composition root: one API client shared by every provider."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dashfeed.cache.memory import ResponseCache
from dashfeed.client.http import ApiClient
from dashfeed.client.models import RetryPolicy
from dashfeed.core.config import Settings, get_settings
from dashfeed.core.logging import setup_logging
from dashfeed.providers.movies import MovieService
from dashfeed.providers.news import NewsService
from dashfeed.providers.social import SocialService

logger = logging.getLogger("dashfeed.services")


@dataclass
class Services:
    """Everything the dashboard needs to fetch content."""

    client: ApiClient
    news: NewsService
    movies: MovieService
    social: SocialService

    async def aclose(self) -> None:
        await self.client.aclose()


def build_client(settings: Settings) -> ApiClient:
    cache = ResponseCache(
        default_ttl=settings.cache_ttl,
        max_size=settings.cache_max_size,
    )
    policy = RetryPolicy(
        max_retries=settings.retry_max_retries,
        base_delay=settings.retry_base_delay,
        max_delay=settings.retry_max_delay,
    )
    return ApiClient(
        timeout=settings.request_timeout,
        retry_policy=policy,
        cache=cache,
        user_agent=settings.user_agent,
    )


def build_services(
    settings: Settings | None = None,
    client: ApiClient | None = None,
    *,
    configure_logging: bool = False,
) -> Services:
    """Wire the providers around a single :class:`ApiClient`.

    A client may be passed in (e.g. one with a test transport); otherwise
    one is built from *settings*.  With *configure_logging* the package
    logger is set up from ``log_level`` and ``log_format`` first.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)
    client = client or build_client(settings)
    logger.info(
        "Services built (timeout=%ss, cache_ttl=%ss, retries=%d)",
        settings.request_timeout,
        settings.cache_ttl,
        settings.retry_max_retries,
    )
    return Services(
        client=client,
        news=NewsService(client, settings.news_api_key, settings.news_base_url),
        movies=MovieService(
            client,
            settings.tmdb_api_key,
            settings.tmdb_base_url,
            settings.tmdb_image_base_url,
        ),
        social=SocialService(),
    )
