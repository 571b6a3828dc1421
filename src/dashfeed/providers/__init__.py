# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Content providers built on the shared API client."""

from dashfeed.providers.models import ContentItem
from dashfeed.providers.movies import MovieService
from dashfeed.providers.news import NewsService
from dashfeed.providers.social import SocialService

__all__ = ["ContentItem", "MovieService", "NewsService", "SocialService"]
