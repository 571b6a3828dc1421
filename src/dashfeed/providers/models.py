# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pydantic model for feed items returned by the content providers."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dashfeed.core.constants import FeedType


class ContentItem(BaseModel):
    """One card in the dashboard feed.

    Provider-specific fields are optional; serialise with
    ``model_dump(by_alias=True)`` to get the camelCase shape the dashboard
    expects.  Every item type serialises its picture under ``urlToImage``,
    the news API key the dashboard cards read for all feeds.
    """

    id: str
    type: FeedType
    title: str = ""
    description: str | None = None
    url: str | None = None
    image: str | None = Field(default=None, alias="urlToImage")

    # News
    source: str | None = None
    published_at: str | None = Field(default=None, alias="publishedAt")
    category: str | None = None

    # Movies
    rating: float | None = None
    release_date: str | None = Field(default=None, alias="releaseDate")
    trending: bool = False

    # Social
    author: str | None = None
    platform: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    likes: int = 0
    shares: int = 0
    comments: int = 0
    hashtag: str | None = None

    query: str | None = None

    model_config = {"populate_by_name": True}
