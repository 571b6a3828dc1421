# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Mock social feed.

Real social platforms need per-user OAuth, so the dashboard ships with a
generated feed that has the same shape as the other providers.
"""

from __future__ import annotations

import asyncio
import random
from datetime import UTC, datetime, timedelta

from dashfeed.client.models import RequestResult
from dashfeed.core.constants import FeedType
from dashfeed.providers.models import ContentItem

PLATFORMS = ("twitter", "instagram", "facebook")
AUTHORS = ("TechGuru", "NewsDaily", "TrendWatcher", "SocialBuzz", "ContentCreator")
HASHTAGS = ("#tech", "#news", "#trending", "#social", "#content", "#digital", "#innovation")

_WEEK_SECONDS = 7 * 24 * 3600


class SocialService:
    """Generate social posts.

    Args:
        rng: Random source; pass a seeded ``random.Random`` for stable output.
        latency: Seconds to sleep per call, simulating a network round trip.
    """

    def __init__(self, rng: random.Random | None = None, latency: float = 0.0) -> None:
        self._rng = rng or random.Random()
        self._latency = latency

    def _generate(self, count: int) -> list[ContentItem]:
        now = datetime.now(UTC)
        batch = self._rng.getrandbits(32)
        posts = []
        for index in range(count):
            created = now - timedelta(seconds=self._rng.uniform(0, _WEEK_SECONDS))
            posts.append(
                ContentItem(
                    id=f"social-{batch:08x}-{index}",
                    type=FeedType.SOCIAL,
                    title=f"Social Post {index + 1}",
                    description=(
                        "This is a mock social media post about trending topics. "
                        f"{self._rng.choice(HASHTAGS)}"
                    ),
                    author=self._rng.choice(AUTHORS),
                    platform=self._rng.choice(PLATFORMS),
                    created_at=created.isoformat(),
                    likes=self._rng.randrange(1000),
                    shares=self._rng.randrange(100),
                    comments=self._rng.randrange(50),
                    image=f"https://picsum.photos/400/300?random={index}",
                    url=f"https://example.com/post/{index}",
                )
            )
        return posts

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

    async def trending(self, count: int = 20) -> RequestResult:
        await self._simulate_latency()
        return RequestResult.ok(self._generate(count), cached=False)

    async def search(self, query: str, count: int = 20) -> RequestResult:
        await self._simulate_latency()
        posts = [
            p.model_copy(
                update={"description": f"{p.description} - Related to: {query}", "query": query}
            )
            for p in self._generate(count)
        ]
        return RequestResult.ok(posts, cached=False)

    async def by_hashtag(self, hashtag: str, count: int = 20) -> RequestResult:
        await self._simulate_latency()
        posts = [
            p.model_copy(update={"description": f"{p.description} {hashtag}", "hashtag": hashtag})
            for p in self._generate(count)
        ]
        return RequestResult.ok(posts, cached=False)
