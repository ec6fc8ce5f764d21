from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from .fetchers import FeedFetcher, FetchError, GitHubFetcher, resolve_feed_posts, resolve_latest_release
from .models import FeedEntry, PostRecord, ReleaseRecord, RepoEntry
from .processors.recency import absolute_date
from .utils.logging import get_logger
from .utils.settings import RadarSettings

logger = get_logger("radar.orchestrator")


@dataclass(slots=True)
class FeedBatch:
    posts: List[PostRecord] = field(default_factory=list)
    feeds_checked: int = 0
    failures: Dict[str, str] = field(default_factory=dict)


class Orchestrator:
    """Sequential batch driver over catalog entries.

    Entries are resolved one at a time in catalog order, with a fixed pause
    after each one to stay clear of the API rate limit. One entry's failure
    never stops the batch.
    """

    def __init__(
        self,
        *,
        settings: Optional[RadarSettings] = None,
        release_fetcher: Optional[GitHubFetcher] = None,
        feed_fetcher: Optional[FeedFetcher] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings or RadarSettings()
        self.release_fetcher = release_fetcher or GitHubFetcher(
            token=self.settings.github_token,
            timeout=self.settings.http_timeout,
            api_base=self.settings.api_base,
        )
        self.feed_fetcher = feed_fetcher or FeedFetcher(timeout=self.settings.http_timeout)
        self._sleep = sleep

    def _pause(self) -> None:
        if self.settings.request_delay > 0:
            self._sleep(self.settings.request_delay)

    def collect_releases(self, entries: Iterable[RepoEntry]) -> List[ReleaseRecord]:
        releases: List[ReleaseRecord] = []
        for entry in entries:
            logger.info("Checking %s (%s)...", entry.name, entry.full_name)
            release = resolve_latest_release(entry, self.release_fetcher)
            if release is not None:
                releases.append(release)
                logger.info("Found %s %s (%s)", entry.name, release.version, absolute_date(release.published_at))
            else:
                logger.info("No release found for %s", entry.name)
            self._pause()
        return releases

    def collect_posts(self, feeds: Iterable[FeedEntry]) -> FeedBatch:
        batch = FeedBatch()
        for feed in feeds:
            batch.feeds_checked += 1
            logger.info("Checking %s...", feed.name)
            try:
                batch.posts.extend(resolve_feed_posts(feed, self.feed_fetcher))
            except FetchError as exc:
                logger.error("Error fetching feed %s: %s", feed.name, exc)
                batch.failures[feed.name] = str(exc)
            self._pause()
        return batch
