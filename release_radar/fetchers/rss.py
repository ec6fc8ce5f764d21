from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional

import feedparser
import requests

from ..models import FeedEntry, PostRecord
from ..processors.normalize import sanitize_description
from ..utils.logging import get_logger
from .errors import MalformedResponse
from .http import ABSENT, HttpFetcher

logger = get_logger("radar.fetchers.rss")

FEED_ACCEPT = "application/rss+xml, application/xml;q=0.9, text/xml;q=0.8, */*;q=0.5"


class FeedFetcher(HttpFetcher):
    """Unauthenticated fetcher that parses RSS/Atom bodies with ``feedparser``."""

    accept = FEED_ACCEPT

    def __init__(self, **kwargs: Any) -> None:
        kwargs.pop("token", None)
        super().__init__(**kwargs)

    def parse_body(self, response: requests.Response, url: str) -> Any:
        parsed = feedparser.parse(response.content)
        # feedparser sets bozo on recoverable errors too; only fail when nothing came through
        if getattr(parsed, "bozo", False) and not parsed.entries and not parsed.feed:
            exc = getattr(parsed, "bozo_exception", None)
            raise MalformedResponse(url=url, reason=f"invalid feed: {exc}") from exc
        return parsed


def _parse_datetime(entry: dict) -> Optional[datetime]:
    # feedparser normalizes dates to UTC struct_time; None when unparseable
    for key in ("published_parsed", "updated_parsed"):
        tm = entry.get(key)
        if tm:
            try:
                return datetime(*tm[:6], tzinfo=timezone.utc)
            except (TypeError, ValueError):
                return None
    return None


def _categories(entry: dict) -> tuple[str, ...]:
    terms = []
    for tag in entry.get("tags") or []:
        term = tag.get("term") if isinstance(tag, dict) else None
        if term:
            terms.append(str(term))
    return tuple(terms)


def posts_from_feed(feed: FeedEntry, parsed: Any) -> List[PostRecord]:
    """Map parsed feed entries to records, dropping those without a usable date."""
    posts: List[PostRecord] = []
    dropped = 0
    for entry in getattr(parsed, "entries", []) or []:
        published = _parse_datetime(entry)
        if published is None:
            dropped += 1
            continue
        posts.append(
            PostRecord(
                feed_name=feed.name,
                title=entry.get("title") or "Untitled",
                link=entry.get("link") or "",
                published_at=published,
                description=sanitize_description(entry.get("summary") or entry.get("description")),
                categories=_categories(entry),
            )
        )
    if dropped:
        logger.debug("Dropped %d undated item(s) from %s", dropped, feed.name)
    return posts


def resolve_feed_posts(feed: FeedEntry, fetcher: FeedFetcher) -> List[PostRecord]:
    """Fetch and parse the posts of one feed.

    Fetch failures propagate; the caller decides whether to skip the feed.
    A feed URL that answers 404 has no posts.
    """
    logger.debug("Fetching RSS from %s", feed.url)
    parsed = fetcher.fetch(feed.url)
    if parsed is ABSENT:
        logger.warning("Feed %s not found at %s", feed.name, feed.url)
        return []
    posts = posts_from_feed(feed, parsed)
    logger.info("Fetched %d post(s) from %s", len(posts), feed.name)
    return posts
