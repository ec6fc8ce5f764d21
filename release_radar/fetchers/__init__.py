"""Fetch layer for GitHub release metadata and RSS feeds."""

from .errors import (
    AuthenticationFailed,
    FetchError,
    MalformedResponse,
    RateLimitExceeded,
    TooManyRedirects,
    TransportError,
    UnexpectedStatus,
)
from .http import ABSENT, GitHubFetcher, HttpFetcher
from .releases import resolve_latest_release
from .rss import FeedFetcher, resolve_feed_posts

__all__ = [
    "ABSENT",
    "AuthenticationFailed",
    "FeedFetcher",
    "FetchError",
    "GitHubFetcher",
    "HttpFetcher",
    "MalformedResponse",
    "RateLimitExceeded",
    "TooManyRedirects",
    "TransportError",
    "UnexpectedStatus",
    "resolve_feed_posts",
    "resolve_latest_release",
]
