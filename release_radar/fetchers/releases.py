from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from ..models import ReleaseRecord, RepoEntry
from ..utils.logging import get_logger
from .errors import FetchError
from .http import ABSENT, GitHubFetcher

logger = get_logger("radar.fetchers.releases")

_REQUIRED_FIELDS = ("tag_name", "published_at", "html_url")


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as returned by the GitHub API."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def release_from_payload(entry: RepoEntry, payload: Any) -> Optional[ReleaseRecord]:
    """Map a ``releases/latest`` JSON object to a record.

    Returns ``None`` when a field needed for reporting is missing or unusable.
    """
    if not isinstance(payload, dict):
        logger.warning("Unexpected release payload for %s: %r", entry.name, type(payload).__name__)
        return None

    missing = [key for key in _REQUIRED_FIELDS if not payload.get(key)]
    if missing:
        logger.warning("Release for %s is missing %s; skipping", entry.name, ", ".join(missing))
        return None

    published_at = parse_timestamp(payload["published_at"])
    if published_at is None:
        logger.warning("Release for %s has unparseable published_at %r", entry.name, payload["published_at"])
        return None

    return ReleaseRecord(
        name=entry.name,
        version=str(payload["tag_name"]),
        published_at=published_at,
        url=str(payload["html_url"]),
        prerelease=bool(payload.get("prerelease", False)),
    )


def resolve_latest_release(entry: RepoEntry, fetcher: GitHubFetcher) -> Optional[ReleaseRecord]:
    """Latest release of ``entry``, or ``None``.

    Never raises a fetch failure: an unreachable or misbehaving repository is
    logged and reported as having no release so the batch keeps going.
    """
    url = fetcher.latest_release_url(entry.owner, entry.repo)
    try:
        payload = fetcher.fetch(url)
    except FetchError as exc:
        logger.error("Error fetching release for %s: %s", entry.name, exc)
        return None

    if payload is ABSENT:
        logger.debug("No release published for %s", entry.full_name)
        return None
    return release_from_payload(entry, payload)
