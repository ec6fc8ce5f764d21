from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Literal, Optional, Sequence

from ..models import PostRecord, ReleaseRecord
from ..processors.recency import DEFAULT_WINDOW_DAYS, absolute_date, filter_recent, relative_label

RULE = "=" * 70

ReleaseOrder = Literal["date", "name"]


def _window_phrase(window_days: int) -> str:
    return f"in the last {window_days} days"


def render_header(title: str, *, window_days: int = DEFAULT_WINDOW_DAYS) -> List[str]:
    return ["", RULE, "", f"{title} (Last {window_days} Days)", "", RULE]


def format_release(release: ReleaseRecord, now: Optional[datetime] = None) -> List[str]:
    suffix = " (Pre-release)" if release.prerelease else ""
    return [
        f"{release.name} {release.version}{suffix}",
        f"  Released: {absolute_date(release.published_at)} ({relative_label(release.published_at, now)})",
        f"  URL: {release.url}",
    ]


def format_post(post: PostRecord, now: Optional[datetime] = None) -> List[str]:
    lines = [
        post.title,
        f"  Feed: {post.feed_name}",
        f"  Published: {absolute_date(post.published_at)} ({relative_label(post.published_at, now)})",
    ]
    if post.categories:
        lines.append(f"  Categories: {', '.join(post.categories)}")
    if post.description:
        lines.append(f"  Description: {post.description}")
    lines.append(f"  URL: {post.link}")
    return lines


def render_release_section(
    title: str,
    releases: Sequence[ReleaseRecord],
    *,
    now: Optional[datetime] = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
    order: ReleaseOrder = "date",
) -> List[str]:
    """Lines for one group of releases, limited to the recency window.

    ``order="date"`` lists newest first; ``order="name"`` sorts by display name.
    """
    recent = filter_recent(releases, now, window_days)
    if order == "name":
        recent.sort(key=lambda r: r.name.lower())
    else:
        recent.sort(key=lambda r: r.published_at, reverse=True)

    lines = ["", title, ""]
    if not recent:
        lines.append(f"  No releases {_window_phrase(window_days)}")
        return lines
    for release in recent:
        lines.extend(format_release(release, now))
        lines.append("")
    return lines


def render_post_section(
    posts: Sequence[PostRecord],
    *,
    now: Optional[datetime] = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> List[str]:
    recent = sorted(filter_recent(posts, now, window_days), key=lambda p: p.title.lower())
    lines = ["", "BLOG POSTS", ""]
    if not recent:
        lines.append(f"  No posts {_window_phrase(window_days)}")
        return lines
    for post in recent:
        lines.extend(format_post(post, now))
        lines.append("")
    return lines


@dataclass(slots=True)
class SectionStats:
    label: str
    checked: int
    found: int
    recent: int


def render_statistics(stats: Sequence[SectionStats], *, window_days: int = DEFAULT_WINDOW_DAYS) -> List[str]:
    lines = ["", RULE, "", "STATISTICS", ""]
    for s in stats:
        lines.append(f"  {s.label}: {s.checked} checked, {s.found} found, {s.recent} {_window_phrase(window_days)}")
    total = sum(s.recent for s in stats)
    lines.append(f"  Total: {total} {_window_phrase(window_days)}")
    return lines
