from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, slots=True)
class RepoEntry:
    """A GitHub repository whose latest release is polled."""

    name: str
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class FeedEntry:
    """An RSS feed whose items are polled."""

    name: str
    url: str


@dataclass(frozen=True, slots=True)
class Catalog:
    execution: Tuple[RepoEntry, ...] = field(default_factory=tuple)
    consensus: Tuple[RepoEntry, ...] = field(default_factory=tuple)
    dev_tools: Tuple[RepoEntry, ...] = field(default_factory=tuple)
    feeds: Tuple[FeedEntry, ...] = field(default_factory=tuple)
