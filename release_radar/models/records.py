from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True, slots=True)
class ReleaseRecord:
    name: str
    version: str
    published_at: datetime
    url: str
    prerelease: bool = False


@dataclass(frozen=True, slots=True)
class PostRecord:
    feed_name: str
    title: str
    link: str
    published_at: datetime
    description: str = ""
    categories: Tuple[str, ...] = field(default_factory=tuple)
