from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

from ..fetchers.http import DEFAULT_API_BASE
from ..processors.recency import DEFAULT_WINDOW_DAYS

T = TypeVar("T")


def _env_number(env: Mapping[str, str], key: str, cast: Callable[[str], T], default: T) -> T:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        return default


@dataclass(slots=True)
class RadarSettings:
    github_token: Optional[str] = None
    window_days: int = DEFAULT_WINDOW_DAYS
    request_delay: float = 0.5
    http_timeout: float = 30.0
    api_base: str = DEFAULT_API_BASE

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "RadarSettings":
        """Read settings once from the environment (after ``.env`` is loaded)."""
        env = os.environ if env is None else env
        token = (env.get("GITHUB_TOKEN") or "").strip() or None
        return cls(
            github_token=token,
            window_days=_env_number(env, "RADAR_WINDOW_DAYS", int, DEFAULT_WINDOW_DAYS),
            request_delay=_env_number(env, "RADAR_REQUEST_DELAY", float, 0.5),
            http_timeout=_env_number(env, "RADAR_HTTP_TIMEOUT", float, 30.0),
            api_base=(env.get("RADAR_API_BASE") or "").strip() or DEFAULT_API_BASE,
        )
