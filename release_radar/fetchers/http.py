from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from .errors import (
    AuthenticationFailed,
    MalformedResponse,
    RateLimitExceeded,
    TooManyRedirects,
    TransportError,
    UnexpectedStatus,
)

DEFAULT_API_BASE = "https://api.github.com"
USER_AGENT = "Ethereum-Release-Checker"
GITHUB_ACCEPT = "application/vnd.github.v3+json"

REDIRECT_STATUSES = frozenset({301, 302, 307, 308})
MAX_REDIRECTS = 5

# Fine-grained tokens take the Bearer scheme, classic ones the legacy "token" scheme.
FINE_GRAINED_PREFIX = "github_pat_"


class Absent(enum.Enum):
    """Sentinel type for a resource the server reports as not found."""

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT


def authorization_header(token: str) -> str:
    if token.startswith(FINE_GRAINED_PREFIX):
        return f"Bearer {token}"
    return f"token {token}"


def _rate_limit_details(headers: Any) -> tuple[Optional[int], Optional[datetime]]:
    remaining: Optional[int] = None
    reset_at: Optional[datetime] = None
    try:
        raw = headers.get("X-RateLimit-Remaining")
        if raw is not None:
            remaining = int(raw)
    except (TypeError, ValueError):
        remaining = None
    try:
        raw = headers.get("X-RateLimit-Reset")
        if raw is not None:
            reset_at = datetime.fromtimestamp(int(raw), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        reset_at = None
    return remaining, reset_at


class HttpFetcher:
    """One logical GET with manual redirect following and auth downgrade.

    ``fetch`` returns the parsed body of a 200 response, or ``ABSENT`` for a
    404, and raises a :class:`~release_radar.fetchers.errors.FetchError`
    subclass for everything else. Redirects are followed here rather than by
    ``requests`` so the hop count and the credential flag stay under our
    control. A 401 on a credentialed request is retried exactly once without
    the ``Authorization`` header.

    The fetcher does not log; callers decide what an outcome is worth.
    Subclasses choose the ``Accept`` header and how a body is parsed.
    """

    accept = "*/*"

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.token = token or None
        self.session = session or requests.Session()
        self.timeout = timeout
        self.user_agent = user_agent

    def build_headers(self, use_credential: bool = True) -> Dict[str, str]:
        headers = {"User-Agent": self.user_agent, "Accept": self.accept}
        if use_credential and self.token:
            headers["Authorization"] = authorization_header(self.token)
        return headers

    def parse_body(self, response: requests.Response, url: str) -> Any:
        raise NotImplementedError

    def fetch(self, url: str, redirect_count: int = 0, use_credential: bool = True) -> Any:
        if redirect_count > MAX_REDIRECTS:
            raise TooManyRedirects(url=url, limit=MAX_REDIRECTS)

        try:
            resp = self.session.get(
                url,
                headers=self.build_headers(use_credential),
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            raise TransportError(url=url, reason=str(exc)) from exc

        status = resp.status_code
        if status in REDIRECT_STATUSES:
            location = resp.headers.get("Location")
            if location:
                return self.fetch(urljoin(url, location), redirect_count + 1, use_credential)

        if status == 200:
            return self.parse_body(resp, url)
        if status == 404:
            return ABSENT
        if status == 401:
            if use_credential and self.token:
                return self.fetch(url, redirect_count, use_credential=False)
            raise AuthenticationFailed(url=url)
        if status == 403:
            remaining, reset_at = _rate_limit_details(resp.headers)
            raise RateLimitExceeded(url=url, remaining=remaining, reset_at=reset_at)
        raise UnexpectedStatus(url=url, status_code=status, body=resp.text)


class GitHubFetcher(HttpFetcher):
    """Fetcher for the GitHub REST API, parsing JSON bodies."""

    accept = GITHUB_ACCEPT

    def __init__(self, *, api_base: str = DEFAULT_API_BASE, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.api_base = api_base.rstrip("/")

    def latest_release_url(self, owner: str, repo: str) -> str:
        return f"{self.api_base}/repos/{owner}/{repo}/releases/latest"

    def parse_body(self, response: requests.Response, url: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponse(url=url, reason=f"invalid JSON: {exc}") from exc
