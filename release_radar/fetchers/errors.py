"""Failure taxonomy for the HTTP fetch layer.

Every non-success outcome of a fetch, other than a 404, is raised as a
subclass of :class:`FetchError`. A 404 is not a failure; the fetcher returns
the ``ABSENT`` sentinel for it instead.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional


class FetchError(Exception):
    """Base class for failures raised while fetching a URL."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class AuthenticationFailed(FetchError):
    """Raised on 401 once the unauthenticated retry is spent or unavailable."""

    def __init__(self, *, url: str) -> None:
        super().__init__(
            "GitHub API authentication failed. Check GITHUB_TOKEN or remove it "
            "to use unauthenticated requests.",
            url=url,
        )


class RateLimitExceeded(FetchError):
    """Raised on 403. Never retried."""

    def __init__(
        self,
        *,
        url: str,
        remaining: Optional[int] = None,
        reset_at: Optional[datetime] = None,
    ) -> None:
        message = "GitHub API rate limit exceeded. Wait or use a valid GitHub token."
        if reset_at is not None:
            message += f" Limit resets at {reset_at.isoformat()}."
        super().__init__(message, url=url)
        self.remaining = remaining
        self.reset_at = reset_at


class TooManyRedirects(FetchError):
    def __init__(self, *, url: str, limit: int) -> None:
        super().__init__(f"Too many redirects (more than {limit})", url=url)
        self.limit = limit


class MalformedResponse(FetchError):
    """Raised when a 200 body cannot be parsed. The parse error is ``__cause__``."""

    def __init__(self, *, url: str, reason: str) -> None:
        super().__init__(f"Failed to parse response body: {reason}", url=url)


class UnexpectedStatus(FetchError):
    def __init__(self, *, url: str, status_code: int, body: str) -> None:
        super().__init__(f"GitHub API error: {status_code} - {body}", url=url)
        self.status_code = status_code
        self.body = body


class TransportError(FetchError):
    """Raised when the request never produced a response (DNS, refused, timeout)."""

    def __init__(self, *, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}", url=url)
