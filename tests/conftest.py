"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

NOW = datetime(2024, 1, 8, 12, 0, 0, tzinfo=timezone.utc)


def make_response(status_code=200, *, json_body=None, headers=None, text="", content=b""):
    """Build a stand-in for ``requests.Response``."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = headers or {}
    resp.text = text
    resp.content = content
    if isinstance(json_body, Exception):
        resp.json.side_effect = json_body
    else:
        resp.json.return_value = json_body
    return resp


@pytest.fixture
def session():
    """A mock ``requests.Session``; set ``session.get.side_effect`` to a list of responses."""
    return MagicMock()


@pytest.fixture
def geth():
    from release_radar.models import RepoEntry

    return RepoEntry(name="Geth", owner="ethereum", repo="go-ethereum")


@pytest.fixture
def ef_blog():
    from release_radar.models import FeedEntry

    return FeedEntry(name="Ethereum Foundation Blog", url="https://blog.ethereum.org/en/feed.xml")


SAMPLE_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Ethereum Foundation Blog</title>
    <link>https://blog.ethereum.org</link>
    <description>News</description>
    <item>
      <title>Protocol update</title>
      <link>https://blog.ethereum.org/2024/01/07/protocol-update</link>
      <pubDate>Sun, 07 Jan 2024 10:00:00 GMT</pubDate>
      <description><![CDATA[<p>Hello <b>world</b></p>]]></description>
      <category>Protocol</category>
      <category>Research</category>
    </item>
    <item>
      <title>Undated note</title>
      <link>https://blog.ethereum.org/undated</link>
      <description>No date here</description>
    </item>
    <item>
      <title>Old announcement</title>
      <link>https://blog.ethereum.org/2023/06/01/old</link>
      <pubDate>Thu, 01 Jun 2023 08:30:00 GMT</pubDate>
    </item>
  </channel>
</rss>
"""
