from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup

_cdata_re = re.compile(r"<!\[CDATA\[|\]\]>")
_whitespace_re = re.compile(r"\s+")

MAX_DESCRIPTION_LENGTH = 200
ELLIPSIS = "..."


def clean_html_to_text(raw_html: str | None) -> str:
    """Clean an HTML fragment to normalized plain text.

    - Drop CDATA wrappers
    - Strip tags
    - Unescape HTML entities
    - Collapse whitespace
    """
    if not raw_html:
        return ""

    text = _cdata_re.sub("", raw_html)
    if "<" in text:
        text = BeautifulSoup(text, "html.parser").get_text()
    text = html.unescape(text)
    text = _whitespace_re.sub(" ", text)
    return text.strip()


def truncate(text: str, limit: int = MAX_DESCRIPTION_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def sanitize_description(raw: str | None) -> str:
    """Plain-text description of a feed item, at most 200 characters."""
    return truncate(clean_html_to_text(raw))
