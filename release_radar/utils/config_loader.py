from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple
from urllib.parse import urlparse

import yaml

from ..models import Catalog, FeedEntry, RepoEntry


class ConfigError(Exception):
    """Raised when the catalog file is invalid or missing required fields."""


DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "config" / "catalog.yaml"

REPO_SECTIONS = ("execution", "consensus", "dev_tools")
REPO_FIELDS = ("name", "owner", "repo")
FEED_FIELDS = ("name", "url")


def _require_fields(entry: Any, fields: Tuple[str, ...], section: str) -> None:
    if not isinstance(entry, dict):
        raise ConfigError(f"Each entry in '{section}' must be a mapping, got: {type(entry).__name__}")
    missing = [f for f in fields if f not in entry]
    if missing:
        raise ConfigError(f"Missing required fields: {missing} in '{section}' entry {entry}")
    blank = [f for f in fields if not str(entry[f]).strip()]
    if blank:
        raise ConfigError(f"Empty fields: {blank} in '{section}' entry {entry}")


def _section(data: dict, key: str) -> List[Any]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigError(f"'{key}' must be a list in the catalog")
    return raw


def _coerce_repo(entry: dict, section: str) -> RepoEntry:
    _require_fields(entry, REPO_FIELDS, section)
    return RepoEntry(
        name=str(entry["name"]).strip(),
        owner=str(entry["owner"]).strip(),
        repo=str(entry["repo"]).strip(),
    )


def _coerce_feed(entry: dict) -> FeedEntry:
    _require_fields(entry, FEED_FIELDS, "feeds")
    url = str(entry["url"]).strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid feed URL '{url}'. Must be absolute http(s) URL.")
    return FeedEntry(name=str(entry["name"]).strip(), url=url)


def parse_catalog(data: Any) -> Catalog:
    """Build a :class:`Catalog` from already-parsed YAML.

    Structure:
      - ``execution``, ``consensus``, ``dev_tools``: lists of
        ``{name, owner, repo}``
      - ``feeds``: list of ``{name, url}``

    Missing sections are empty. Unknown top-level keys are ignored.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Catalog must be a mapping at the top level")

    repos = {
        key: tuple(_coerce_repo(item, key) for item in _section(data, key))
        for key in REPO_SECTIONS
    }
    feeds = tuple(_coerce_feed(item) for item in _section(data, "feeds"))
    return Catalog(feeds=feeds, **repos)


def load_catalog(path: Path | str | None = None) -> Catalog:
    """Load the catalog YAML at ``path``, or the packaged default catalog."""
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    if not catalog_path.exists():
        raise ConfigError(f"Catalog file not found: {catalog_path}")

    try:
        with catalog_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Catalog file {catalog_path} is not valid YAML: {exc}") from exc
    return parse_catalog(data)
