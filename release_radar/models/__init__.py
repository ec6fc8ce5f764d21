"""Typed models used across the application."""

from .catalog import Catalog, FeedEntry, RepoEntry
from .records import PostRecord, ReleaseRecord

__all__ = ["Catalog", "FeedEntry", "RepoEntry", "PostRecord", "ReleaseRecord"]
