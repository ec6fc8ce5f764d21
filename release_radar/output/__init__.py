"""Plain-text report rendering."""

from .report import (
    SectionStats,
    format_post,
    format_release,
    render_header,
    render_post_section,
    render_release_section,
    render_statistics,
)

__all__ = [
    "SectionStats",
    "format_post",
    "format_release",
    "render_header",
    "render_post_section",
    "render_release_section",
    "render_statistics",
]
