"""Pure helpers applied to fetched records before reporting."""

from .normalize import clean_html_to_text, sanitize_description, truncate
from .recency import (
    DEFAULT_WINDOW_DAYS,
    absolute_date,
    elapsed_days,
    filter_recent,
    is_recent,
    relative_label,
)

__all__ = [
    "DEFAULT_WINDOW_DAYS",
    "absolute_date",
    "clean_html_to_text",
    "elapsed_days",
    "filter_recent",
    "is_recent",
    "relative_label",
    "sanitize_description",
    "truncate",
]
