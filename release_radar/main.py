"""Command-line entrypoint for the Ethereum release radar.

This script orchestrates the high-level flow:
1) load settings (.env + environment) and the source catalog
2) poll each catalog entry sequentially
3) print a plain-text report of what was published inside the window
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional, Sequence, TextIO

from dotenv import load_dotenv

from .models import Catalog
from .orchestrator import Orchestrator
from .output import (
    SectionStats,
    render_header,
    render_post_section,
    render_release_section,
    render_statistics,
)
from .processors.recency import filter_recent
from .utils.config_loader import ConfigError, load_catalog
from .utils.logging import configure_logging, get_logger
from .utils.settings import RadarSettings

CHECKS = ("clients", "dev-tools", "blog", "all")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Report recent Ethereum client, dev tool and blog releases"
    )
    parser.add_argument(
        "--check",
        default="all",
        choices=CHECKS,
        help="Which part of the catalog to poll",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Path to a catalog YAML file (defaults to the bundled catalog)",
    )
    parser.add_argument(
        "--window-days",
        type=int,
        default=None,
        help="Report items published within this many days (default: RADAR_WINDOW_DAYS or 7)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to pause between requests (default: RADAR_REQUEST_DELAY or 0.5)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def build_report(
    orch: Orchestrator,
    catalog: Catalog,
    check: str,
    *,
    now: Optional[datetime] = None,
) -> List[str]:
    """Poll the selected catalog sections and render the report lines."""
    now = now or datetime.now(timezone.utc)
    window = orch.settings.window_days
    lines: List[str] = []
    stats: List[SectionStats] = []

    if check in ("clients", "all"):
        execution = orch.collect_releases(catalog.execution)
        consensus = orch.collect_releases(catalog.consensus)
        lines += render_header("CLIENT RELEASE SUMMARY", window_days=window)
        lines += render_release_section("EXECUTION LAYER CLIENTS", execution, now=now, window_days=window)
        lines += render_release_section("CONSENSUS LAYER CLIENTS", consensus, now=now, window_days=window)
        stats.append(SectionStats("Execution Layer Clients", len(catalog.execution), len(execution), len(filter_recent(execution, now, window))))
        stats.append(SectionStats("Consensus Layer Clients", len(catalog.consensus), len(consensus), len(filter_recent(consensus, now, window))))

    if check in ("dev-tools", "all"):
        tools = orch.collect_releases(catalog.dev_tools)
        lines += render_header("DEV TOOLS RELEASE SUMMARY", window_days=window)
        lines += render_release_section("DEVELOPMENT TOOLS", tools, now=now, window_days=window, order="name")
        stats.append(SectionStats("Development Tools", len(catalog.dev_tools), len(tools), len(filter_recent(tools, now, window))))

    if check in ("blog", "all"):
        batch = orch.collect_posts(catalog.feeds)
        lines += render_header("BLOG POSTS SUMMARY", window_days=window)
        lines += render_post_section(batch.posts, now=now, window_days=window)
        stats.append(SectionStats("Blog Posts", batch.feeds_checked, len(batch.posts), len(filter_recent(batch.posts, now, window))))

    lines += render_statistics(stats, window_days=window)
    return lines


def main(argv: Optional[Sequence[str]] = None, *, out: TextIO | None = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("radar.main")

    settings = RadarSettings.from_env()
    if args.window_days is not None:
        settings = replace(settings, window_days=args.window_days)
    if args.delay is not None:
        settings = replace(settings, request_delay=max(0.0, args.delay))
    if not settings.github_token:
        logger.info("GITHUB_TOKEN not set; using unauthenticated requests (lower rate limit)")

    try:
        catalog = load_catalog(args.catalog)
    except ConfigError as exc:
        logger.error("Failed to load catalog: %s", exc)
        return 1

    orch = Orchestrator(settings=settings)
    lines = build_report(orch, catalog, args.check)
    print("\n".join(lines), file=out or sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
