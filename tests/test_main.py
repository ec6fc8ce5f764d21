"""Tests for the command-line entrypoint."""

from __future__ import annotations

import io
from unittest.mock import MagicMock, patch

from conftest import NOW
from release_radar.main import build_report, main, parse_args
from release_radar.models import Catalog, FeedEntry, PostRecord, ReleaseRecord, RepoEntry
from release_radar.orchestrator import FeedBatch
from release_radar.utils.settings import RadarSettings

CATALOG = Catalog(
    execution=(RepoEntry("Geth", "ethereum", "go-ethereum"),),
    consensus=(RepoEntry("Prysm", "prysmaticlabs", "prysm"),),
    dev_tools=(RepoEntry("Foundry", "foundry-rs", "foundry"),),
    feeds=(FeedEntry("EF Blog", "https://blog.ethereum.org/en/feed.xml"),),
)


def _fake_orchestrator():
    orch = MagicMock()
    orch.settings = RadarSettings()
    geth = ReleaseRecord("Geth", "v1.2.3", NOW, "https://x")
    orch.collect_releases.side_effect = lambda entries: [geth] if entries == CATALOG.execution else []
    orch.collect_posts.return_value = FeedBatch(
        posts=[PostRecord("EF Blog", "Hello", "https://blog/hello", NOW)], feeds_checked=1
    )
    return orch


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.check == "all"
        assert args.catalog is None
        assert args.window_days is None

    def test_overrides(self):
        args = parse_args(["--check", "dev-tools", "--window-days", "14", "--delay", "0"])
        assert args.check == "dev-tools"
        assert args.window_days == 14
        assert args.delay == 0.0


class TestBuildReport:
    def test_all_sections(self):
        orch = _fake_orchestrator()
        lines = build_report(orch, CATALOG, "all", now=NOW)

        assert "Geth v1.2.3" in lines
        assert "Hello" in lines
        assert "  No releases in the last 7 days" in lines
        assert lines[-1] == "  Total: 2 in the last 7 days"
        assert orch.collect_releases.call_count == 3

    def test_blog_only(self):
        orch = _fake_orchestrator()
        lines = build_report(orch, CATALOG, "blog", now=NOW)

        orch.collect_releases.assert_not_called()
        assert "BLOG POSTS" in lines


class TestMain:
    def test_bad_catalog_exits_non_zero(self, tmp_path):
        assert main(["--catalog", str(tmp_path / "missing.yaml")]) == 1

    @patch("release_radar.main.Orchestrator")
    def test_prints_report(self, mock_orch_cls, monkeypatch):
        monkeypatch.delenv("RADAR_WINDOW_DAYS", raising=False)
        orch = _fake_orchestrator()
        mock_orch_cls.return_value = orch
        out = io.StringIO()

        code = main(["--check", "clients", "--delay", "0", "--window-days", "3"], out=out)

        assert code == 0
        settings = mock_orch_cls.call_args.kwargs["settings"]
        assert settings.request_delay == 0.0
        assert settings.window_days == 3
        assert "CLIENT RELEASE SUMMARY (Last 7 Days)" in out.getvalue()
