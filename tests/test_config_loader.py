"""Tests for catalog loading and validation."""

from __future__ import annotations

import pytest

from release_radar.models import FeedEntry, RepoEntry
from release_radar.utils.config_loader import ConfigError, load_catalog, parse_catalog


class TestDefaultCatalog:
    def test_bundled_catalog_loads(self):
        catalog = load_catalog()
        assert catalog.execution[0] == RepoEntry(name="Geth", owner="ethereum", repo="go-ethereum")
        assert len(catalog.execution) == 5
        assert len(catalog.consensus) == 6
        assert any(t.name == "Foundry" for t in catalog.dev_tools)
        assert catalog.feeds == (
            FeedEntry(name="Ethereum Foundation Blog", url="https://blog.ethereum.org/en/feed.xml"),
        )


class TestParseCatalog:
    def test_missing_sections_are_empty(self):
        catalog = parse_catalog({"execution": [{"name": "Geth", "owner": "ethereum", "repo": "go-ethereum"}]})
        assert catalog.consensus == ()
        assert catalog.dev_tools == ()
        assert catalog.feeds == ()

    def test_empty_document(self):
        assert parse_catalog(None).execution == ()

    def test_values_are_stripped(self):
        catalog = parse_catalog({"dev_tools": [{"name": " Foundry ", "owner": "foundry-rs ", "repo": " foundry"}]})
        assert catalog.dev_tools[0] == RepoEntry(name="Foundry", owner="foundry-rs", repo="foundry")

    def test_top_level_must_be_mapping(self):
        with pytest.raises(ConfigError):
            parse_catalog(["execution"])

    def test_section_must_be_list(self):
        with pytest.raises(ConfigError, match="must be a list"):
            parse_catalog({"consensus": {"name": "Prysm"}})

    def test_missing_repo_field(self):
        with pytest.raises(ConfigError, match="Missing required fields"):
            parse_catalog({"execution": [{"name": "Geth", "owner": "ethereum"}]})

    def test_blank_field(self):
        with pytest.raises(ConfigError, match="Empty fields"):
            parse_catalog({"execution": [{"name": "Geth", "owner": "", "repo": "go-ethereum"}]})

    def test_entry_must_be_mapping(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            parse_catalog({"dev_tools": ["foundry-rs/foundry"]})

    def test_feed_url_must_be_absolute_http(self):
        with pytest.raises(ConfigError, match="Invalid feed URL"):
            parse_catalog({"feeds": [{"name": "Blog", "url": "ftp://example.com/feed"}]})


class TestLoadCatalog:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_catalog(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("execution: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError, match="not valid YAML"):
            load_catalog(path)

    def test_custom_file(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "feeds:\n  - name: Example\n    url: https://example.com/rss\n",
            encoding="utf-8",
        )
        catalog = load_catalog(path)
        assert catalog.feeds == (FeedEntry(name="Example", url="https://example.com/rss"),)
        assert catalog.execution == ()
