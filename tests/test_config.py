"""Tests for configuration models and profiles."""

from pathlib import Path

import pytest
from pagecut.models.config import EmptyPolicy, PagecutConfig, ProfileName
from pagecut.models.profiles import apply_profile
from pydantic import ValidationError


class TestPagecutConfig:
    """Tests for PagecutConfig."""

    def test_defaults(self):
        """Test the default settings."""
        config = PagecutConfig(url="https://foo.bar/a.html", selectors={"content": "main"})

        assert config.profile == ProfileName.CUSTOM
        assert config.output.format == "markdown"
        assert config.output.file is None
        assert config.output.heading is True
        assert config.output.citation is True
        assert config.output.empty_policy == EmptyPolicy.SKIP
        assert config.network.read_timeout == 30

    def test_both_sources_rejected(self):
        """Test that a URL and a file cannot both be given."""
        with pytest.raises(ValidationError, match="both supplied"):
            PagecutConfig(url="https://foo.bar/a.html", file=Path("-"), selectors={"content": "main"})

    def test_no_source_rejected(self):
        """Test that one source is required."""
        with pytest.raises(ValidationError, match="must be supplied"):
            PagecutConfig(selectors={"content": "main"})

    def test_tokens_need_url(self):
        """Test that output tokens are rejected for stdin sources."""
        with pytest.raises(ValidationError, match="need a URL"):
            PagecutConfig(file=Path("-"), selectors={"content": "main"}, output={"file": "<domain>/<slug>.md"})

    def test_tokens_with_url(self):
        """Test that output tokens are fine with a URL source."""
        config = PagecutConfig(url="https://foo.bar/a.html", output={"file": "<domain>/<slug>.md"})
        assert config.output.file == "<domain>/<slug>.md"

    def test_base_url_only_for_documents(self):
        """Test that base_url cannot be combined with a URL source."""
        with pytest.raises(ValidationError):
            PagecutConfig(url="https://foo.bar/a.html", base_url="https://foo.bar/")

    def test_frozen(self):
        """Test that the configuration cannot be changed after creation."""
        config = PagecutConfig(url="https://foo.bar/a.html")
        with pytest.raises(ValidationError):
            config.url = "https://other.site/"

    def test_unknown_fields_rejected(self):
        """Test that typos in settings are caught."""
        with pytest.raises(ValidationError):
            PagecutConfig(url="https://foo.bar/a.html", output={"fromat": "gfm"})

    def test_invalid_empty_policy(self):
        """Test that only known empty policies are accepted."""
        with pytest.raises(ValidationError):
            PagecutConfig(url="https://foo.bar/a.html", output={"empty_policy": "maybe"})

    def test_source_label(self):
        """Test the source identifier used in messages."""
        assert PagecutConfig(url="https://foo.bar/a.html").source_label == "https://foo.bar/a.html"
        assert PagecutConfig(file=Path("-")).source_label == "<stdin>"
        assert PagecutConfig(file=Path("page.html")).source_label == "page.html"

    def test_exclusion_precedence(self):
        """Test per-region exclusions over the shared one."""
        config = PagecutConfig(
            url="https://foo.bar/a.html",
            selectors={"content": "main", "exclude": ".ads", "title_exclude": "small"},
        )

        assert config.selectors.effective_title_exclude == "small"
        assert config.selectors.effective_content_exclude == ".ads"

    def test_yaml_round_trip(self):
        """Test YAML serialization and loading."""
        config = PagecutConfig(
            url="https://foo.bar/a.html",
            selectors={"content": "main", "title": "h1"},
            output={"format": "gfm", "empty_policy": "error"},
        )

        loaded = PagecutConfig.from_yaml(config.to_yaml())

        assert loaded.model_dump() == config.model_dump()

    def test_from_yaml_file(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / "pagecut.yaml"
        path.write_text("url: https://foo.bar/a.html\nselectors:\n  content: article\n")

        config = PagecutConfig.from_yaml_file(path)

        assert config.selectors.content == "article"


class TestProfiles:
    """Tests for profile application."""

    def test_appian_profile(self):
        """Test the Appian selectors and format."""
        config = apply_profile(PagecutConfig(url="https://docs.appian.com/a.html", profile=ProfileName.APPIAN))

        assert config.selectors.content == "div.page_content"
        assert config.selectors.exclude == ".rouge-gutter"
        assert config.output.format == "markdown_strict-raw_html+simple_tables"

    def test_explicit_values_win(self):
        """Test that user settings override the profile."""
        config = apply_profile(
            PagecutConfig(
                url="https://docs.appian.com/a.html",
                profile="appian",
                selectors={"content": "article"},
                output={"format": "gfm"},
            )
        )

        assert config.selectors.content == "article"
        assert config.selectors.exclude == ".rouge-gutter"
        assert config.output.format == "gfm"

    def test_custom_profile_unchanged(self):
        """Test that the custom profile leaves the config alone."""
        config = PagecutConfig(url="https://foo.bar/a.html")
        assert apply_profile(config) is config
