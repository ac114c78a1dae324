"""
Test configuration management with Pydantic settings.
"""

import pytest
from pydantic import ValidationError

from artefact_sources.config import ArtefactSettings, get_settings, settings
from tests.conftest import FULL_HASH


class TestArtefactSettings:
    """Test the main configuration class."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        for name in ("CRAWL_MAX_DEPTH", "LISTING_HOSTS", "LOG_LEVEL", "SOURCE_URLS"):
            monkeypatch.delenv(name, raising=False)

        config = ArtefactSettings(_env_file=None)

        assert config.crawl_max_depth == 3
        assert config.listing_hosts == ["devbuilds.gleec.com"]
        assert config.log_level == "INFO"
        assert config.source_urls == []
        assert config.cleanup_archive is True

    @pytest.mark.unit
    def test_environment_loading(self, monkeypatch):
        monkeypatch.setenv("SOURCE_URLS", '["https://devbuilds.gleec.com/"]')
        monkeypatch.setenv("API_BRANCH", "dev")
        monkeypatch.setenv("API_COMMIT_HASH", FULL_HASH)
        monkeypatch.setenv("LISTING_HOSTS", '["Mirror.Example.org", " "]')
        monkeypatch.setenv("CRAWL_MAX_DEPTH", "5")

        config = ArtefactSettings(_env_file=None)

        assert config.source_urls == ["https://devbuilds.gleec.com/"]
        assert config.listing_hosts == ["mirror.example.org"]
        assert config.crawl_max_depth == 5

        build_config = config.build_config()
        assert build_config.branch == "dev"
        assert build_config.api_commit_hash == FULL_HASH

    @pytest.mark.unit
    def test_field_validation(self):
        with pytest.raises(ValidationError):
            ArtefactSettings(_env_file=None, crawl_max_depth=0)

        with pytest.raises(ValidationError):
            ArtefactSettings(_env_file=None, log_level="chatty")

        assert ArtefactSettings(_env_file=None, log_level="debug").log_level == "DEBUG"

    @pytest.mark.unit
    def test_commit_hash_validation(self):
        with pytest.raises(ValueError, match="at least 7 characters"):
            ArtefactSettings(_env_file=None, api_commit_hash="abc")

    @pytest.mark.unit
    def test_log_directory_created(self, tmp_path):
        log_file = tmp_path / "logs" / "artefacts.log"

        ArtefactSettings(_env_file=None, log_file=str(log_file))

        assert log_file.parent.is_dir()

    @pytest.mark.unit
    def test_get_settings_is_cached(self):
        assert get_settings() is settings
