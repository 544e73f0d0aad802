"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from library_api.config import Settings


class TestSettings:
    """Tests for Settings validation and computed properties."""

    def test_log_level_is_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(environment="qa")

    def test_default_page_size_bounds(self):
        with pytest.raises(ValidationError):
            Settings(default_page_size=0)

    def test_allowed_origins_list(self):
        settings = Settings(allowed_origins="http://a.test, http://b.test,")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_is_sqlite(self):
        assert Settings(database_url="sqlite:///./library.db").is_sqlite is True
        assert Settings(database_url="postgresql://u:p@db/library").is_sqlite is False
