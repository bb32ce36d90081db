"""
Settings Tests
"""

import pytest
from pydantic import ValidationError

from codegraph_outline.config import Settings
from codegraph_outline.models import MAX_OUTLINE_DEPTH


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CODEGRAPH_OUTLINE_LANGUAGE", raising=False)
        settings = Settings(_env_file=None)

        assert settings.language == "rust"
        assert settings.detect_parse_errors is True
        assert settings.indent == 2
        assert settings.max_depth == MAX_OUTLINE_DEPTH
        assert settings.end_command == "end"
        assert settings.log_file is None

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("CODEGRAPH_OUTLINE_DETECT_PARSE_ERRORS", "false")
        monkeypatch.setenv("CODEGRAPH_OUTLINE_LOG_FORMAT", "json")
        monkeypatch.setenv("CODEGRAPH_OUTLINE_MAX_DEPTH", "50")

        settings = Settings(_env_file=None)

        assert settings.detect_parse_errors is False
        assert settings.log_format == "json"
        assert settings.max_depth == 50

    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_depth=0)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_depth=MAX_OUTLINE_DEPTH + 1)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")
