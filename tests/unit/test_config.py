"""Comprehensive tests for lintscope.core.config: Settings and configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from lintscope.core.config import Settings, get_settings


class TestSettings:
    """Tests for the Settings Pydantic model."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)
        assert s.review_title == "AI Code Review"
        assert s.top_issues_limit == 5
        assert s.max_concurrent_analyzers == 5
        assert s.analysis_timeout_seconds is None
        assert s.log_level == "INFO"
        assert s.debug is False

    def test_custom_values(self):
        s = Settings(
            review_title="Nightly Review",
            top_issues_limit=10,
            max_concurrent_analyzers=2,
            analysis_timeout_seconds=30,
            log_level="DEBUG",
            debug=True,
        )
        assert s.review_title == "Nightly Review"
        assert s.top_issues_limit == 10
        assert s.max_concurrent_analyzers == 2
        assert s.analysis_timeout_seconds == 30.0
        assert s.log_level == "DEBUG"
        assert s.debug is True

    @pytest.mark.parametrize(
        "field, value",
        [
            ("top_issues_limit", 0),
            ("max_concurrent_analyzers", 0),
            ("analysis_timeout_seconds", 0),
            ("analysis_timeout_seconds", -1.5),
        ],
    )
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            Settings(**{field: value})

    def test_from_env_vars(self):
        env = {
            "LINTSCOPE_REVIEW_TITLE": "Env Review",
            "LINTSCOPE_TOP_ISSUES_LIMIT": "3",
            "LINTSCOPE_ANALYSIS_TIMEOUT_SECONDS": "2.5",
        }
        with patch.dict(os.environ, env, clear=False):
            s = Settings(_env_file=None)
            assert s.review_title == "Env Review"
            assert s.top_issues_limit == 3
            assert s.analysis_timeout_seconds == 2.5

    def test_env_prefix(self):
        """Ensure only LINTSCOPE_ prefixed vars are read."""
        env = {
            "LINTSCOPE_LOG_LEVEL": "WARNING",
            "REVIEW_TITLE": "Not Prefixed",  # Should NOT be picked up
        }
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)
            assert s.log_level == "WARNING"
            assert s.review_title == "AI Code Review"

    def test_env_case_insensitive(self):
        with patch.dict(os.environ, {"lintscope_debug": "true"}, clear=True):
            s = Settings(_env_file=None)
            assert s.debug is True


class TestGetSettings:
    """Tests for the get_settings factory."""

    def test_returns_settings_instance(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings()
            assert isinstance(settings, Settings)

    def test_invalid_env_raises(self):
        with patch.dict(os.environ, {"LINTSCOPE_TOP_ISSUES_LIMIT": "zero"}, clear=True):
            with pytest.raises(ValidationError):
                get_settings()
