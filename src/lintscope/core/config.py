"""Environment-driven configuration using Pydantic Settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lintscope.core.constants import DEFAULT_REVIEW_TITLE, DEFAULT_TOP_ISSUES


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All env vars are prefixed with ``LINTSCOPE_`` and can be set via a ``.env`` file.
    Analyzer thresholds are not configurable; see ``lintscope.core.constants``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LINTSCOPE_",
        case_sensitive=False,
    )

    # --- Feedback ---
    review_title: str = DEFAULT_REVIEW_TITLE
    top_issues_limit: int = Field(default=DEFAULT_TOP_ISSUES, ge=1)

    # --- Orchestration ---
    max_concurrent_analyzers: int = Field(default=5, ge=1)
    analysis_timeout_seconds: float | None = Field(default=None, gt=0)

    # --- Logging ---
    log_level: str = "INFO"
    debug: bool = False


def get_settings() -> Settings:
    """Factory that creates a Settings instance from the environment."""
    return Settings()
