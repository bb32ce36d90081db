"""
Codegraph Outline Configuration

Centralized configuration management using pydantic-settings.
All environment variables use the CODEGRAPH_OUTLINE_ prefix.

Usage:
    from codegraph_outline.config import get_settings

    settings = get_settings()
    settings.language        # grammar used by the parser registry
    settings.max_depth       # deepest outline level kept
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from codegraph_outline.models import MAX_OUTLINE_DEPTH


class Settings(BaseSettings):
    """
    Codegraph Outline Settings

    Example: CODEGRAPH_OUTLINE_LOG_LEVEL=DEBUG, CODEGRAPH_OUTLINE_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CODEGRAPH_OUTLINE_",
        extra="ignore",
    )

    # Parsing
    language: str = Field(default="rust", description="tree-sitter grammar name")
    detect_parse_errors: bool = Field(
        default=True,
        description="Set parsingErrorsDetected from the parser's error flag (false keeps it always false)",
    )
    max_depth: int = Field(
        default=MAX_OUTLINE_DEPTH,
        ge=1,
        le=MAX_OUTLINE_DEPTH,
        description="Deepest node level kept; deeper subtrees are cut off below it",
    )

    # Serialization
    indent: int = Field(default=2, ge=0, description="Pretty-print indentation of the outline document")

    # Session protocol
    end_command: str = Field(default="end", description="Request line that ends a shell session")
    ready_marker: str = Field(default="hello", description="Text written to the flag file on startup")

    # Observability
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")
    log_format: Literal["console", "json"] = Field(default="console")
    log_file: str | None = Field(default=None, description="Write logs here instead of stderr")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
