"""
Configuration management for the systems package.

Loads configuration from environment variables and .env file.
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class SystemsConfig(BaseSettings):
    """Configuration settings for the systems package."""

    # Extra legacy series, merged with the builtin table at import
    series_file: Optional[Path] = Field(None, description="YAML file with additional series -> base entries")

    # CLI defaults
    pinned_track: Optional[str] = Field(None, description="Track pinned by default for 'systems resolve'")
    output: str = Field("text", description="CLI output format: text or json")
    log_level: str = Field("WARNING", description="Logging level for the CLI")

    model_config = {
        "env_prefix": "SYSTEMS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: str) -> str:
        if v not in ["text", "json"]:
            raise ValueError(f"Invalid output format: {v}. Expected: text or json")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(f"Invalid log level: {v}")
        return level


# Global config instance - loaded from environment
config = SystemsConfig()
