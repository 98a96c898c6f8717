"""
Pydantic settings models for html-metadata.

All configuration is defined here with defaults that work without a
configuration file.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


FORMAT_KEYS = (
    "bePress",
    "coins",
    "dublinCore",
    "eprints",
    "general",
    "highwirePress",
    "jsonLd",
    "openGraph",
    "schemaOrg",
    "twitter",
    "prism",
)


class ParserSettings(BaseModel):
    """Document parsing and dialect selection."""

    backend: Literal["html.parser", "lxml", "html5lib"] = Field(
        default="html.parser",
        description="BeautifulSoup tree builder used to load documents",
    )
    max_workers: int = Field(
        default=4,
        ge=1,
        le=32,
        description="Number of dialect parsers run concurrently by parse_all",
    )
    formats: list[str] = Field(
        default_factory=list,
        description="Format keys to run. Empty means every registered dialect.",
    )

    @field_validator("formats", mode="before")
    @classmethod
    def split_formats(cls, v: str | list[str]) -> list[str]:
        """Accept a comma separated string (e.g. from the environment)."""
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("formats")
    @classmethod
    def check_formats(cls, v: list[str]) -> list[str]:
        """Reject unknown format keys."""
        unknown = [key for key in v if key not in FORMAT_KEYS]
        if unknown:
            raise ValueError(f"Unknown format keys: {', '.join(unknown)}")
        return v


class FetchSettings(BaseModel):
    """HTTP settings for the URL loader."""

    user_agent: str = Field(
        default="html-metadata/0.1 (+https://pypi.org/project/html-metadata/)",
        description="User-Agent header sent with requests",
    )
    timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=120.0,
        description="Timeout for a single request in seconds",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Whether to follow HTTP redirects",
    )
    max_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1024,
        description="Responses larger than this are rejected",
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Minimum logging level",
    )
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Log message format string",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log timestamps",
    )
    file_path: Path | None = Field(
        default=None,
        description="Path to log file. None means console only.",
    )
    max_file_size_mb: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum log file size before rotation",
    )
    backup_count: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Number of backup log files to keep",
    )
    log_to_console: bool = Field(
        default=True,
        description="Whether to output logs to console",
    )

    @field_validator("file_path", mode="before")
    @classmethod
    def convert_file_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class Settings(BaseModel):
    """
    Root configuration model containing all settings sections.

    Settings are loaded from YAML with environment variable overrides.
    """

    parser: ParserSettings = Field(
        default_factory=ParserSettings,
        description="Document parsing settings",
    )
    fetch: FetchSettings = Field(
        default_factory=FetchSettings,
        description="URL loader settings",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    model_config = {
        "extra": "forbid",
        "validate_default": True,
    }
