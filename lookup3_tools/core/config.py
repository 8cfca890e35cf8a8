"""Configuration management for lookup3-tools."""

from __future__ import annotations

import codecs
import json
from pathlib import Path

import structlog
from pydantic import BaseModel, Field, field_validator

from lookup3_tools.core.types import DigestWidth, OutputFormat

logger = structlog.get_logger()

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "lookup3-tools"


class AppConfig(BaseModel):
    """Application configuration."""

    config_dir: Path = Field(
        default=DEFAULT_CONFIG_DIR,
        description="Configuration directory"
    )

    # Hash settings
    digest_width: DigestWidth = Field(
        default=DigestWidth.FULL,
        description="Digest width in bits (32 or 64)"
    )
    text_encoding: str = Field(
        default="utf-8",
        description="Encoding used to turn text arguments into bytes"
    )
    uppercase_hex: bool = Field(default=False, description="Print digests in uppercase hex")

    # Output settings
    output_format: str = Field(
        default="rich",
        description="Output format (rich, json, plain)"
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @classmethod
    def load(cls, config_file: Path | None = None) -> AppConfig:
        """Load configuration from file.

        Args:
            config_file: Path to config file, uses default if None

        Returns:
            Application configuration
        """
        if config_file is None:
            config_file = DEFAULT_CONFIG_DIR / "config.json"

        if config_file.exists():
            with open(config_file) as f:
                data = json.load(f)
                logger.debug("config_loaded", path=str(config_file))
                return cls(**data)

        # Return defaults
        return cls()

    def save(self, config_file: Path | None = None) -> None:
        """Save configuration to file.

        Args:
            config_file: Path to config file, uses default if None
        """
        if config_file is None:
            config_file = self.config_dir / "config.json"

        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, default=str)

        logger.info("config_saved", path=str(config_file))

    @field_validator("text_encoding")
    @classmethod
    def validate_text_encoding(cls, v: str) -> str:
        """Validate text encoding."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {v}") from e
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format."""
        valid_formats = {fmt.value for fmt in OutputFormat}
        if v not in valid_formats:
            raise ValueError(f"Invalid output format: {v}. Valid formats: {valid_formats}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Valid levels: {valid_levels}")
        return v
