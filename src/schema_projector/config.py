"""Configuration management for the schema projector."""

import json
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    format: Literal["json", "console"] = Field(default="json", description="Log format")
    file: Optional[Path] = Field(default=None, description="Log file path")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        return v.lower() if isinstance(v, str) else v


class Config(BaseSettings):
    """Main configuration. Loads from environment variables prefixed with SCHEMA_PROJECTOR_."""

    model_config = SettingsConfigDict(
        env_prefix='SCHEMA_PROJECTOR_',
        env_nested_delimiter='__', # e.g., SCHEMA_PROJECTOR_LOGGING__LEVEL
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    no_implicit_additional_properties: bool = Field(
        default=False,
        description="Emit additionalProperties: false for free-form object schemas instead of true.",
    )
    suppress_advisory_warnings: bool = Field(
        default=False,
        description="Silence advisory diagnostics such as the free-form object discouragement.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        Environment variables are not layered on top.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
