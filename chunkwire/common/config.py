"""Configuration management for chunkwire."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_LOG_LEVEL, MAX_WIRE_LENGTH


class ParseConfig(BaseModel):
    """Chunk parse policy."""

    # Ignore bytes after the CRC field unless this is set
    reject_trailing_bytes: bool = False
    max_payload_length: int | None = None

    @field_validator("max_payload_length")
    @classmethod
    def validate_max_payload_length(cls, v: int | None) -> int | None:
        """Validate max_payload_length fits the u32 length field."""
        if v is not None and not 0 <= v <= MAX_WIRE_LENGTH:
            raise ValueError(f"max_payload_length must be between 0 and {MAX_WIRE_LENGTH}")
        return v


class LogConfig(BaseModel):
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    colorize: bool = True
    file: Path | None = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"level must be one of: {valid_levels}")
        return v.upper()


class ChunkwireConfig(BaseModel):
    """Main chunkwire configuration."""

    parse: ParseConfig = Field(default_factory=ParseConfig)
    logging: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_file(cls, config_file: Path) -> "ChunkwireConfig":
        """Load configuration from TOML file."""
        import rtoml

        with open(config_file, encoding="utf-8") as f:
            config_data = rtoml.load(f)

        return cls(**config_data)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ChunkwireConfig":
        """Load configuration from dictionary."""
        return cls(**config_dict)

    def save_to_file(self, config_file: Path) -> None:
        """Save configuration to TOML file."""
        import rtoml

        with open(config_file, "w", encoding="utf-8") as f:
            rtoml.dump(self.model_dump(mode="json", exclude_none=True), f)
