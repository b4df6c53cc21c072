"""Common utilities and configurations for chunkwire."""

from .config import ChunkwireConfig, LogConfig, ParseConfig
from .constants import DEFAULT_LOG_LEVEL, MAX_WIRE_LENGTH

__all__ = [
    "ChunkwireConfig",
    "LogConfig",
    "ParseConfig",
    "DEFAULT_LOG_LEVEL",
    "MAX_WIRE_LENGTH",
]
