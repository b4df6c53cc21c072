"""Shared constants."""

DEFAULT_LOG_LEVEL = "INFO"

# Payload length is carried in an unsigned 32-bit field
MAX_WIRE_LENGTH = 0xFFFFFFFF
