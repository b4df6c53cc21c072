"""
Chunk record codec.

This module implements a PNG-style chunk record: a length-prefixed,
type-tagged payload protected by a CRC-32 trailer.
"""

from .chunk import Chunk
from .crc import calculate_crc32
from .exceptions import (
    ChunkIntegrityError,
    ChunkStructuralError,
    ChunkwireError,
    CrcMismatchError,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidTypeTagError,
    PayloadEncodingError,
    PayloadTooLargeError,
    TooShortError,
    TrailingBytesError,
    TruncatedChunkError,
    TypeTagError,
)
from .type_tag import TypeTag

__all__ = [
    "Chunk",
    "TypeTag",
    "calculate_crc32",
    "ChunkwireError",
    "TypeTagError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "ChunkStructuralError",
    "TooShortError",
    "InvalidTypeTagError",
    "TruncatedChunkError",
    "PayloadTooLargeError",
    "TrailingBytesError",
    "ChunkIntegrityError",
    "CrcMismatchError",
    "PayloadEncodingError",
]
