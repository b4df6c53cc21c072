"""
chunkwire - PNG-style chunk records.

Wraps arbitrary payloads into self-describing records: a 4-byte type tag,
a length-prefixed payload and a CRC-32 trailer.
"""

from loguru import logger

from .protocol import Chunk, ChunkwireError, TypeTag

__version__ = "0.1.0"

# Library stays silent until setup_logging() is called
logger.disable(__name__)

__all__ = ["Chunk", "ChunkwireError", "TypeTag"]
