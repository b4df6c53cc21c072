"""Chunk record structure and wire codec."""

import struct
from dataclasses import dataclass

from ..common.config import ParseConfig
from ..common.log_base import get_logger
from .crc import calculate_crc32
from .exceptions import (
    CrcMismatchError,
    InvalidTypeTagError,
    PayloadEncodingError,
    PayloadTooLargeError,
    TooShortError,
    TrailingBytesError,
    TruncatedChunkError,
)
from .type_tag import TypeTag

logger = get_logger(__name__)


@dataclass(frozen=True)
class Chunk:
    """
    Length-prefixed, type-tagged, CRC-32 protected record.

    Wire layout (big-endian):

        Length(4) | Type(4) | Payload(Length) | CRC(4)

    The CRC covers the type tag and payload.
    """

    LENGTH_SIZE = 4
    TYPE_SIZE = TypeTag.SIZE
    CRC_SIZE = 4
    METADATA_SIZE = LENGTH_SIZE + TYPE_SIZE + CRC_SIZE

    type_tag: TypeTag
    payload: bytes = b""

    def __post_init__(self) -> None:
        """Normalize payload to immutable bytes."""
        if not isinstance(self.payload, bytes):
            object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def from_text(cls, type_text: str, payload_text: str) -> "Chunk":
        """Build a chunk from a tag string and a UTF-8 text payload."""
        return cls(TypeTag.from_text(type_text), payload_text.encode("utf-8"))

    @property
    def length(self) -> int:
        """Get the length of payload."""
        return len(self.payload)

    def crc(self) -> int:
        """Compute CRC-32 over type tag and payload."""
        return calculate_crc32(bytes(self.type_tag), self.payload)

    def payload_as_text(self) -> str:
        """
        Decode payload as UTF-8.

        Raises:
            PayloadEncodingError: If payload is not valid UTF-8
        """
        try:
            return self.payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PayloadEncodingError(f"Payload is not valid UTF-8: {e}") from e

    def serialize(self) -> bytes:
        """Encode chunk to wire bytes."""
        crc = self.crc()
        logger.debug(
            "Serializing chunk",
            type_tag=str(self.type_tag),
            length=self.length,
            crc=f"{crc:08x}",
        )
        return (
            struct.pack("!I", self.length)
            + bytes(self.type_tag)
            + self.payload
            + struct.pack("!I", crc)
        )

    @classmethod
    def parse(cls, data: bytes, config: ParseConfig | None = None) -> "Chunk":
        """
        Decode a single chunk from wire bytes.

        Args:
            data: Raw chunk bytes
            config: Parse policy, defaults to ParseConfig()

        Returns:
            Decoded chunk

        Raises:
            TooShortError: If data is shorter than the fixed overhead
            InvalidTypeTagError: If the type tag is not valid
            TruncatedChunkError: If the declared length runs past the input
            PayloadTooLargeError: If the declared length exceeds the limit
            TrailingBytesError: If bytes follow the CRC and the policy rejects them
            CrcMismatchError: If the stored CRC does not match
        """
        config = config or ParseConfig()
        data = bytes(data)

        if len(data) < cls.METADATA_SIZE:
            logger.debug("Chunk data too short", length=len(data))
            raise TooShortError(len(data), cls.METADATA_SIZE)

        (length,) = struct.unpack("!I", data[: cls.LENGTH_SIZE])
        type_end = cls.LENGTH_SIZE + cls.TYPE_SIZE
        type_tag = TypeTag.from_bytes(data[cls.LENGTH_SIZE : type_end])

        if not type_tag.is_valid():
            logger.debug("Invalid type tag", type_tag=type_tag.raw.hex())
            raise InvalidTypeTagError(type_tag.raw)

        if config.max_payload_length is not None and length > config.max_payload_length:
            logger.debug(
                "Declared length over limit",
                declared=length,
                limit=config.max_payload_length,
            )
            raise PayloadTooLargeError(length, config.max_payload_length)

        payload_end = type_end + length
        crc_end = payload_end + cls.CRC_SIZE
        if crc_end > len(data):
            available = len(data) - cls.METADATA_SIZE
            logger.debug("Chunk truncated", declared=length, available=available)
            raise TruncatedChunkError(length, available)

        trailing = len(data) - crc_end
        if trailing and config.reject_trailing_bytes:
            logger.debug("Trailing bytes after CRC", count=trailing)
            raise TrailingBytesError(trailing)

        chunk = cls(type_tag, data[type_end:payload_end])
        (expected_crc,) = struct.unpack("!I", data[payload_end:crc_end])
        actual_crc = chunk.crc()

        if expected_crc != actual_crc:
            logger.debug(
                "CRC validation failed",
                expected=f"{expected_crc:08x}",
                actual=f"{actual_crc:08x}",
            )
            raise CrcMismatchError(expected_crc, actual_crc)

        logger.debug(
            "Parsed chunk",
            type_tag=str(type_tag),
            length=length,
            trailing=trailing,
        )
        return chunk

    def describe(self) -> str:
        """Render a multi-line human readable summary."""
        return "\n".join([
            "Chunk {",
            f"  Length: {self.length}",
            f"  Type: {self.type_tag}",
            f"  Data: {len(self.payload)} bytes",
            f"  Crc: {self.crc()}",
            "}",
        ])

    def __str__(self) -> str:
        return self.describe()
