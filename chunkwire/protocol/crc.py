"""CRC-32 calculation utilities for the chunk codec."""

import zlib


def calculate_crc32(*parts: bytes) -> int:
    """
    Calculate CRC-32 checksum over the concatenation of parts.

    Args:
        parts: Byte strings to checksum, in order

    Returns:
        CRC-32 checksum as unsigned 32-bit integer
    """
    crc = 0
    for part in parts:
        crc = zlib.crc32(part, crc)
    return crc & 0xFFFFFFFF

