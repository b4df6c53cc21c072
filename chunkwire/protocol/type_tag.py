"""Chunk type tag."""

from dataclasses import dataclass

from .exceptions import InvalidCharacterError, InvalidLengthError


def _is_ascii_letter(b: int) -> bool:
    return ord("A") <= b <= ord("Z") or ord("a") <= b <= ord("z")


@dataclass(frozen=True)
class TypeTag:
    """
    4-byte chunk type identifier.

    Bit 5 (0x20) of each byte is the case bit. A set case bit (lowercase
    letter) on byte 0 marks the chunk ancillary, on byte 1 private, on
    byte 2 reserved-invalid, and on byte 3 safe-to-copy.
    """

    SIZE = 4
    CASE_BIT = 0x20

    raw: bytes

    def __post_init__(self) -> None:
        """Normalize raw to bytes and enforce the 4-byte size."""
        if not isinstance(self.raw, bytes):
            object.__setattr__(self, "raw", bytes(self.raw))
        if len(self.raw) != self.SIZE:
            raise InvalidLengthError(len(self.raw))

    @classmethod
    def from_bytes(cls, data: bytes) -> "TypeTag":
        """Build a tag from 4 raw bytes without checking the letter constraint."""
        return cls(bytes(data))

    @classmethod
    def from_text(cls, text: str) -> "TypeTag":
        """
        Build a tag from a 4-letter string.

        Raises:
            InvalidLengthError: If text is not exactly 4 bytes as UTF-8
            InvalidCharacterError: If any byte is not an ASCII letter
        """
        data = text.encode("utf-8")
        if len(data) != cls.SIZE:
            raise InvalidLengthError(len(data))
        if not all(_is_ascii_letter(b) for b in data):
            raise InvalidCharacterError(data)
        return cls.from_bytes(data)

    def _case_bit(self, index: int) -> bool:
        return bool(self.raw[index] & self.CASE_BIT)

    def is_critical(self) -> bool:
        return not self._case_bit(0)

    def is_public(self) -> bool:
        return not self._case_bit(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._case_bit(2)

    def is_safe_to_copy(self) -> bool:
        return self._case_bit(3)

    def is_valid(self) -> bool:
        """Check that all bytes are ASCII letters and the reserved bit is clear."""
        return all(_is_ascii_letter(b) for b in self.raw) and self.is_reserved_bit_valid()

    def render_text(self) -> str:
        return self.raw.decode("utf-8", errors="replace")

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.render_text()
