"""Chunk codec exceptions."""


class ChunkwireError(Exception):
    """Base exception for chunk codec errors."""

    pass


class TypeTagError(ChunkwireError):
    """Raised when a type tag cannot be built from user input."""

    pass


class InvalidLengthError(TypeTagError):
    """Raised when a type tag is not exactly 4 bytes long."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Expected 4 bytes but received {length} when creating type tag")


class InvalidCharacterError(TypeTagError):
    """Raised when a type tag contains a byte that is not an ASCII letter."""

    def __init__(self, value: bytes) -> None:
        self.value = value
        super().__init__(f"Type tag {value!r} contains one or more invalid characters")


class ChunkStructuralError(ChunkwireError):
    """Raised when chunk bytes do not have the expected layout."""

    pass


class TooShortError(ChunkStructuralError):
    """Raised when input is shorter than the fixed chunk overhead."""

    def __init__(self, length: int, minimum: int = 12) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"At least {minimum} bytes must be supplied to construct a chunk, got {length}"
        )


class InvalidTypeTagError(ChunkStructuralError):
    """Raised when the type tag of a parsed chunk is not valid."""

    def __init__(self, tag: bytes) -> None:
        self.tag = tag
        super().__init__(f"Invalid chunk type: {tag!r}")


class TruncatedChunkError(ChunkStructuralError):
    """Raised when the declared payload length runs past the end of input."""

    def __init__(self, declared: int, available: int) -> None:
        self.declared = declared
        self.available = available
        super().__init__(
            f"Declared payload length {declared} exceeds {available} available bytes"
        )


class PayloadTooLargeError(ChunkStructuralError):
    """Raised when the declared payload length exceeds the configured limit."""

    def __init__(self, declared: int, limit: int) -> None:
        self.declared = declared
        self.limit = limit
        super().__init__(f"Declared payload length {declared} exceeds limit {limit}")


class TrailingBytesError(ChunkStructuralError):
    """Raised when bytes follow the CRC field and the policy rejects them."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"{count} unexpected bytes after CRC field")


class ChunkIntegrityError(ChunkwireError):
    """Raised when chunk contents fail an integrity check."""

    pass


class CrcMismatchError(ChunkIntegrityError):
    """Raised when the stored CRC does not match the computed one."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid CRC when constructing chunk. Expected {expected:#010x} "
            f"but found {actual:#010x}"
        )


class PayloadEncodingError(ChunkwireError):
    """Raised when a payload is not valid UTF-8."""

    pass
