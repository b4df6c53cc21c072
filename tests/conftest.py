"""Shared test fixtures."""

import pytest
from loguru import logger

from chunkwire.protocol import Chunk, TypeTag

SECRET_MESSAGE = b"This is where your secret message will be!"
SECRET_CRC = 2882656334


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by setup_logging between tests."""
    yield
    logger.remove()
    logger.disable("chunkwire")


@pytest.fixture
def rust_tag() -> TypeTag:
    return TypeTag.from_text("RuSt")


@pytest.fixture
def secret_chunk(rust_tag: TypeTag) -> Chunk:
    return Chunk(rust_tag, SECRET_MESSAGE)


@pytest.fixture
def secret_chunk_bytes() -> bytes:
    return (
        (42).to_bytes(4, "big")
        + b"RuSt"
        + SECRET_MESSAGE
        + SECRET_CRC.to_bytes(4, "big")
    )
