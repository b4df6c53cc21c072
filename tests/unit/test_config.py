"""Unit tests for configuration and logging setup."""

import pytest
from loguru import logger
from pydantic import ValidationError

from chunkwire.common.config import ChunkwireConfig, LogConfig, ParseConfig
from chunkwire.common.log_base import setup_logging
from chunkwire.protocol import Chunk, TypeTag


class TestParseConfig:
    """Test parse policy configuration."""

    def test_defaults(self):
        config = ParseConfig()
        assert config.reject_trailing_bytes is False
        assert config.max_payload_length is None

    def test_negative_limit_rejected(self):
        with pytest.raises(ValidationError):
            ParseConfig(max_payload_length=-1)

    def test_limit_above_u32_rejected(self):
        with pytest.raises(ValidationError):
            ParseConfig(max_payload_length=2**32)


class TestLogConfig:
    """Test logging configuration."""

    def test_level_normalized(self):
        assert LogConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LogConfig(level="LOUD")


class TestChunkwireConfig:
    """Test top-level configuration loading."""

    def test_from_dict(self):
        config = ChunkwireConfig.from_dict({
            "parse": {"reject_trailing_bytes": True, "max_payload_length": 1024},
            "logging": {"level": "warning"},
        })
        assert config.parse.reject_trailing_bytes
        assert config.parse.max_payload_length == 1024
        assert config.logging.level == "WARNING"

    def test_from_file(self, tmp_path):
        config_file = tmp_path / "chunkwire.toml"
        config_file.write_text(
            "[parse]\nreject_trailing_bytes = true\n\n[logging]\nlevel = \"DEBUG\"\n",
            encoding="utf-8",
        )
        config = ChunkwireConfig.from_file(config_file)
        assert config.parse.reject_trailing_bytes
        assert config.parse.max_payload_length is None
        assert config.logging.level == "DEBUG"

    def test_save_and_load(self, tmp_path):
        config_file = tmp_path / "chunkwire.toml"
        original = ChunkwireConfig.from_dict({"parse": {"max_payload_length": 64}})
        original.save_to_file(config_file)

        restored = ChunkwireConfig.from_file(config_file)
        assert restored == original


class TestSetupLogging:
    """Test logging setup."""

    def test_codec_logs_after_setup(self, tmp_path):
        log_file = tmp_path / "logs" / "chunkwire.log"
        setup_logging(LogConfig(level="DEBUG", colorize=False, file=log_file))

        Chunk(TypeTag.from_text("RuSt"), b"abc").serialize()
        logger.complete()

        content = log_file.read_text(encoding="utf-8")
        assert "Serializing chunk" in content
        assert "type_tag=RuSt" in content

    def test_level_filters_debug(self, tmp_path):
        log_file = tmp_path / "chunkwire.log"
        setup_logging(LogConfig(level="INFO", colorize=False, file=log_file))

        Chunk(TypeTag.from_text("RuSt"), b"abc").serialize()

        assert "Serializing chunk" not in log_file.read_text(encoding="utf-8")

    def test_extra_values_are_escaped(self, tmp_path, capsys):
        """Test markup and braces in extra values are written literally."""
        log_file = tmp_path / "chunkwire.log"
        setup_logging(LogConfig(level="DEBUG", colorize=True, file=log_file))

        logger.error("Rejected input", error="b'R<S>' {x} <red>\\<b>")

        content = log_file.read_text(encoding="utf-8")
        assert "error=b'R<S>' {x} <red>\\<b>" in content
        assert "Logging error" not in capsys.readouterr().err
