"""
Logging setup based on Loguru.

The package logger is disabled on import; call setup_logging to see records.
"""

import re
import sys

from loguru import logger

from .config import LogConfig

PACKAGE_NAME = "chunkwire"


class LogFormat:
    """Log record formatters."""

    @staticmethod
    def _format_extra(record):
        """Render bound extra fields as key=value pairs."""
        extra = {k: v for k, v in record["extra"].items() if k != "component"}
        if not extra:
            return ""
        return " | ".join(f"{k}={v}" for k, v in extra.items())

    @staticmethod
    def _escape(text: str) -> str:
        """Escape format braces and color markup in user supplied text."""
        text = text.replace("{", "{{").replace("}", "}}")
        # Backslashes before "<" are consumed by the markup parser
        return re.sub(r"(\\*)<", lambda m: m.group(1) * 2 + "\\<", text)

    @staticmethod
    def console_formatter(record):
        """Console format: time | level | module:function:line | message"""
        base = (
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )

        extra_str = LogFormat._format_extra(record)
        if extra_str:
            extra_str = LogFormat._escape(extra_str)
            base += f" | <dim>{extra_str}</dim>"

        return base + "\n"

    @staticmethod
    def file_formatter(record):
        """File format, plain text for parsing."""
        base = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

        extra_str = LogFormat._format_extra(record)
        if extra_str:
            extra_str = LogFormat._escape(extra_str)
            base += f" | {extra_str}"

        return base + "\n"


def setup_logging(config: LogConfig | None = None) -> None:
    """Configure Loguru sinks and enable the package logger."""
    config = config or LogConfig()

    logger.remove()

    logger.add(
        sys.stderr,
        format=LogFormat.console_formatter,
        level=config.level,
        colorize=config.colorize,
        backtrace=False,
        diagnose=False,
    )

    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(config.file),
            format=LogFormat.file_formatter,
            level=config.level,
            encoding="utf-8",
            backtrace=False,
            diagnose=False,
        )

    logger.enable(PACKAGE_NAME)


def get_logger(name: str):
    """Get a logger bound to a component name."""
    return logger.bind(component=name)


__all__ = [
    "setup_logging",
    "get_logger",
    "logger",
]
