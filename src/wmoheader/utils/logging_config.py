"""Centralized logging configuration for the wmoheader CLI."""

import sys
from contextlib import suppress
from typing import Any

from loguru import logger

DEFAULT_LOG_LEVEL = "WARNING"


class LoggingConfig:
    """Logging setup shared by every entry point.

    The library itself only emits records through loguru's ``logger``;
    handlers are installed here, once, by the application.
    """

    _configured = False
    _log_level = DEFAULT_LOG_LEVEL
    _log_file: str | None = None

    @classmethod
    def configure(cls, log_level: str, log_file: str | None = None) -> None:
        """Configure logging for the application.

        Console records go to stderr so that stdout stays free for
        decoded headers.

        Args:
            log_level: The logging level (TRACE, DEBUG, INFO, WARNING, ERROR)
            log_file: Optional log file path for file logging

        """
        if cls._configured:
            return

        cls._log_level = log_level
        cls._log_file = log_file

        logger.remove()
        logger.add(
            sys.stderr,
            level=log_level,
            format=cls._console_formatter,
            serialize=False,
        )

        if log_file:
            logger.add(
                log_file,
                level=log_level,
                rotation="10 MB",
                retention="7 days",
                format=cls._file_formatter,
            )
            logger.info("File logging enabled", log_file=log_file)

        cls._configured = True
        logger.debug("Logging configuration applied", level=log_level)

    @classmethod
    def _escape_loguru_braces(cls, value: Any) -> str:
        """Escape curly braces so loguru does not treat them as fields.

        Header lines come from untrusted bulletin text, so anything echoed
        back into a format string is escaped.
        """
        try:
            return str(value).replace("{", "{{").replace("}", "}}")
        except (TypeError, ValueError, AttributeError):
            return "<unprintable>"

    @classmethod
    def _escape_markup(cls, value: str) -> str:
        """Escape '<' so loguru's colorizer does not read it as a tag."""
        return value.replace("<", r"\<")

    @classmethod
    def _extra_pairs(cls, extra: dict[str, Any]) -> list[tuple[str, str]]:
        try:
            return [
                (cls._escape_loguru_braces(key), cls._escape_loguru_braces(value))
                for key, value in extra.items()
            ]
        except (TypeError, ValueError, AttributeError, KeyError):
            return [("extra", "<extra_data_formatting_error>")]

    @classmethod
    def _format(cls, record: Any, *, colored: bool, time_format: str) -> str:
        try:
            time_part = record["time"].strftime(time_format)
            level_part = f"{record['level'].name: <8}"
            location_part = f"{record['name']}:{record['function']}:{record['line']}"
            message_part = cls._escape_loguru_braces(record["message"])

            pairs = cls._extra_pairs(record.get("extra", {}))
            if colored:
                tag = cls._escape_markup
                parts = [
                    f"<green>{time_part}</green>",
                    f"<level>{level_part}</level>",
                    f"<cyan>{tag(location_part)}</cyan>",
                    f"<level>{tag(message_part)}</level>",
                ]
                parts.extend(
                    f"<cyan>{tag(key)}</cyan>=<magenta>{tag(value)}</magenta>" for key, value in pairs
                )
            else:
                parts = [time_part, level_part, location_part, message_part]
                parts.extend(f"{key}={value}" for key, value in pairs)

            return " | ".join(parts) + "\n"

        except (TypeError, ValueError, KeyError, AttributeError):
            return "LOG | <formatting_error>\n"

    @classmethod
    def _console_formatter(cls, record: Any) -> str:
        """Format a record for the console, with color tags."""
        return cls._format(record, colored=True, time_format="%m-%d %H:%M:%S")

    @classmethod
    def _file_formatter(cls, record: Any) -> str:
        """Format a record for the log file, without color tags."""
        return cls._format(record, colored=False, time_format="%Y-%m-%d %H:%M:%S")

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logging has been configured."""
        return cls._configured

    @classmethod
    def reset(cls) -> None:
        """Reset logging configuration state.

        This is primarily useful for testing purposes.
        """
        cls._configured = False
        cls._log_level = DEFAULT_LOG_LEVEL
        cls._log_file = None
        with suppress(ValueError):
            logger.remove()
