"""Structured logging configuration for dmautomation using structlog."""

import logging
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings

DISABLE_CONSOLE_ENV = "DMAUTOMATION_DISABLE_CONSOLE_LOGGING"

# Set by setup_logging so lazy initialization never overrides an explicit setup
_logging_initialized = False


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = True,
    console: bool = True,
    add_timestamp: bool = True,
    add_caller_info: bool = True,
    colorize: bool = True,
) -> None:
    """Configure structured logging for dmautomation.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        structured: Use JSON structured output
        console: Enable console output (overridden by DMAUTOMATION_DISABLE_CONSOLE_LOGGING)
        add_timestamp: Add timestamps to logs
        add_caller_info: Add caller information
        colorize: Colorize console output (only for non-structured)
    """
    global _logging_initialized

    disabled = os.getenv(DISABLE_CONSOLE_ENV) == "1"
    if disabled:
        console = False
        log_file = None

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if add_caller_info:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]
    )

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colorize and console))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    if console:
        # stdout is reserved for command output
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())
        level = "CRITICAL"

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )
    logging.disable(logging.CRITICAL if disabled else logging.NOTSET)

    _logging_initialized = True


def _ensure_logging_initialized() -> None:
    """Ensure logging is initialized (called lazily, not at import time)."""
    if _logging_initialized:
        return

    if os.getenv(DISABLE_CONSOLE_ENV) == "1":
        setup_logging(console=False)
        return

    try:
        settings = get_settings()
        log_file = None
        if settings.log_path is not None:
            log_file = (
                settings.log_path / f"dmautomation_{datetime.now().strftime('%Y%m%d')}.log"
            )
        setup_logging(
            level="DEBUG" if settings.debug_mode else settings.log_level,
            log_file=log_file,
            structured=settings.structured_logging and not settings.debug_mode,
            colorize=settings.debug_mode,
        )
    except (AttributeError, OSError, ValueError):
        # Invalid settings or an unwritable log path fall back to plain console logging
        setup_logging(level="INFO", structured=False)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.BoundLogger, structlog.get_logger(name))


class ScriptLogger:
    """Specialized logger for automation script execution."""

    def __init__(self, base_logger: structlog.BoundLogger | None = None) -> None:
        """Initialize script logger.

        Args:
            base_logger: Base logger to use
        """
        self.logger = base_logger or get_logger(__name__)

    def log_execution_start(
        self, script_name: str, tokens: list[str], **kwargs: Any
    ) -> dict[str, Any]:
        """Log the start of a script execution.

        Args:
            script_name: Name of the script
            tokens: Serialized execution tokens
            **kwargs: Additional context

        Returns:
            Execution context dict
        """
        context = {
            "script_name": script_name,
            "token_count": len(tokens),
            "start": time.monotonic(),
            **kwargs,
        }

        self.logger.info(
            "script_execution_started",
            script_name=script_name,
            tokens=tokens,
            **kwargs,
        )

        return context

    def log_execution_end(
        self,
        context: dict[str, Any],
        success: bool,
        error_message: str | None = None,
    ) -> None:
        """Log the end of a script execution.

        Args:
            context: Execution context from log_execution_start
            success: Whether the execution succeeded
            error_message: Joined error text when it failed
        """
        log_data = {key: value for key, value in context.items() if key != "start"}
        log_data["duration"] = time.monotonic() - context["start"]
        log_data["success"] = success

        if success:
            self.logger.info("script_execution_completed", **log_data)
        else:
            log_data["error"] = error_message
            self.logger.error("script_execution_failed", **log_data)


_script_logger: ScriptLogger | None = None


def get_script_logger() -> ScriptLogger:
    """Get the shared script logger, creating it on first use."""
    global _script_logger

    if _script_logger is None:
        _script_logger = ScriptLogger()
    return _script_logger
