"""Logging module for dmautomation."""

from .logger import (
    ScriptLogger,
    get_logger,
    get_script_logger,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "ScriptLogger",
    "get_script_logger",
]
