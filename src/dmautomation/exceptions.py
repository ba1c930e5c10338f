"""Automation exceptions.

This module contains the exceptions raised while preparing, parsing and
executing automation scripts, and while looking up the platform objects
those scripts refer to.
"""

from typing import Any

from .base_exceptions import DmAutomationException


class InvalidArgumentError(DmAutomationException, ValueError):
    """Raised when a required argument is missing, empty or of the wrong kind."""

    def __init__(self, argument: str, reason: str, **kwargs: Any) -> None:
        """Initialize with the offending argument."""
        super().__init__(
            f"Invalid argument '{argument}': {reason}",
            error_code="INVALID_ARGUMENT",
            context={"argument": argument, "reason": reason, **kwargs},
        )
        self.argument = argument
        self.reason = reason


class MalformedConfigError(DmAutomationException):
    """Raised when a segment of a script configuration string is malformed.

    Attributes:
        segment: Name of the segment that failed (``script``, ``dummies``,
            ``parameters``, ``memory`` or ``options``)
        raw_text: Raw text of the failing segment
        expected_format: Human-readable description of the expected shape
    """

    error_code_value = "MALFORMED_CONFIG"

    def __init__(
        self,
        segment: str,
        raw_text: str,
        expected_format: str,
        detail: str | None = None,
    ) -> None:
        """Initialize with the failing segment details."""
        message = (
            f"{raw_text!r} is not a valid {segment} configuration. "
            f"It should match the format '{expected_format}'"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(
            message,
            error_code=self.error_code_value,
            context={
                "segment": segment,
                "raw_text": raw_text,
                "expected_format": expected_format,
            },
        )
        self.segment = segment
        self.raw_text = raw_text
        self.expected_format = expected_format


class MissingScriptNameError(MalformedConfigError):
    """Raised when the first segment of a configuration string names no script."""

    error_code_value = "MISSING_SCRIPT_NAME"

    def __init__(self, raw_text: str) -> None:
        super().__init__("script", raw_text, "Script:ScriptName", detail="script name is missing")


class ExecutionFailedError(DmAutomationException):
    """Raised when a script execution failed and the caller asked for an exception."""

    def __init__(self, script_name: str, error_message: str) -> None:
        """Initialize with the script name and the joined remote error text."""
        super().__init__(
            f"Execution of script '{script_name}' failed:\n{error_message}",
            error_code="EXECUTION_FAILED",
            context={"script_name": script_name, "error_message": error_message},
        )
        self.script_name = script_name
        self.error_message = error_message


class TargetNotFoundError(DmAutomationException, LookupError):
    """Raised when an element could not be located by name or agent/element id."""

    def __init__(self, target: str, **kwargs: Any) -> None:
        super().__init__(
            f"Element '{target}' was not found",
            error_code="TARGET_NOT_FOUND",
            context={"target": target, **kwargs},
        )
        self.target = target


class InvalidScriptParamError(DmAutomationException):
    """Raised when a script parameter is not defined."""

    def __init__(self, reason: str, param: str | int) -> None:
        super().__init__(
            f"{reason}\nParameter: {param}",
            error_code="INVALID_SCRIPT_PARAM",
            context={"param": param, "reason": reason},
        )
        self.param = param


class ProtocolNotFoundError(DmAutomationException, LookupError):
    """Raised when a protocol name/version pair does not exist."""

    def __init__(self, name: str, version: str) -> None:
        super().__init__(
            f"Protocol: {name} Version: {version} doesn't exist",
            error_code="PROTOCOL_NOT_FOUND",
            context={"name": name, "version": version},
        )
        self.name = name
        self.version = version
