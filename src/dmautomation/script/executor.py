"""Script executor interface and execution result types.

The executor is the only place where a prepared script leaves this library.
Implementations forward the script name, the serialized tokens and the run
flags to the automation platform.
"""

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Protocol, Sequence

from ..exceptions import ExecutionFailedError


class ScriptRunFlags(IntFlag):
    """Request flags folded from the lock related options."""

    NONE = 0
    LOCK = 1
    FORCE_LOCK = 2
    NO_WAIT = 4


@dataclass
class ScriptResponse:
    """Response of the platform to an execute script request."""

    had_error: bool = False
    """Whether the platform reported an error."""

    error_messages: list[str] = field(default_factory=list)
    """Error lines reported by the platform."""


@dataclass
class ExecutionResult:
    """Outcome of running a script.

    Failures are values: ``success`` is False and ``error_message`` holds the
    joined, multi-line error text.
    """

    script_name: str
    success: bool
    error_message: str = ""
    tokens: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls, script_name: str, tokens: Sequence[str]) -> "ExecutionResult":
        return cls(script_name=script_name, success=True, tokens=list(tokens))

    @classmethod
    def failed(
        cls, script_name: str, error_message: str, tokens: Sequence[str]
    ) -> "ExecutionResult":
        return cls(
            script_name=script_name,
            success=False,
            error_message=error_message,
            tokens=list(tokens),
        )

    def __bool__(self) -> bool:
        return self.success

    def raise_for_error(self) -> "ExecutionResult":
        """Raise ExecutionFailedError if the execution failed.

        Returns:
            self, to allow chaining on success
        """
        if not self.success:
            raise ExecutionFailedError(self.script_name, self.error_message)
        return self


class ScriptExecutor(Protocol):
    """Sends execute script requests to the automation platform."""

    def execute_script(
        self, script_name: str, tokens: Sequence[str], flags: ScriptRunFlags
    ) -> ScriptResponse | None:
        """Execute a script.

        Args:
            script_name: Name of the script to run
            tokens: Ordered execution tokens
            flags: Lock related request flags

        Returns:
            The platform response, or None if no response was received
        """
        ...
