"""Root of the dmautomation exception hierarchy.

Every error raised while preparing, parsing or running an automation script
derives from DmAutomationException, so callers and the CLI can report them
uniformly by error code.
"""

from typing import Any


class DmAutomationException(Exception):
    """Base exception for all dmautomation errors.

    Attributes:
        message: Human-readable error message
        error_code: Code identifying the error kind (e.g. ``MALFORMED_CONFIG``)
        context: Values describing the failing input
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = dict(context) if context else {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Describe the error for machine-readable reports.

        Context values that are not plain JSON scalars are rendered with str().
        """
        return {
            "error": self.error_code or type(self).__name__,
            "message": self.message,
            "context": {
                key: value if isinstance(value, (str, int, float, bool, type(None))) else str(value)
                for key, value in self.context.items()
            },
        }
