"""Mock script executor for dry runs and tests.

Records every execute script request instead of sending it to the platform
and answers with a configurable response.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..script.executor import ScriptResponse, ScriptRunFlags

logger = logging.getLogger(__name__)


@dataclass
class ScriptRequest:
    """One recorded execute script request.

    Attributes:
        script_name: Name of the requested script
        tokens: Execution tokens in request order
        flags: Lock related request flags
        timestamp: When the request was recorded
    """

    script_name: str
    tokens: list[str]
    flags: ScriptRunFlags
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "script_name": self.script_name,
            "tokens": list(self.tokens),
            "flags": int(self.flags),
            "timestamp": self.timestamp.isoformat(),
        }


class RecordingScriptExecutor:
    """Executor that records requests and replies with a canned response.

    Args:
        response: Response returned for every request (a successful one by default).
            Pass None to simulate a request that received no response.
        error: Exception raised for every request instead of answering
        responder: Callable computing the response per request, overrides response
    """

    _DEFAULT = object()

    def __init__(
        self,
        response: Any = _DEFAULT,
        error: Exception | None = None,
        responder: Callable[[ScriptRequest], ScriptResponse | None] | None = None,
    ) -> None:
        self.response: ScriptResponse | None = (
            ScriptResponse() if response is self._DEFAULT else response
        )
        self.error = error
        self.responder = responder
        self.requests: list[ScriptRequest] = []

    def execute_script(
        self, script_name: str, tokens: Sequence[str], flags: ScriptRunFlags
    ) -> ScriptResponse | None:
        request = ScriptRequest(script_name=script_name, tokens=list(tokens), flags=flags)
        self.requests.append(request)
        logger.info(f"Recorded execution of {script_name} with {len(request.tokens)} tokens")

        if self.error is not None:
            raise self.error
        if self.responder is not None:
            return self.responder(request)
        return self.response

    @property
    def last_request(self) -> ScriptRequest | None:
        return self.requests[-1] if self.requests else None

    def reset(self) -> None:
        self.requests.clear()
