"""Element identifiers.

An element is addressed by the id of the agent hosting it and its own id,
written as ``agentId/elementId``.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..exceptions import InvalidArgumentError


@runtime_checkable
class ElementRef(Protocol):
    """Anything that identifies an element by agent and element id."""

    @property
    def agent_id(self) -> int: ...

    @property
    def element_id(self) -> int: ...


@dataclass(frozen=True)
class ElementID:
    """Agent/element id pair."""

    agent_id: int
    element_id: int

    def __post_init__(self) -> None:
        for field_name in ("agent_id", "element_id"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(field_name, f"expected an integer, got {value!r}")
            if value < 0:
                raise InvalidArgumentError(field_name, "needs to be a non-negative number")

    @classmethod
    def parse(cls, source: str) -> "ElementID":
        """Parse a string with format ``agentId/elementId``.

        Args:
            source: Text such as ``"5/12"``

        Returns:
            The parsed ElementID

        Raises:
            InvalidArgumentError: If source is None or not in the expected format
        """
        if source is None:
            raise InvalidArgumentError("source", "must not be None")

        parts = source.split("/")
        if len(parts) != 2 or not all(part.strip().isdecimal() for part in parts):
            raise InvalidArgumentError(
                "source", f"{source} does not follow the format DmaId/ElementId"
            )

        return cls(int(parts[0]), int(parts[1]))

    def __str__(self) -> str:
        return f"{self.agent_id}/{self.element_id}"
