"""Element lookup by name."""

from collections.abc import Mapping
from typing import Protocol

from ..exceptions import InvalidArgumentError, TargetNotFoundError
from .element_id import ElementID, ElementRef


class ElementResolver(Protocol):
    """Resolves an element name to an element reference."""

    def resolve(self, name: str) -> ElementRef:
        """Find an element by name.

        Raises:
            TargetNotFoundError: If no element has that name
        """
        ...


class StaticElementDirectory:
    """Element resolver backed by a fixed name to ElementID mapping."""

    def __init__(
        self,
        elements: Mapping[str, ElementID | str] | None = None,
        case_sensitive: bool = True,
    ) -> None:
        """Initialize the directory.

        Args:
            elements: Initial mapping of element names to ids (ElementID or "agent/element")
            case_sensitive: Whether name lookups are case sensitive
        """
        self.case_sensitive = case_sensitive
        self._elements: dict[str, ElementID] = {}
        for name, element in (elements or {}).items():
            self.add(name, element)

    def _key(self, name: str) -> str:
        return name if self.case_sensitive else name.casefold()

    def add(self, name: str, element: ElementID | str) -> None:
        if not name:
            raise InvalidArgumentError("name", "must be a non-empty string")
        if isinstance(element, str):
            element = ElementID.parse(element)
        self._elements[self._key(name)] = element

    def resolve(self, name: str) -> ElementID:
        try:
            return self._elements[self._key(name)]
        except KeyError:
            raise TargetNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._elements

    def __len__(self) -> int:
        return len(self._elements)
