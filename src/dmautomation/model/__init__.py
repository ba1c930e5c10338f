"""Model package - identifiers of platform objects and their lookup."""

from .directory import ElementResolver, StaticElementDirectory
from .element_id import ElementID, ElementRef

__all__ = ["ElementID", "ElementRef", "ElementResolver", "StaticElementDirectory"]
