"""Reading the parameters of the running automation script.

Parameter values arrive as strings. ScriptParamReader looks them up by name
or by id and converts them to the requested type.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Protocol, TypeVar

from ..exceptions import InvalidArgumentError, InvalidScriptParamError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# OLE Automation dates count days from this epoch
OA_DATE_EPOCH = datetime(1899, 12, 30)
OA_DATE_MIN = -657435.0
OA_DATE_MAX = 2958465.99999999

_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}


@dataclass(frozen=True)
class ScriptParam:
    """A script parameter as provided by the platform."""

    id: int
    name: str
    value: str


class ScriptParamSource(Protocol):
    """Provides the parameters of the running script."""

    def get_script_param(self, key: str | int) -> ScriptParam | None:
        """Get a parameter by name or id, or None if it is not defined."""
        ...


class DictScriptParamSource:
    """Parameter source backed by an in-memory mapping of name to value.

    Parameter ids follow the mapping order, starting at 1.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._params: list[ScriptParam] = [
            ScriptParam(id=position, name=name, value=value)
            for position, (name, value) in enumerate((values or {}).items(), start=1)
        ]

    def get_script_param(self, key: str | int) -> ScriptParam | None:
        for param in self._params:
            if (isinstance(key, str) and param.name == key) or (
                isinstance(key, int) and param.id == key
            ):
                return param
        return None


def from_oa_date(value: float) -> datetime:
    """Convert an OLE Automation date to a datetime.

    Raises:
        OverflowError: If the value is outside the supported range
    """
    if not OA_DATE_MIN <= value <= OA_DATE_MAX:
        raise OverflowError(
            f"{value} is not a valid OA Date, supported range {OA_DATE_MIN} to {OA_DATE_MAX}"
        )
    days = int(value)
    fraction = abs(value - days)
    return OA_DATE_EPOCH + timedelta(days=days) + timedelta(days=fraction)


def change_type(value: Any, as_type: type[T]) -> T | None:
    """Convert a raw parameter value to the requested type.

    Args:
        value: Raw value, usually a string
        as_type: Target type

    Returns:
        The converted value, or None when value is None

    Raises:
        ValueError: If the value cannot be converted
        OverflowError: If a date value is out of range
    """
    if value is None:
        return None

    if isinstance(as_type, type) and issubclass(as_type, Enum):
        return as_type(change_type(value, int))  # type: ignore[return-value]

    if as_type is datetime:
        return from_oa_date(float(value))  # type: ignore[return-value]

    if as_type is bool:
        if isinstance(value, str):
            text = value.strip().casefold()
            if text in _TRUE_VALUES:
                return True  # type: ignore[return-value]
            if text in _FALSE_VALUES:
                return False  # type: ignore[return-value]
            raise ValueError(f"{value!r} is not a valid boolean")
        return bool(value)  # type: ignore[return-value]

    if as_type is int and isinstance(value, str):
        return int(value.strip())  # type: ignore[return-value]

    return as_type(value)  # type: ignore[call-arg]


class ScriptParamReader:
    """Typed access to the parameters of the running script."""

    def __init__(self, source: ScriptParamSource) -> None:
        if source is None:
            raise InvalidArgumentError("source", "must not be None")
        self.source = source

    def _get_param(self, key: str | int) -> ScriptParam:
        if key is None:
            raise InvalidArgumentError("key", "must not be None")
        if isinstance(key, str) and not key.strip():
            raise InvalidArgumentError("key", "parameter name empty")

        param = self.source.get_script_param(key)
        if param is None:
            raise InvalidScriptParamError("parameter is not defined", key)
        return param

    def get_raw(self, key: str | int) -> str:
        """Get the raw string value of a parameter."""
        return self._get_param(key).value

    def get_value(self, key: str | int, as_type: type[T] = str) -> T | None:  # type: ignore[assignment]
        """Get a parameter value converted to a type.

        Args:
            key: Parameter name or id
            as_type: Type to convert the raw value to

        Returns:
            The converted value

        Raises:
            InvalidArgumentError: If the name is None or blank
            InvalidScriptParamError: If the parameter is not defined
        """
        param = self._get_param(key)
        logger.debug(f"Reading script parameter {key!r} as {as_type.__name__}")
        return change_type(param.value, as_type)

    def get_value_with(self, key: str | int, selector: Callable[[str], T]) -> T:
        """Get a parameter value transformed by a selector.

        Args:
            key: Parameter name or id
            selector: Function applied to the raw value
        """
        if selector is None:
            raise InvalidArgumentError("selector", "must not be None")
        return selector(self._get_param(key).value)
