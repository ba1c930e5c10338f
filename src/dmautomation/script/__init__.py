"""Script package - preparing, parsing and executing automation scripts."""

from .executor import ExecutionResult, ScriptExecutor, ScriptResponse, ScriptRunFlags
from .options import ScriptRunOptions
from .params import (
    DictScriptParamSource,
    ScriptParam,
    ScriptParamReader,
    ScriptParamSource,
    change_type,
)
from .parser import ConfigEntry, ConfigStringParser, ScriptOption, parse_config_string

__all__ = [
    # Options
    "ScriptRunOptions",
    "ScriptRunFlags",
    # Execution
    "ScriptExecutor",
    "ScriptResponse",
    "ExecutionResult",
    # Parsing
    "ConfigStringParser",
    "ConfigEntry",
    "ScriptOption",
    "parse_config_string",
    # Parameters
    "ScriptParam",
    "ScriptParamSource",
    "ScriptParamReader",
    "DictScriptParamSource",
    "change_type",
]
