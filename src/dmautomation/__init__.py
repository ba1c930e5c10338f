"""dmautomation: helpers for DataMiner automation scripts.

Prepare sub-script invocations, parse one-line sub-script configuration
strings and run them through a pluggable script executor.

Example:
    from dmautomation import ScriptEngine, StaticElementDirectory

    engine = ScriptEngine(executor, resolver=StaticElementDirectory({"Router": "5/12"}))
    result = engine.run_config("Script:Reboot|Device=Router|Mode=Cold|||Asynchronous")
    if not result:
        print(result.error_message)
"""

__version__ = "0.1.0"

from .base_exceptions import DmAutomationException
from .config import AutomationSettings, configure, get_settings
from .engine import ScriptEngine
from .exceptions import (
    ExecutionFailedError,
    InvalidArgumentError,
    InvalidScriptParamError,
    MalformedConfigError,
    MissingScriptNameError,
    ProtocolNotFoundError,
    TargetNotFoundError,
)
from .model import ElementID, ElementRef, ElementResolver, StaticElementDirectory
from .protocol import ProtocolInfo, ProtocolInfoCache, ProtocolInfoSource, ProtocolLookup
from .script import (
    ConfigStringParser,
    ExecutionResult,
    ScriptExecutor,
    ScriptOption,
    ScriptParamReader,
    ScriptResponse,
    ScriptRunFlags,
    ScriptRunOptions,
    parse_config_string,
)
from .util import retry_until_success, wait_until

__all__ = [
    "__version__",
    # Engine
    "ScriptEngine",
    # Script options and parsing
    "ScriptRunOptions",
    "ScriptRunFlags",
    "ScriptOption",
    "ConfigStringParser",
    "parse_config_string",
    # Execution
    "ScriptExecutor",
    "ScriptResponse",
    "ExecutionResult",
    # Parameters
    "ScriptParamReader",
    # Elements
    "ElementID",
    "ElementRef",
    "ElementResolver",
    "StaticElementDirectory",
    # Protocols
    "ProtocolInfo",
    "ProtocolInfoSource",
    "ProtocolInfoCache",
    "ProtocolLookup",
    # Waiting
    "wait_until",
    "retry_until_success",
    # Settings
    "AutomationSettings",
    "get_settings",
    "configure",
    # Exceptions
    "DmAutomationException",
    "InvalidArgumentError",
    "MalformedConfigError",
    "MissingScriptNameError",
    "ExecutionFailedError",
    "TargetNotFoundError",
    "InvalidScriptParamError",
    "ProtocolNotFoundError",
]
