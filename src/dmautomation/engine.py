"""Script engine facade.

ScriptEngine ties the platform collaborators (script executor, element
resolver, parameter source) to the settings and exposes the operations an
automation script needs: preparing and running sub-scripts, reading its own
parameters and waiting for side effects.
"""

from collections.abc import Callable
from typing import TypeVar

from .config import AutomationSettings, get_settings
from .exceptions import InvalidArgumentError
from .logging import get_logger
from .model import ElementResolver
from .script import (
    ConfigStringParser,
    ExecutionResult,
    ScriptExecutor,
    ScriptParamReader,
    ScriptParamSource,
    ScriptRunOptions,
)
from .util import wait_until

T = TypeVar("T")


class ScriptEngine:
    """Entry point for running automation scripts."""

    def __init__(
        self,
        executor: ScriptExecutor,
        resolver: ElementResolver | None = None,
        params: ScriptParamSource | None = None,
        settings: AutomationSettings | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            executor: Executor used to run scripts
            resolver: Resolver for element names used as dummy targets
            params: Source of the running script's parameters
            settings: Settings to use instead of the global ones
        """
        if executor is None:
            raise InvalidArgumentError("executor", "must not be None")
        self.executor = executor
        self.resolver = resolver
        self.settings = settings or get_settings()
        self.parser = ConfigStringParser(resolver)
        self._params = ScriptParamReader(params) if params is not None else None
        self.logger = get_logger(__name__)

    def prepare_script(self, script_name: str) -> ScriptRunOptions:
        """Create empty run options for a script."""
        return ScriptRunOptions(script_name)

    def parse_config(self, config: str) -> ScriptRunOptions:
        """Parse a sub-script configuration string into run options."""
        return self.parser.parse(config)

    def execute(self, options: ScriptRunOptions) -> ExecutionResult:
        """Run prepared options through the executor."""
        if options is None:
            raise InvalidArgumentError("options", "must not be None")
        return options.execute(self.executor)

    def run_config(self, config: str) -> ExecutionResult:
        """Parse a configuration string and run the script it describes.

        Configuration errors are raised; execution failures are returned.
        """
        options = self.parse_config(config)
        self.logger.bind(script_name=options.script_name).debug(
            "running_configured_script", config=config
        )
        return self.execute(options)

    @property
    def params(self) -> ScriptParamReader:
        if self._params is None:
            raise InvalidArgumentError("params", "no script parameter source configured")
        return self._params

    def read_param(self, key: str | int, as_type: type[T] = str) -> T | None:  # type: ignore[assignment]
        """Read one of the running script's parameters."""
        return self.params.get_value(key, as_type)

    def wait_until(self, condition: Callable[[], bool], timeout: float | None = None) -> bool:
        """Poll a condition with the configured interval and default timeout."""
        if timeout is None:
            timeout = self.settings.default_timeout
        return wait_until(condition, timeout, self.settings.poll_interval)
