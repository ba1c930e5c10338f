"""Script run options.

ScriptRunOptions accumulates everything needed to run a named automation
script: dummy, memory and parameter bindings plus the execution flags. It
serializes itself into the ordered token list consumed by the platform's
execute script request.

Example:
    >>> options = ScriptRunOptions("Reboot")
    >>> options.select_dummy_by_index(1, 5, 12)
    >>> options.select_param_by_name("Mode", "Cold")
    >>> options.synchronous = False
    >>> options.serialize()
    ['PROTOCOL:1:5:12', 'FORCEDYNAMIC:5:12', 'PARAMETERBYNAME:Mode:Cold',
     'DEFER:TRUE', 'CHECKSETS:TRUE', 'OPTIONS:0']
"""

from ..exceptions import InvalidArgumentError
from ..logging import get_script_logger
from ..model import ElementRef
from .executor import ExecutionResult, ScriptExecutor, ScriptRunFlags

NO_RESPONSE_MESSAGE = "Failed to execute Automation Script"


def _bool_token(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def _require_name(argument: str, name: str | None) -> str:
    if name is None or not isinstance(name, str) or name == "":
        raise InvalidArgumentError(argument, "must be a non-empty string")
    return name


def _require_index(argument: str, index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(argument, f"expected an integer, got {index!r}")
    return index


def _require_value(value: str | None) -> str:
    if value is None:
        raise InvalidArgumentError("value", "must not be None")
    return str(value)


class ScriptRunOptions:
    """Arguments and flags of one automation script invocation.

    Default values:
        synchronous = True
        perform_checks = True
        lock_elements = False
        force_lock_elements = False
        wait_when_locked = True

    Bindings are kept in the order they were selected. Selecting the same
    dummy, memory file or parameter twice produces two tokens.
    """

    def __init__(self, script_name: str) -> None:
        """Initialize options for a script.

        Args:
            script_name: Name of the script to run

        Raises:
            InvalidArgumentError: If script_name is None or empty
        """
        self.script_name = _require_name("script_name", script_name)
        self.synchronous = True
        self.perform_checks = True
        self.lock_elements = False
        self.force_lock_elements = False
        self.wait_when_locked = True
        self._bindings: list[str] = []

    def __repr__(self) -> str:
        return (
            f"ScriptRunOptions(script_name={self.script_name!r}, "
            f"bindings={len(self._bindings)}, flags={self.run_flags!r})"
        )

    @property
    def bindings(self) -> list[str]:
        """Binding tokens selected so far, in selection order."""
        return list(self._bindings)

    def select_dummy_by_index(self, dummy_id: int, agent_id: int, element_id: int) -> None:
        """Bind the dummy with the given position to an element.

        Args:
            dummy_id: Id of the dummy in the script
            agent_id: Id of the agent hosting the element
            element_id: Id of the element
        """
        dummy_id = _require_index("dummy_id", dummy_id)
        agent_id = _require_index("agent_id", agent_id)
        element_id = _require_index("element_id", element_id)

        self._bindings.append(f"PROTOCOL:{dummy_id}:{agent_id}:{element_id}")
        self._bindings.append(f"FORCEDYNAMIC:{agent_id}:{element_id}")

    def select_dummy_by_name(self, name: str, agent_id: int, element_id: int) -> None:
        """Bind the dummy with the given name to an element.

        Args:
            name: Name of the dummy in the script
            agent_id: Id of the agent hosting the element
            element_id: Id of the element
        """
        name = _require_name("name", name)
        agent_id = _require_index("agent_id", agent_id)
        element_id = _require_index("element_id", element_id)

        self._bindings.append(f"PROTOCOLBYNAME:{name}:{agent_id}:{element_id}")
        self._bindings.append(f"FORCEDYNAMIC:{agent_id}:{element_id}")

    def select_dummy(self, dummy: int | str, target: ElementRef) -> None:
        """Bind a dummy, selected by position or name, to an element reference."""
        if target is None:
            raise InvalidArgumentError("target", "must not be None")
        if isinstance(dummy, str):
            self.select_dummy_by_name(dummy, target.agent_id, target.element_id)
        else:
            self.select_dummy_by_index(dummy, target.agent_id, target.element_id)

    def select_memory_by_name(self, name: str, value: str) -> None:
        """Select a memory file entry by memory name."""
        name = _require_name("name", name)
        value = _require_value(value)
        self._bindings.append(f"MEMORYBYNAME:{name}:{value}")

    def select_memory_by_index(self, memory_id: int, value: str) -> None:
        """Select a memory file entry by memory id."""
        memory_id = _require_index("memory_id", memory_id)
        value = _require_value(value)
        self._bindings.append(f"MEMORY:{memory_id}:{value}")

    def select_param_by_name(self, name: str, value: str) -> None:
        """Set a script parameter by name."""
        name = _require_name("name", name)
        value = _require_value(value)
        self._bindings.append(f"PARAMETERBYNAME:{name}:{value}")

    def select_param_by_index(self, param_id: int, value: str) -> None:
        """Set a script parameter by id."""
        param_id = _require_index("param_id", param_id)
        value = _require_value(value)
        self._bindings.append(f"PARAMETER:{param_id}:{value}")

    @property
    def run_flags(self) -> ScriptRunFlags:
        """Lock related flags folded into a single flag set."""
        flags = ScriptRunFlags.LOCK if self.lock_elements else ScriptRunFlags.NONE
        if self.force_lock_elements:
            flags |= ScriptRunFlags.FORCE_LOCK
        if not self.wait_when_locked:
            flags |= ScriptRunFlags.NO_WAIT
        return flags

    def serialize(self) -> list[str]:
        """Serialize the options into execution tokens.

        The bindings come first, in selection order, followed by exactly one
        DEFER, one CHECKSETS and one OPTIONS token, in that order.

        Returns:
            Ordered list of execution tokens
        """
        tokens = list(self._bindings)
        tokens.append(f"DEFER:{_bool_token(not self.synchronous)}")
        tokens.append(f"CHECKSETS:{_bool_token(self.perform_checks)}")
        tokens.append(f"OPTIONS:{int(self.run_flags)}")
        return tokens

    def execute(self, executor: ScriptExecutor) -> ExecutionResult:
        """Run the script through an executor.

        Errors reported by the platform, a missing response and exceptions
        raised by the executor are all returned as a failed ExecutionResult.

        Args:
            executor: Executor that forwards the request to the platform

        Returns:
            ExecutionResult describing the outcome
        """
        tokens = self.serialize()
        script_logger = get_script_logger()
        context = script_logger.log_execution_start(
            self.script_name, tokens, flags=int(self.run_flags)
        )

        try:
            response = executor.execute_script(self.script_name, tokens, self.run_flags)
            if response is None:
                result = ExecutionResult.failed(self.script_name, NO_RESPONSE_MESSAGE, tokens)
            elif response.had_error:
                messages = response.error_messages or []
                result = ExecutionResult.failed(
                    self.script_name, "\n".join(str(message) for message in messages), tokens
                )
            else:
                result = ExecutionResult.ok(self.script_name, tokens)
        except Exception as e:
            result = ExecutionResult.failed(self.script_name, str(e) or repr(e), tokens)

        script_logger.log_execution_end(context, result.success, result.error_message or None)
        return result
