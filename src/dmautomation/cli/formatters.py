"""Output formatters for CLI commands.

Provides formatting for parsed script options in two formats:
- text: Human-readable, one token per line
- json: Machine-readable format
"""

import json
from typing import Any

from ..base_exceptions import DmAutomationException
from ..script import ExecutionResult, ScriptRunOptions


def options_to_dict(options: ScriptRunOptions) -> dict[str, Any]:
    """Describe run options as a dictionary."""
    return {
        "script_name": options.script_name,
        "synchronous": options.synchronous,
        "perform_checks": options.perform_checks,
        "lock_elements": options.lock_elements,
        "force_lock_elements": options.force_lock_elements,
        "wait_when_locked": options.wait_when_locked,
        "flags": int(options.run_flags),
        "tokens": options.serialize(),
    }


def format_options(options: ScriptRunOptions, format_type: str) -> str:
    """Format parsed options in the specified format.

    Args:
        options: Parsed run options
        format_type: Output format ("text" or "json")

    Returns:
        Formatted string output

    Raises:
        ValueError: If format_type is not recognized
    """
    if format_type == "json":
        return json.dumps(options_to_dict(options), indent=2)
    elif format_type == "text":
        lines = [f"Script: {options.script_name}"]
        lines.extend(f"  {token}" for token in options.serialize())
        return "\n".join(lines)
    else:
        raise ValueError(f"Unknown format type: {format_type}")


def format_execution(result: ExecutionResult, format_type: str) -> str:
    """Format an execution result in the specified format."""
    if format_type == "json":
        return json.dumps(
            {
                "script_name": result.script_name,
                "success": result.success,
                "error": result.error_message or None,
                "tokens": result.tokens,
            },
            indent=2,
        )
    elif format_type == "text":
        if result.success:
            return f"Script {result.script_name} executed successfully"
        return f"Script {result.script_name} failed:\n{result.error_message}"
    else:
        raise ValueError(f"Unknown format type: {format_type}")


def format_error(error: DmAutomationException, format_type: str) -> str:
    """Format a configuration error in the specified format."""
    if format_type == "json":
        return json.dumps(error.to_dict(), indent=2)
    elif format_type == "text":
        return f"Configuration error: {error}"
    else:
        raise ValueError(f"Unknown format type: {format_type}")


def format_validation(results: list[tuple[int, str, str | None]]) -> str:
    """Format per-line validation results.

    Args:
        results: (line number, config, error or None) tuples
    """
    lines = []
    for line_number, config, error in results:
        status = "ok" if error is None else "FAILED"
        lines.append(f"{line_number}: {status} {config}")
        if error is not None:
            lines.append(f"    {error}")
    passed = sum(1 for _, _, error in results if error is None)
    lines.append(f"{passed}/{len(results)} configuration(s) valid")
    return "\n".join(lines)
