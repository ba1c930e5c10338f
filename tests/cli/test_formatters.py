"""Tests for output formatters."""

import json

import pytest

from dmautomation.cli.formatters import (
    format_error,
    format_execution,
    format_options,
    format_validation,
)
from dmautomation.exceptions import MissingScriptNameError
from dmautomation.script import ExecutionResult, ScriptRunOptions


@pytest.fixture
def options():
    """Create sample run options."""
    options = ScriptRunOptions("Reboot")
    options.select_param_by_name("Mode", "Cold")
    options.lock_elements = True
    return options


def test_format_options_json(options):
    data = json.loads(format_options(options, "json"))

    assert data["script_name"] == "Reboot"
    assert data["lock_elements"] is True
    assert data["flags"] == 1
    assert data["tokens"] == ["PARAMETERBYNAME:Mode:Cold", "DEFER:FALSE", "CHECKSETS:TRUE", "OPTIONS:1"]


def test_format_options_text(options):
    assert format_options(options, "text").splitlines()[:2] == [
        "Script: Reboot",
        "  PARAMETERBYNAME:Mode:Cold",
    ]


def test_format_execution_failure_text():
    result = ExecutionResult.failed("Reboot", "first\nsecond", [])

    assert format_execution(result, "text") == "Script Reboot failed:\nfirst\nsecond"


def test_format_execution_json():
    result = ExecutionResult.ok("Reboot", ["OPTIONS:0"])

    data = json.loads(format_execution(result, "json"))
    assert data == {"script_name": "Reboot", "success": True, "error": None, "tokens": ["OPTIONS:0"]}


def test_format_validation():
    output = format_validation([(1, "Script:A", None), (3, "Script:B|x", "bad dummies")])

    assert output.splitlines() == [
        "1: ok Script:A",
        "3: FAILED Script:B|x",
        "    bad dummies",
        "1/2 configuration(s) valid",
    ]


def test_unknown_format(options):
    with pytest.raises(ValueError, match="Unknown format type"):
        format_options(options, "xml")


def test_format_error():
    error = MissingScriptNameError("Script:")

    assert format_error(error, "text") == f"Configuration error: {error}"
    data = json.loads(format_error(error, "json"))
    assert data["error"] == "MISSING_SCRIPT_NAME"
    assert data["context"]["segment"] == "script"
