"""Tests for the exception hierarchy."""

import pytest

from dmautomation.base_exceptions import DmAutomationException
from dmautomation.exceptions import (
    ExecutionFailedError,
    InvalidArgumentError,
    InvalidScriptParamError,
    MalformedConfigError,
    MissingScriptNameError,
    ProtocolNotFoundError,
    TargetNotFoundError,
)


def test_base_exception_string():
    assert str(DmAutomationException("boom")) == "boom"
    assert str(DmAutomationException("boom", error_code="E1")) == "[E1] boom"
    assert DmAutomationException("boom").context == {}


def test_invalid_argument_is_value_error():
    error = InvalidArgumentError("name", "must be a non-empty string")

    assert isinstance(error, ValueError)
    assert error.error_code == "INVALID_ARGUMENT"
    assert error.message == "Invalid argument 'name': must be a non-empty string"
    assert error.context["argument"] == "name"


def test_malformed_config_message():
    error = MalformedConfigError("memory", "Mode", "MemoryName=MemoryFileName;...")

    assert error.segment == "memory"
    assert error.raw_text == "Mode"
    assert error.message == (
        "'Mode' is not a valid memory configuration. "
        "It should match the format 'MemoryName=MemoryFileName;...'"
    )


def test_missing_script_name_is_malformed_config():
    error = MissingScriptNameError("Script:")

    assert isinstance(error, MalformedConfigError)
    assert error.segment == "script"
    assert error.error_code == "MISSING_SCRIPT_NAME"
    assert error.expected_format == "Script:ScriptName"


def test_execution_failed():
    error = ExecutionFailedError("Reboot", "first\nsecond")

    assert error.script_name == "Reboot"
    assert error.message.endswith("first\nsecond")


@pytest.mark.parametrize(
    "error",
    [TargetNotFoundError("Router"), ProtocolNotFoundError("Generic Router", "1.0")],
)
def test_lookup_errors(error):
    assert isinstance(error, LookupError)
    assert isinstance(error, DmAutomationException)


def test_invalid_script_param_message():
    error = InvalidScriptParamError("Script parameter is not defined", "Retries")

    assert error.message == "Script parameter is not defined\nParameter: Retries"
    assert error.param == "Retries"


def test_to_dict():
    error = MalformedConfigError("dummies", "d1", "DummyName=ElementName or DmaID/ElementID;...")

    data = error.to_dict()

    assert data["error"] == "MALFORMED_CONFIG"
    assert data["message"] == error.message
    assert data["context"]["segment"] == "dummies"


def test_to_dict_without_code_uses_class_name():
    data = DmAutomationException("boom", context={"path": object}).to_dict()

    assert data["error"] == "DmAutomationException"
    assert data["context"]["path"] == str(object)
