"""Tests for ScriptLogger."""

from unittest.mock import Mock

from dmautomation.logging import ScriptLogger, get_logger


def test_successful_execution_is_logged():
    base = Mock()
    script_logger = ScriptLogger(base)

    context = script_logger.log_execution_start("Reboot", ["OPTIONS:0"], flags=0)
    script_logger.log_execution_end(context, True)

    base.info.assert_any_call(
        "script_execution_started", script_name="Reboot", tokens=["OPTIONS:0"], flags=0
    )
    event, fields = base.info.call_args.args[0], base.info.call_args.kwargs
    assert event == "script_execution_completed"
    assert fields["token_count"] == 1
    assert fields["success"] is True
    assert fields["duration"] >= 0
    assert "start" not in fields


def test_failed_execution_is_logged_as_error():
    base = Mock()
    script_logger = ScriptLogger(base)

    context = script_logger.log_execution_start("Reboot", [])
    script_logger.log_execution_end(context, False, "Element is locked")

    base.error.assert_called_once()
    assert base.error.call_args.args[0] == "script_execution_failed"
    assert base.error.call_args.kwargs["error"] == "Element is locked"


def test_get_logger_binds_context():
    logger = get_logger("dmautomation.tests")

    # disabled in tests, must not raise
    logger.bind(script_name="Reboot").info("bound_event")
