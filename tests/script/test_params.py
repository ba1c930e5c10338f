"""Tests for reading script parameters."""

from datetime import datetime
from enum import Enum
from unittest.mock import Mock

import pytest

from dmautomation.exceptions import InvalidArgumentError, InvalidScriptParamError
from dmautomation.script import DictScriptParamSource, ScriptParamReader, change_type
from dmautomation.script.params import ScriptParam, from_oa_date


class Severity(Enum):
    MINOR = 1
    MAJOR = 2


@pytest.fixture
def reader():
    return ScriptParamReader(
        DictScriptParamSource(
            {"Count": "42", "Ratio": "0.5", "Enabled": "True", "Severity": "2", "Name": "Router"}
        )
    )


class TestScriptParamReader:
    """Test ScriptParamReader class."""

    def test_raw_value_by_name(self, reader):
        assert reader.get_raw("Name") == "Router"

    def test_value_by_id(self, reader):
        # ids follow the mapping order starting at 1
        assert reader.get_value(1, int) == 42

    @pytest.mark.parametrize(
        "key,as_type,expected",
        [
            ("Count", int, 42),
            ("Ratio", float, 0.5),
            ("Enabled", bool, True),
            ("Severity", Severity, Severity.MAJOR),
            ("Name", str, "Router"),
        ],
    )
    def test_typed_values(self, reader, key, as_type, expected):
        assert reader.get_value(key, as_type) == expected

    def test_default_type_is_str(self, reader):
        assert reader.get_value("Count") == "42"

    def test_selector(self, reader):
        assert reader.get_value_with("Name", str.upper) == "ROUTER"

    def test_selector_required(self, reader):
        with pytest.raises(InvalidArgumentError):
            reader.get_value_with("Name", None)

    @pytest.mark.parametrize("key", ["", "   ", None])
    def test_blank_name(self, reader, key):
        with pytest.raises(InvalidArgumentError):
            reader.get_value(key)

    def test_undefined_parameter(self, reader):
        with pytest.raises(InvalidScriptParamError) as exc_info:
            reader.get_value("Missing")

        assert exc_info.value.param == "Missing"
        assert "parameter is not defined\nParameter: Missing" in str(exc_info.value)

    def test_undefined_parameter_id(self, reader):
        with pytest.raises(InvalidScriptParamError) as exc_info:
            reader.get_value(99, int)
        assert exc_info.value.param == 99

    def test_uses_source_protocol(self):
        source = Mock()
        source.get_script_param.return_value = ScriptParam(id=3, name="Mode", value="Cold")

        assert ScriptParamReader(source).get_value("Mode") == "Cold"
        source.get_script_param.assert_called_once_with("Mode")

    def test_source_required(self):
        with pytest.raises(InvalidArgumentError):
            ScriptParamReader(None)


class TestChangeType:
    """Test raw value conversion."""

    def test_none_stays_none(self):
        assert change_type(None, int) is None

    @pytest.mark.parametrize("raw,expected", [("true", True), ("FALSE", False), ("1", True), ("0", False)])
    def test_bool(self, raw, expected):
        assert change_type(raw, bool) is expected

    def test_invalid_bool(self):
        with pytest.raises(ValueError):
            change_type("maybe", bool)

    def test_int_with_blanks(self):
        assert change_type(" 7 ", int) == 7

    def test_invalid_int(self):
        with pytest.raises(ValueError):
            change_type("seven", int)

    def test_datetime_from_oa_date(self):
        assert change_type("2.5", datetime) == datetime(1900, 1, 1, 12, 0)

    def test_oa_date_epoch(self):
        assert from_oa_date(0.0) == datetime(1899, 12, 30)

    def test_negative_oa_date_keeps_time_of_day(self):
        assert from_oa_date(-1.25) == datetime(1899, 12, 29, 6, 0)

    def test_oa_date_out_of_range(self):
        with pytest.raises(OverflowError):
            change_type("3000000", datetime)
