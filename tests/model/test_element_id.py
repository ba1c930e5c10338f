"""Tests for ElementID and StaticElementDirectory."""

import pytest

from dmautomation.exceptions import InvalidArgumentError, TargetNotFoundError
from dmautomation.model import ElementID, ElementRef, StaticElementDirectory


class TestElementID:
    """Test ElementID class."""

    def test_parse(self):
        element = ElementID.parse("5/12")

        assert element == ElementID(5, 12)
        assert element.agent_id == 5
        assert element.element_id == 12

    def test_str(self):
        assert str(ElementID(346, 9001)) == "346/9001"

    @pytest.mark.parametrize("source", ["512", "5/", "/12", "5/12/1", "a/b", "-1/2", ""])
    def test_parse_rejects_bad_format(self, source):
        with pytest.raises(InvalidArgumentError):
            ElementID.parse(source)

    def test_parse_none(self):
        with pytest.raises(InvalidArgumentError):
            ElementID.parse(None)

    @pytest.mark.parametrize("agent_id,element_id", [(-1, 1), (1, -1), ("1", 1), (True, 1)])
    def test_invalid_ids(self, agent_id, element_id):
        with pytest.raises(InvalidArgumentError):
            ElementID(agent_id, element_id)

    def test_is_hashable_and_an_element_ref(self):
        element = ElementID(1, 2)

        assert {element: "x"}[ElementID(1, 2)] == "x"
        assert isinstance(element, ElementRef)


class TestStaticElementDirectory:
    """Test StaticElementDirectory class."""

    def test_resolve(self, directory):
        assert directory.resolve("Router") == ElementID(5, 12)
        assert "Router" in directory
        assert len(directory) == 3

    def test_unknown_name(self, directory):
        with pytest.raises(TargetNotFoundError) as exc_info:
            directory.resolve("router")

        assert exc_info.value.target == "router"
        assert isinstance(exc_info.value, LookupError)

    def test_case_insensitive(self):
        directory = StaticElementDirectory({"Router": ElementID(5, 12)}, case_sensitive=False)

        assert directory.resolve("ROUTER") == ElementID(5, 12)
        assert "router" in directory

    def test_add_rejects_bad_entries(self):
        directory = StaticElementDirectory()

        with pytest.raises(InvalidArgumentError):
            directory.add("", "1/2")
        with pytest.raises(InvalidArgumentError):
            directory.add("Router", "not-an-id")
