"""Parser for one-line sub-script configuration strings.

A configuration string describes a script invocation in a single line::

    Script:ScriptName|Dummy=ElementName or DmaID/ElementID;...|Param=Value;...|Memory=Value;...|Tooltip|Option1,Option2,...

Segments are separated by ``|``. Only the first one is mandatory; missing
trailing segments and blank segments are ignored, and so is the tooltip.
Binding segments are split on both ``;`` and ``=`` and read pairwise, so
every entry must contribute exactly one reference and one value.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from ..base_exceptions import DmAutomationException
from ..exceptions import InvalidArgumentError, MalformedConfigError, MissingScriptNameError
from ..model import ElementID, ElementRef, ElementResolver
from .options import ScriptRunOptions

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = "|"
ENTRY_SEPARATORS = re.compile(r"[;=]")
OPTION_SEPARATOR = ","
TARGET_ID_SEPARATOR = "/"

SCRIPT_SEGMENT = 0
DUMMIES_SEGMENT = 1
PARAMETERS_SEGMENT = 2
MEMORY_SEGMENT = 3
TOOLTIP_SEGMENT = 4
OPTIONS_SEGMENT = 5

DUMMIES_FORMAT = "DummyName=ElementName or DmaID/ElementID;..."
PARAMETERS_FORMAT = "ParameterName1=SingleValue;ParameterName2=#ValueFile;..."
MEMORY_FORMAT = "MemoryName=MemoryFileName;..."
OPTIONS_FORMAT = "Option1,Option2,..."


class ScriptOption(Enum):
    """Flags recognized in the options segment (matched case-insensitively)."""

    FORCE_LOCK = "ForceLock"
    LOCK = "Lock"
    NO_SET_CHECK = "NoSetCheck"
    ASYNCHRONOUS = "Asynchronous"
    NO_WAIT = "NoWait"

    @classmethod
    def lookup(cls, token: str) -> "ScriptOption | None":
        """Find the option matching a token, ignoring case and surrounding blanks."""
        wanted = token.strip().casefold()
        for option in cls:
            if option.value.casefold() == wanted:
                return option
        return None


@dataclass(frozen=True)
class ConfigEntry:
    """One ``ref=value`` pair of a binding segment."""

    ref: str
    value: str

    @property
    def index(self) -> int | None:
        """Position referenced by the entry, or None when it references a name."""
        if self.ref.isascii() and self.ref.isdigit():
            return int(self.ref)
        return None


def split_entries(segment: str, raw_text: str, expected_format: str) -> list[ConfigEntry]:
    """Split a binding segment into its entries.

    Args:
        segment: Segment name used in error reports
        raw_text: Raw segment text
        expected_format: Expected shape used in error reports

    Returns:
        Entries in the order they appear

    Raises:
        MalformedConfigError: If the split yields an odd number of tokens
    """
    tokens = ENTRY_SEPARATORS.split(raw_text)
    if len(tokens) % 2:
        raise MalformedConfigError(
            segment,
            raw_text,
            expected_format,
            detail=f"expected reference/value pairs, got {len(tokens)} tokens",
        )
    return [ConfigEntry(tokens[i], tokens[i + 1]) for i in range(0, len(tokens), 2)]


def parse_script_name(raw_text: str) -> str:
    """Extract the script name from the first segment (``Script:<name>``).

    Raises:
        MissingScriptNameError: If there is no ``:`` or the name is blank
    """
    _, separator, name = raw_text.partition(":")
    if not separator or not name.strip():
        raise MissingScriptNameError(raw_text)
    return name


def parse_options(raw_text: str) -> set[ScriptOption]:
    """Collect the recognized options of an options segment.

    Unrecognized tokens are ignored.
    """
    found: set[ScriptOption] = set()
    for token in raw_text.split(OPTION_SEPARATOR):
        option = ScriptOption.lookup(token)
        if option is None:
            if token.strip():
                logger.debug(f"Ignoring unknown script option: {token!r}")
            continue
        found.add(option)
    return found


class ConfigStringParser:
    """Convert configuration strings into ScriptRunOptions.

    Dummy targets written as ``DmaID/ElementID`` are used as they are; element
    names are looked up through the resolver.
    """

    def __init__(self, resolver: ElementResolver | None = None) -> None:
        """Initialize the parser.

        Args:
            resolver: Resolver used for dummy targets given by element name
        """
        self.resolver = resolver

    def parse(self, config: str) -> ScriptRunOptions:
        """Parse a configuration string.

        Args:
            config: Configuration string

        Returns:
            A fully populated ScriptRunOptions

        Raises:
            InvalidArgumentError: If config is None
            MissingScriptNameError: If the first segment names no script
            MalformedConfigError: If any segment is malformed
        """
        if config is None:
            raise InvalidArgumentError("config", "must not be None")

        segments = config.split(SEGMENT_SEPARATOR)
        if len(segments) > OPTIONS_SEGMENT + 1:
            logger.debug(f"Ignoring {len(segments) - OPTIONS_SEGMENT - 1} extra segment(s)")

        def segment(position: int) -> str | None:
            if position >= len(segments) or not segments[position].strip():
                return None
            return segments[position]

        options = ScriptRunOptions(parse_script_name(segments[SCRIPT_SEGMENT]))

        dummies = segment(DUMMIES_SEGMENT)
        if dummies is not None:
            self._add_dummies(options, dummies)

        parameters = segment(PARAMETERS_SEGMENT)
        if parameters is not None:
            self._add_parameters(options, parameters)

        memory = segment(MEMORY_SEGMENT)
        if memory is not None:
            self._add_memory(options, memory)

        flags = segment(OPTIONS_SEGMENT)
        if flags is not None:
            self._apply_options(options, flags)

        logger.debug(f"Parsed configuration for script {options.script_name!r}")
        return options

    def _resolve_target(self, raw_text: str, target: str) -> ElementRef:
        if TARGET_ID_SEPARATOR in target:
            try:
                return ElementID.parse(target)
            except InvalidArgumentError as e:
                raise MalformedConfigError(
                    "dummies", raw_text, DUMMIES_FORMAT, detail=e.message
                ) from e

        if self.resolver is None:
            raise MalformedConfigError(
                "dummies",
                raw_text,
                DUMMIES_FORMAT,
                detail=f"no element resolver available for {target!r}",
            )

        try:
            return self.resolver.resolve(target)
        except (DmAutomationException, LookupError) as e:
            raise MalformedConfigError("dummies", raw_text, DUMMIES_FORMAT, detail=str(e)) from e

    def _add_dummies(self, options: ScriptRunOptions, raw_text: str) -> None:
        for entry in split_entries("dummies", raw_text, DUMMIES_FORMAT):
            self._check_ref("dummies", raw_text, DUMMIES_FORMAT, entry)
            element = self._resolve_target(raw_text, entry.value)
            index = entry.index
            if index is None:
                options.select_dummy_by_name(entry.ref, element.agent_id, element.element_id)
            else:
                options.select_dummy_by_index(index, element.agent_id, element.element_id)

    def _add_parameters(self, options: ScriptRunOptions, raw_text: str) -> None:
        for entry in split_entries("parameters", raw_text, PARAMETERS_FORMAT):
            self._check_ref("parameters", raw_text, PARAMETERS_FORMAT, entry)
            index = entry.index
            if index is None:
                options.select_param_by_name(entry.ref, entry.value)
            else:
                options.select_param_by_index(index, entry.value)

    def _add_memory(self, options: ScriptRunOptions, raw_text: str) -> None:
        for entry in split_entries("memory", raw_text, MEMORY_FORMAT):
            self._check_ref("memory", raw_text, MEMORY_FORMAT, entry)
            index = entry.index
            if index is None:
                options.select_memory_by_name(entry.ref, entry.value)
            else:
                options.select_memory_by_index(index, entry.value)

    @staticmethod
    def _check_ref(segment: str, raw_text: str, expected_format: str, entry: ConfigEntry) -> None:
        if not entry.ref:
            raise MalformedConfigError(
                segment, raw_text, expected_format, detail="empty reference"
            )

    @staticmethod
    def _apply_options(options: ScriptRunOptions, raw_text: str) -> None:
        found = parse_options(raw_text)
        if ScriptOption.FORCE_LOCK in found:
            options.force_lock_elements = True
        if ScriptOption.LOCK in found:
            options.lock_elements = True
        if ScriptOption.NO_SET_CHECK in found:
            options.perform_checks = False
        if ScriptOption.ASYNCHRONOUS in found:
            options.synchronous = False
        if ScriptOption.NO_WAIT in found:
            options.wait_when_locked = False


def parse_config_string(config: str, resolver: ElementResolver | None = None) -> ScriptRunOptions:
    """Parse a configuration string with a one-off parser."""
    return ConfigStringParser(resolver).parse(config)
