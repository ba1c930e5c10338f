"""dmautomation CLI - Main entry point.

Provides commands for parsing, validating and dry-running sub-script
configuration strings.

Exit codes:
    0: Success
    1: Script execution failed
    2: Configuration error
    3: Runtime error
"""

import sys
from pathlib import Path

import click

from .. import __version__
from ..base_exceptions import DmAutomationException
from ..engine import ScriptEngine
from ..logging import setup_logging
from ..mock import RecordingScriptExecutor
from ..model import StaticElementDirectory
from ..script import ConfigStringParser
from .formatters import format_error, format_execution, format_options, format_validation

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_RUNTIME_ERROR = 3

COMMENT_PREFIX = "#"

element_option = click.option(
    "--element",
    "-e",
    "elements",
    multiple=True,
    metavar="NAME=AGENT/ELEMENT",
    help="Element name mapping used for dummy targets given by name (repeatable)",
)
format_option = click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format",
)
verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")


def configure_cli_logging(verbose: bool) -> None:
    """Configure logging for CLI runs (console, human readable)."""
    setup_logging(level="DEBUG" if verbose else "WARNING", structured=False, add_caller_info=verbose)


def build_directory(elements: tuple[str, ...]) -> StaticElementDirectory:
    """Build an element directory from NAME=AGENT/ELEMENT arguments.

    Raises:
        click.BadParameter: If a mapping is malformed
    """
    directory = StaticElementDirectory()
    for mapping in elements:
        name, separator, element = mapping.partition("=")
        if not separator or not name:
            raise click.BadParameter(
                f"{mapping!r} should match NAME=AGENT/ELEMENT", param_hint="--element"
            )
        try:
            directory.add(name, element)
        except DmAutomationException as e:
            raise click.BadParameter(str(e), param_hint="--element") from e
    return directory


@click.group()
@click.version_option(version=__version__, prog_name="dmautomation")
@click.pass_context
def main(ctx: click.Context) -> None:
    """dmautomation CLI - automation script configuration tools.

    Parse, validate and dry-run sub-script configuration strings.
    """
    ctx.ensure_object(dict)


@main.command()
@click.argument("config")
@element_option
@format_option
@verbose_option
def parse(config: str, elements: tuple[str, ...], format_type: str, verbose: bool) -> None:
    """Parse a configuration string and print its execution tokens.

    CONFIG: Configuration string, e.g. 'Script:Name|Dummy=1/2|Param=Value|||Lock'
    """
    configure_cli_logging(verbose)
    parser = ConfigStringParser(build_directory(elements))

    try:
        options = parser.parse(config)
    except DmAutomationException as e:
        click.echo(format_error(e, format_type), err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    click.echo(format_options(options, format_type))
    sys.exit(EXIT_SUCCESS)


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@element_option
@verbose_option
def validate(config_path: str, elements: tuple[str, ...], verbose: bool) -> None:
    """Validate a file of configuration strings, one per line.

    Blank lines and lines starting with '#' are skipped.

    CONFIG_PATH: Path to the file with configuration strings
    """
    configure_cli_logging(verbose)
    parser = ConfigStringParser(build_directory(elements))

    try:
        lines = Path(config_path).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error reading {config_path}: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    results: list[tuple[int, str, str | None]] = []
    for line_number, line in enumerate(lines, start=1):
        config = line.strip()
        if not config or config.startswith(COMMENT_PREFIX):
            continue
        try:
            parser.parse(config)
        except DmAutomationException as e:
            results.append((line_number, config, str(e)))
        else:
            results.append((line_number, config, None))

    click.echo(format_validation(results))
    if any(error is not None for _, _, error in results):
        sys.exit(EXIT_CONFIG_ERROR)
    sys.exit(EXIT_SUCCESS)


@main.command()
@click.argument("config")
@element_option
@format_option
@click.option("--dry-run", is_flag=True, help="Record the request instead of sending it")
@verbose_option
def run(
    config: str,
    elements: tuple[str, ...],
    format_type: str,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Run the script described by a configuration string.

    CONFIG: Configuration string
    """
    configure_cli_logging(verbose)

    if not dry_run:
        click.echo(
            "Error: no platform connection is available from the command line; use --dry-run",
            err=True,
        )
        sys.exit(EXIT_RUNTIME_ERROR)

    engine = ScriptEngine(RecordingScriptExecutor(), resolver=build_directory(elements))

    try:
        result = engine.run_config(config)
    except DmAutomationException as e:
        click.echo(format_error(e, format_type), err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    click.echo(format_execution(result, format_type))
    sys.exit(EXIT_SUCCESS if result.success else EXIT_EXECUTION_FAILED)


if __name__ == "__main__":
    main()
