"""dmautomation Command Line Interface.

Provides CLI commands for:
- Parsing configuration strings into execution tokens
- Validating files of configuration strings
- Dry-running scripts described by configuration strings

Usage:
    python -m dmautomation.cli --help
    python -m dmautomation.cli parse 'Script:Reboot|1=5/12|||Reboot|Asynchronous'

Or via the installed entry point:
    dmautomation --help
"""

from .main import main

__all__ = ["main"]
