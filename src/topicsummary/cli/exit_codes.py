"""
Standardized exit codes for topicsummary CLI commands.

This module keeps exit codes consistent across commands, making the CLI
easy to script and test.
"""

from typing import Optional

import typer
from rich.console import Console


# Exit code constants
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_USER_CANCEL = 130  # Standard for SIGINT (Ctrl+C)

# Reports can go to stdout, so messages go to stderr
_err_console = Console(stderr=True)


class CliExit(typer.Exit):
    """
    Standardized CLI exit exception that extends typer.Exit with consistent codes.

    Usage:
        raise CliExit.error("Operation failed")  # Error with message
        raise CliExit.config_error("Bad config")  # Configuration problem
    """

    def __init__(self, code: int, message: Optional[str] = None):
        """
        Initialize CLI exit.

        Args:
            code: Exit code (use constants: EXIT_SUCCESS, EXIT_ERROR, etc.)
            message: Optional message to display before exiting
        """
        self.message = message
        super().__init__(code)
        if message:
            style = "green" if code == EXIT_SUCCESS else "red"
            _err_console.print(message, style=style, markup=False, highlight=False)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        """Create an error exit."""
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        """Create a configuration error exit."""
        return cls(EXIT_CONFIG_ERROR, message)

    @classmethod
    def user_cancel(cls, message: Optional[str] = None) -> "CliExit":
        """Create a user cancellation exit."""
        return cls(EXIT_USER_CANCEL, message or "Operation cancelled by user")
