# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Failure sinks: the terminal actions taken on validation failure or help request.

The validator never prints or exits on its own. `parse()` hands the error (or
the help text) to a `FailureSink`, so that command-line programs can exit while
embedders and tests receive a normal exception instead.

Sinks:
- ExitSink: Print with rich and terminate the process (default).
- RaiseSink: Re-raise the `ValidationError`; raise `HelpSignal` for help.
"""
from __future__ import annotations

import sys
from typing import NoReturn, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape

from flagspec.console import console, err_console
from flagspec.exceptions import ValidationError
from flagspec.logger import logger
from flagspec.signals import HelpSignal


@runtime_checkable
class FailureSink(Protocol):
    """
    Receives the terminal outcome of a parse.

    Sinks normally exit or raise. A sink that only records the outcome may
    return: `parse()` then raises the `ValidationError` or a `HelpSignal`
    itself, so no result is produced either way.
    """

    def fail(self, error: ValidationError, help_text: str) -> None: ...

    def exit(self, help_text: str, status: int = 0) -> None: ...


class ExitSink:
    """
    Print and terminate the process.

    Help requested with status 0 goes to stdout. Everything else goes to stderr,
    and a validation failure exits with status 1.
    """

    def __init__(
        self, console: Console = console, err_console: Console = err_console
    ) -> None:
        self.console = console
        self.err_console = err_console

    def fail(self, error: ValidationError, help_text: str) -> NoReturn:
        logger.info("Validation failed: %s", error)
        self.err_console.print(
            f"[bold red]error:[/] {escape(error.message)}", highlight=False, soft_wrap=True
        )
        if help_text:
            self.err_console.print(help_text, markup=False, highlight=False, soft_wrap=True)
        sys.exit(1)

    def exit(self, help_text: str, status: int = 0) -> NoReturn:
        target = self.console if status == 0 else self.err_console
        target.print(help_text, markup=False, highlight=False, soft_wrap=True)
        sys.exit(status)


class RaiseSink:
    """Propagate outcomes as exceptions, leaving the process alone."""

    def fail(self, error: ValidationError, help_text: str) -> NoReturn:
        logger.debug("Validation failed: %s", error)
        raise error

    def exit(self, help_text: str, status: int = 0) -> NoReturn:
        raise HelpSignal(help_text, status)
