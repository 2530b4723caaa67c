# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Public entry point: `parse()` turns a token list and a mapping of option spec
strings into a `ParseResult`.

Example Usage:
    result = parse(
        sys.argv[1:],
        {
            "port": "-p,--port:number=3000; Port to use",
            "address": '-a,--address:string="0.0.0.0"; Address to use',
            "cors": "--cors:boolean; Enable CORS",
            "help": "--help:boolean; Show this help",
        },
        ParseConfig(usage="serve [<options>] <paths>..."),
    )
    result.options["port"]  # 3000
    result.help()           # help text as a string

Each call builds its own `DefinitionSet`; nothing is cached between calls.
Configuration errors (`SettingsError`) are always raised. Validation errors and
help requests go to the configured `FailureSink`.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from flagspec.exceptions import ValidationError
from flagspec.logger import logger
from flagspec.parser.definitions import DefinitionSet, build_definition_set
from flagspec.parser.help_formatter import format_help
from flagspec.parser.parser_types import ParseResult, TokenizedArgs
from flagspec.parser.tokenizer import tokenize
from flagspec.parser.validator import resolve_option, validate
from flagspec.signals import HelpSignal
from flagspec.sinks import ExitSink, FailureSink, RaiseSink

HELP_KEY = "help"


@dataclass
class ParseConfig:
    """
    Options controlling a single `parse()` call.

    Attributes:
        usage (str | None): Usage line shown at the top of the help text.
        exit_on_process_error (bool): Exit the process on validation errors and
            help requests (True) or raise instead (False).
        handle_help_flag (bool): Treat a boolean option keyed "help" as a help
            request when it is set.
        require_target (bool | str): Require at least one positional target.
            A non-empty string enables the check with that error message;
            an empty string leaves it off.
        sink (FailureSink | None): Explicit sink, overriding the one chosen by
            `exit_on_process_error`.
    """

    usage: str | None = None
    exit_on_process_error: bool = True
    handle_help_flag: bool = True
    require_target: bool | str = False
    sink: FailureSink | None = None

    def get_sink(self) -> FailureSink:
        if self.sink is not None:
            return self.sink
        if self.exit_on_process_error:
            return ExitSink()
        return RaiseSink()


class HelpPrinter:
    """
    Help retrieval bound to the definitions of one parse.

    `printer()` returns the help text. `printer(status)` hands the text to the
    sink, which exits with that status (or raises `HelpSignal`); a sink that
    returns instead gets the text handed back.
    """

    def __init__(
        self, usage: str | None, definition_set: DefinitionSet, sink: FailureSink
    ) -> None:
        self.usage = usage
        self.definition_set = definition_set
        self.sink = sink

    def __call__(self, status: int | None = None) -> str:
        text = format_help(self.usage, self.definition_set)
        if status is None:
            return text
        self.sink.exit(text, status)
        return text

    def __str__(self) -> str:
        return self()


def help_requested(definition_set: DefinitionSet, tokenized: TokenizedArgs) -> bool:
    """Check whether the boolean option keyed "help" resolves to True."""
    definition = definition_set.get(HELP_KEY)
    if definition is None or not definition.value_type.is_boolean:
        return False
    return resolve_option(definition, tokenized) is True


def parse(
    tokens: Sequence[str],
    definitions: Mapping[str, str],
    config: ParseConfig | None = None,
) -> ParseResult:
    """
    Parse a command line against option spec strings.

    Args:
        tokens (Sequence[str]): Arguments, without the program name.
        definitions (Mapping[str, str]): Caller key to option spec string.
        config (ParseConfig | None): Parse options; defaults apply when None.

    Returns:
        ParseResult: targets, typed options, rest and a bound help printer.

    Raises:
        SettingsError: If the definitions are invalid (always raised).
        ValidationError: If the command line is invalid and the sink does not
            exit. A sink that only records the failure and returns still ends
            the parse with the error.
        HelpSignal: If help was requested and the sink does not exit.
        SystemExit: If the sink terminates the process.
    """
    config = config or ParseConfig()
    definition_set = build_definition_set(definitions)
    sink = config.get_sink()
    printer = HelpPrinter(config.usage, definition_set, sink)
    tokenized = tokenize(
        tokens,
        boolean_names=definition_set.boolean_names(),
        known_names=definition_set.names(),
    )
    try:
        if config.handle_help_flag and help_requested(definition_set, tokenized):
            logger.debug("Help requested")
            raise HelpSignal(printer(0), 0)
        result = validate(definition_set, tokenized, config.require_target)
    except ValidationError as error:
        sink.fail(error, printer())
        raise
    result.help = printer
    return result
