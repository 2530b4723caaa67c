"""
Flagspec

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import FlagspecError, SettingsError, ValidationError
from .parser import (
    DefinitionSet,
    OptionDefinition,
    ParseConfig,
    ParseResult,
    ValueType,
    build_definition_set,
    format_help,
    parse,
    parse_definition,
)
from .signals import HelpSignal
from .sinks import ExitSink, FailureSink, RaiseSink

__all__ = [
    "DefinitionSet",
    "ExitSink",
    "FailureSink",
    "FlagspecError",
    "HelpSignal",
    "OptionDefinition",
    "ParseConfig",
    "ParseResult",
    "RaiseSink",
    "SettingsError",
    "ValidationError",
    "ValueType",
    "build_definition_set",
    "format_help",
    "parse",
    "parse_definition",
]
