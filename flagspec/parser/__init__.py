"""
Flagspec

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .definitions import DefinitionSet, build_definition_set
from .getargs import HelpPrinter, ParseConfig, parse
from .grammar import parse_definition
from .help_formatter import format_help
from .option_definition import OptionDefinition
from .parser_types import FlagOccurrence, ParseResult, RawValue, TokenizedArgs
from .tokenizer import tokenize
from .validator import validate
from .value_type import ValueType

__all__ = [
    "DefinitionSet",
    "FlagOccurrence",
    "HelpPrinter",
    "OptionDefinition",
    "ParseConfig",
    "ParseResult",
    "RawValue",
    "TokenizedArgs",
    "ValueType",
    "build_definition_set",
    "format_help",
    "parse",
    "parse_definition",
    "tokenize",
    "validate",
]
