# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parses option spec strings into `OptionDefinition` objects.

Grammar (whitespace between terminals is ignored, except inside quoted strings):

    spec        := (short ",")? "--" long ":" type (required | "=" default)? (";" description)?
    short       := "-" single alphanumeric character
    long        := one or more alphanumeric characters
    type        := "boolean" | "number" | "number[]" | "string" | "string[]"
    required    := "!"
    default     := JSON literal matching type
    description := remaining text

Examples:
    -p,--port:number=3000; Port to use
    --address:string="0.0.0.0"; Address to use
    -n , --num : number [ ] = [ 1 , 2 ]; Numbers
    --name:string!; Name of the thing (required)

The description starts at the first `;` that is not inside a double-quoted
string, so defaults such as `--sep:string=";"` keep their semicolon.
"""
from __future__ import annotations

import re

from flagspec.exceptions import SettingsError
from flagspec.logger import logger
from flagspec.parser.defaults import resolve_default
from flagspec.parser.option_definition import OptionDefinition
from flagspec.parser.value_type import ValueType

_HEAD = re.compile(
    r"""
    ^\s*
    (?:-\s*(?P<short>[A-Za-z0-9])\s*,\s*)?
    --\s*(?P<long>[A-Za-z0-9]+)\s*
    :\s*(?P<type>[A-Za-z]+(?:\s*\[\s*\])?)\s*
    (?P<required>!)?\s*
    (?:=(?P<default>.*?))?
    \s*(?P<trailing>!)?\s*
    $
    """,
    re.VERBOSE | re.DOTALL,
)


def split_description(spec: str) -> tuple[str, str]:
    """
    Split a spec at the first `;` outside of a double-quoted string.

    Returns:
        tuple[str, str]: The head (flags, type, default) and the stripped
        description (empty when there is none).

    Raises:
        SettingsError: If a quoted string is never closed.
    """
    in_string = False
    escaped = False
    for index, char in enumerate(spec):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == ";":
            return spec[:index], spec[index + 1 :].strip()
    if in_string:
        raise SettingsError(f"Syntax Error: unterminated string in {spec!r}")
    return spec, ""


def parse_definition(spec: str) -> OptionDefinition:
    """
    Parse one option spec string.

    Args:
        spec (str): The spec, e.g. `-p,--port:number=3000; Port to use`.

    Returns:
        OptionDefinition: The fully populated definition.

    Raises:
        SettingsError: If the spec does not follow the grammar, names an unknown
            type, carries a malformed or ill-typed default, or is marked both
            required and defaulted.
    """
    if not isinstance(spec, str):
        raise SettingsError(f"Option spec must be a string, got {type(spec).__name__}")
    head, description = split_description(spec)
    match = _HEAD.match(head)
    if match is None:
        raise SettingsError(f"Syntax Error: {spec!r}")

    long_flag = match.group("long")
    try:
        value_type = ValueType(match.group("type"))
    except ValueError:
        raise SettingsError(
            f"Unknown type for --{long_flag}: {match.group('type')!r}"
        ) from None

    literal = match.group("default")
    required = bool(match.group("required") or match.group("trailing"))
    if required and literal is not None:
        raise SettingsError(
            f"--{long_flag} cannot be both required and have a default value: {spec!r}"
        )

    definition = OptionDefinition(
        short_flag=match.group("short"),
        long_flag=long_flag,
        value_type=value_type,
        required=required,
        default_value=resolve_default(literal, value_type, long_flag),
        description=description,
        has_explicit_default=literal is not None,
    )
    logger.debug("Parsed option spec %r -> %s", spec, definition)
    return definition
