# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Decodes and type-checks the JSON-literal defaults embedded in option specs.

A default is written as a JSON literal that must match the declared type:

    --port:number=3000
    --address:string="0.0.0.0"
    --ids:number[]=[1, 2]
    --tags:string[]=["a", "b"]
    --verbose:boolean=true

Anything that is not valid JSON, or that decodes to the wrong shape, is a
`SettingsError`. Non-finite numbers (`NaN`, `Infinity`) are rejected because
they have no JSON rendering in help output.
"""
from __future__ import annotations

import json
from typing import Any

from flagspec.exceptions import SettingsError
from flagspec.parser.utils import is_number
from flagspec.parser.value_type import ValueType


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"non-finite number {constant} is not allowed")


def decode_literal(literal: str) -> Any:
    """
    Decode a JSON literal.

    Raises:
        ValueError: If the literal is not valid JSON.
    """
    return json.loads(literal, parse_constant=_reject_constant)


def matches_type(value: Any, value_type: ValueType) -> bool:
    """Check that a decoded literal has the runtime shape of `value_type`."""
    if value_type is ValueType.BOOLEAN:
        return isinstance(value, bool)
    if value_type is ValueType.NUMBER:
        return is_number(value)
    if value_type is ValueType.STRING:
        return isinstance(value, str)
    if not isinstance(value, list):
        return False
    if value_type is ValueType.NUMBER_ARRAY:
        return all(is_number(item) for item in value)
    return all(isinstance(item, str) for item in value)


def resolve_default(literal: str | None, value_type: ValueType, long_flag: str) -> Any:
    """
    Decode the default clause of a spec, or fall back to the implicit default.

    Args:
        literal (str | None): Text after `=`, or None when there is no clause.
        value_type (ValueType): Declared type of the option.
        long_flag (str): Long name, used in error messages.

    Returns:
        Any: The typed default value.

    Raises:
        SettingsError: If the literal is malformed or ill-typed.
    """
    if literal is None:
        return value_type.implicit_default()
    literal = literal.strip()
    if not literal:
        raise SettingsError(f"The default value of --{long_flag} is empty")
    try:
        value = decode_literal(literal)
    except ValueError as error:
        raise SettingsError(
            f"The default value of --{long_flag} is not a valid literal: {literal} ({error})"
        ) from error
    if not matches_type(value, value_type):
        raise SettingsError(
            f"The default value of --{long_flag} should be of type {value_type}: {literal}"
        )
    return value
