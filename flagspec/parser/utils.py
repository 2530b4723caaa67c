# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value detection and coercion utilities for flagspec argument parsing.

Functions:
- looks_numeric: Check whether a token has the shape of a number.
- detect_number: Return the number a token spells, or None.
- is_number: Check that a decoded value is a real number (bools excluded).
- coerce_number: Coerce a raw command-line value to a number.
- coerce_string: Coerce a raw command-line value back to its text.
- format_aliases: Render the aliases of a definition for error messages.
"""
from __future__ import annotations

import math
import re
from typing import Any

from flagspec.parser.parser_types import RawValue

_DECIMAL = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")
_INTEGER = re.compile(r"[-+]?\d+")
_HEXADECIMAL = re.compile(r"0[xX][0-9a-fA-F]+")


def looks_numeric(text: str) -> bool:
    """Check the shape of a token only: decimal, exponent or hexadecimal."""
    return any(
        pattern.fullmatch(text) for pattern in (_HEXADECIMAL, _INTEGER, _DECIMAL)
    )


def detect_number(text: str) -> int | float | None:
    """
    Return the numeric value a token spells, or None if it is not numeric.

    Integral decimal tokens become `int`, hexadecimal tokens (`0x1F`) become
    `int`, every other decimal form (`1.5`, `.5`, `1e3`) becomes `float`.
    Tokens that look numeric but have no usable value (integers past the
    interpreter's digit limit, floats that overflow to infinity) give None, so
    their text is still available to string options.

    Args:
        text (str): The raw token text.

    Returns:
        int | float | None: The detected number, if any.
    """
    try:
        if _HEXADECIMAL.fullmatch(text):
            return int(text, 16)
        if _INTEGER.fullmatch(text):
            return int(text)
    except ValueError:
        return None
    if _DECIMAL.fullmatch(text):
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def is_number(value: Any) -> bool:
    """Return True for ints and floats, never for bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_number(value: RawValue) -> int | float:
    """
    Convert a raw value to a number.

    Raises:
        ValueError: If the tokenizer did not detect a number in the value.
    """
    if value.number is None:
        raise ValueError(f"'{value.text}' is not a number")
    return value.number


def coerce_string(value: RawValue) -> str:
    """Return the original text of a raw value, even if it looked numeric."""
    return value.text


def format_aliases(aliases: list[str]) -> str:
    return ", ".join(aliases)
