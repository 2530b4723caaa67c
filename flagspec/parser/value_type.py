# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueType`, the closed set of value types an option may declare.

The value type of an option decides three things:
- the implicit default used when the option is absent,
- the arity rules (single value vs. accumulated list, bare switch),
- the coercion rules applied to raw tokenizer values.

Type tokens are matched case-sensitively after removing whitespace, so the
grammar accepts `number [ ]` as well as `number[]` but not `Number`.

Example:
    ValueType("number[]")   → ValueType.NUMBER_ARRAY
    ValueType(" string ")   → ValueType.STRING
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ValueType(Enum):
    """
    Value types recognized by the definition grammar.

    Members:
        BOOLEAN: Bare switch. Absent means False.
        NUMBER: Single numeric value. Absent means None.
        NUMBER_ARRAY: Repeatable numeric value. Absent means [].
        STRING: Single text value. Absent means None.
        STRING_ARRAY: Repeatable text value. Absent means [].
    """

    BOOLEAN = "boolean"
    NUMBER = "number"
    NUMBER_ARRAY = "number[]"
    STRING = "string"
    STRING_ARRAY = "string[]"

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = "".join(value.split())
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_array(self) -> bool:
        return self in (ValueType.NUMBER_ARRAY, ValueType.STRING_ARRAY)

    @property
    def is_boolean(self) -> bool:
        return self is ValueType.BOOLEAN

    @property
    def metavar(self) -> str:
        """Upper-cased type annotation used in help output (e.g. `NUMBER[]`)."""
        return self.value.upper()

    def implicit_default(self) -> Any:
        """Return a fresh copy of the value used when the option is absent."""
        if self is ValueType.BOOLEAN:
            return False
        if self.is_array:
            return []
        return None

    def __str__(self) -> str:
        """Return the grammar token of the value type."""
        return self.value
