# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionDefinition` dataclass, the structured form of one option
spec string such as `-p,--port:number=3000; Port to use`.

Instances are built by `parse_definition()` and never mutated afterwards.
Array defaults are kept as tuples and handed out as fresh lists so that a
caller mutating a parse result cannot leak into the next parse.

Key Attributes:
- `short_flag`: Optional single alphanumeric alias (`p` for `-p`)
- `long_flag`: Required alphanumeric name (`port` for `--port`)
- `value_type`: `ValueType` deciding arity, coercion and implicit default
- `required`: Whether the option must be supplied when it has no default
- `default_value`: Typed default, or the implicit default of `value_type`
- `description`: Free text shown in help output

Used By:
- `DefinitionSet` and the validator
- Help rendering
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from flagspec.parser.value_type import ValueType


@dataclass(frozen=True)
class OptionDefinition:
    """
    Represents one declared command-line option.

    Attributes:
        short_flag (str | None): Single-character alias, without the dash.
        long_flag (str): Long name, without the dashes.
        value_type (ValueType): The declared type.
        required (bool): True if the option is marked with `!`.
        default_value (Any): Explicit default, or the implicit default of the type.
        description (str): Help text for the option.
        has_explicit_default (bool): True if the spec carried an `=default` clause.
    """

    short_flag: str | None
    long_flag: str
    value_type: ValueType
    required: bool = False
    default_value: Any = None
    description: str = ""
    has_explicit_default: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.default_value, list):
            object.__setattr__(self, "default_value", tuple(self.default_value))

    def aliases(self) -> list[str]:
        """Flag names with their prefixes, short first (`-p`, `--port`)."""
        aliases = [f"--{self.long_flag}"]
        if self.short_flag is not None:
            aliases.insert(0, f"-{self.short_flag}")
        return aliases

    def resolve_default(self) -> Any:
        """Return a fresh copy of the default value."""
        if isinstance(self.default_value, tuple):
            return list(self.default_value)
        return self.default_value

    def get_flags_text(self) -> str:
        """Get the left help column: aliases plus type annotation."""
        flags = ", ".join(self.aliases())
        if self.value_type.is_boolean:
            return flags
        return f"{flags} {self.value_type.metavar}"

    def get_annotation_text(self) -> str:
        """Get the `(required)` / `(default:...)` suffix for help output."""
        if self.required:
            return "(required)"
        default = self.resolve_default()
        if self.has_explicit_default and default != self.value_type.implicit_default():
            return f"(default:{json.dumps(default)})"
        return ""
