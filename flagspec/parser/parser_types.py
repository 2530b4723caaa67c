# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Data structures exchanged between the tokenizer, the validator and callers.

Contents:
- `RawValue`: One value taken from the command line, with its original text and
  the number auto-detected from it (if it looks numeric).
- `FlagOccurrence`: One appearance of a flag token, with the prefix it was
  written with and its value (or `None` when no value followed it).
- `TokenizedArgs`: The complete tokenizer output: positional targets, flag
  occurrences in input order, and the verbatim remainder after `--`.
- `ParseResult`: The typed outcome handed back to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class RawValue:
    """A command-line value as the tokenizer saw it."""

    text: str
    number: int | float | None = None


@dataclass(frozen=True)
class FlagOccurrence:
    """
    A single flag token found before the `--` terminator.

    Attributes:
        name (str): The flag name without its prefix (`foo` for `--foo`).
        prefix (str): `-` or `--`, exactly as written.
        value (RawValue | None): The associated value, or None when the flag was
            bare (a boolean switch, or a value-taking flag missing its value).
        attached (bool): True when the value was glued to the flag token
            (`--foo=1`, `-f1`) rather than taken from the following token.
    """

    name: str
    prefix: str
    value: RawValue | None = None
    attached: bool = False

    @property
    def token(self) -> str:
        """The flag as written, without any value."""
        return f"{self.prefix}{self.name}"


@dataclass
class TokenizedArgs:
    """Output of `tokenize()`."""

    targets: list[str] = field(default_factory=list)
    flags: list[FlagOccurrence] = field(default_factory=list)
    rest: list[str] = field(default_factory=list)

    def values(self, name: str) -> list[FlagOccurrence]:
        """Return the occurrences of a flag name, in input order."""
        return [occurrence for occurrence in self.flags if occurrence.name == name]


@dataclass
class ParseResult:
    """
    Typed outcome of a parse.

    Attributes:
        targets (list[str]): Positional tokens before `--`.
        options (dict[str, Any]): Caller key to typed value, for every key.
        rest (list[str]): Tokens after the first bare `--`, verbatim.
        help (Callable | None): Help printer bound to the parsed definitions.
    """

    targets: list[str] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)
    rest: list[str] = field(default_factory=list)
    help: Callable[..., str] | None = field(default=None, compare=False, repr=False)
