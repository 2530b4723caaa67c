# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw token list into positional targets, flag occurrences and the
verbatim remainder after `--`.

The tokenizer knows which names are boolean switches (a boolean never takes the
following token as its value) but is otherwise unaware of option types. It
auto-detects numeric values positionally; the validator decides whether a
number or its original text is wanted.

Recognized forms:
    --name=value    long flag, attached value (may be empty)
    --name value    long flag, value from the next token
    -xvalue         short flag, attached value
    -x value        short flag, value from the next token
    --name / -x     bare flag (boolean, or a value-taking flag missing its value)
    -               positional target
    --              end of flags; everything after goes to `rest`
"""
from __future__ import annotations

from collections.abc import Collection, Sequence

from flagspec.logger import logger
from flagspec.parser.parser_types import FlagOccurrence, RawValue, TokenizedArgs
from flagspec.parser.utils import detect_number, looks_numeric

TERMINATOR = "--"


def is_flag_token(token: str, known_names: Collection[str] = ()) -> bool:
    """
    Check whether a token should be read as a flag.

    `-` alone is positional. Negative numbers such as `-42` are values, unless
    the digit after the dash is itself a declared short name.
    """
    if not token.startswith("-") or len(token) < 2:
        return False
    if token == TERMINATOR:
        return False
    if looks_numeric(token):
        return token[1] in known_names
    return True


def _raw(text: str) -> RawValue:
    return RawValue(text=text, number=detect_number(text))


def tokenize(
    tokens: Sequence[str],
    boolean_names: Collection[str] = (),
    known_names: Collection[str] = (),
) -> TokenizedArgs:
    """
    Tokenize a command line.

    Args:
        tokens (Sequence[str]): Raw arguments, without the program name.
        boolean_names (Collection[str]): Names that never consume a value.
        known_names (Collection[str]): All declared names; only used to tell
            a numeric short flag (`-1`) from a negative number.

    Returns:
        TokenizedArgs: Targets, flag occurrences in input order, and rest.
    """
    result = TokenizedArgs()
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == TERMINATOR:
            result.rest = list(tokens[i + 1 :])
            break
        if not is_flag_token(token, known_names):
            result.targets.append(token)
            i += 1
            continue

        if token.startswith("--"):
            prefix = "--"
            name, separator, attached = token[2:].partition("=")
            has_attached = bool(separator)
        else:
            prefix = "-"
            name, attached = token[1], token[2:]
            has_attached = bool(attached)

        if has_attached:
            occurrence = FlagOccurrence(name, prefix, _raw(attached), attached=True)
            i += 1
        elif name in boolean_names:
            occurrence = FlagOccurrence(name, prefix)
            i += 1
        elif i + 1 < len(tokens) and tokens[i + 1] != TERMINATOR and not is_flag_token(
            tokens[i + 1], known_names
        ):
            occurrence = FlagOccurrence(name, prefix, _raw(tokens[i + 1]))
            i += 2
        else:
            occurrence = FlagOccurrence(name, prefix)
            i += 1
        logger.debug("Token %r -> %s", token, occurrence)
        result.flags.append(occurrence)
    return result
