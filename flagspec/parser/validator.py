# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Validates tokenizer output against a `DefinitionSet` and coerces raw values
into typed option values.

Resolution happens in one left-to-right pass over the declared keys and stops
at the first violation:

1. Occurrences are collected from the long-flag channel, then the short-flag
   channel. Array values therefore list long-flag values before short-flag
   values regardless of token order.
2. Boolean options reject attached values (`--flag=x`, `-fx`).
3. Absent options take their default; an absent required option without a
   default fails.
4. Values are checked for arity and coerced to the declared type. Numbers that
   the tokenizer detected in string options are turned back into their text.

After the per-option pass, unknown flags and the target requirement are
checked.
"""
from __future__ import annotations

from typing import Any

from flagspec.exceptions import ValidationError
from flagspec.logger import logger
from flagspec.parser.definitions import DefinitionSet
from flagspec.parser.option_definition import OptionDefinition
from flagspec.parser.parser_types import FlagOccurrence, ParseResult, TokenizedArgs
from flagspec.parser.utils import coerce_number, coerce_string, format_aliases
from flagspec.parser.value_type import ValueType

DEFAULT_TARGET_MESSAGE = "a target is required"


def collect_occurrences(
    definition: OptionDefinition, tokenized: TokenizedArgs
) -> list[FlagOccurrence]:
    """Return long-flag occurrences followed by short-flag occurrences."""
    occurrences = tokenized.values(definition.long_flag)
    if definition.short_flag is not None:
        occurrences += tokenized.values(definition.short_flag)
    return occurrences


def _check_single(definition: OptionDefinition, occurrences: list[FlagOccurrence]) -> None:
    if len(occurrences) > 1:
        aliases = format_aliases(definition.aliases())
        raise ValidationError(f"{aliases} should not have multiple values", aliases)


def _check_values_present(occurrences: list[FlagOccurrence]) -> None:
    for occurrence in occurrences:
        if occurrence.value is None:
            raise ValidationError(f"{occurrence.token} needs a value", occurrence.token)


def _resolve_boolean(
    definition: OptionDefinition, occurrences: list[FlagOccurrence]
) -> bool:
    for occurrence in occurrences:
        if occurrence.attached:
            raise ValidationError(
                f"{occurrence.token} is a boolean switch and must not have a value",
                occurrence.token,
            )
    _check_single(definition, occurrences)
    return True


def _resolve_number(occurrence: FlagOccurrence) -> int | float:
    assert occurrence.value is not None, "value should have been checked"
    try:
        return coerce_number(occurrence.value)
    except ValueError as error:
        raise ValidationError(
            f"{occurrence.token} should be a number: {error}", occurrence.token
        ) from error


def resolve_option(definition: OptionDefinition, tokenized: TokenizedArgs) -> Any:
    """
    Resolve the typed value of one option.

    Args:
        definition (OptionDefinition): The declared option.
        tokenized (TokenizedArgs): Tokenizer output for the whole command line.

    Returns:
        Any: The typed value (see `ValueType` for the runtime type per kind).

    Raises:
        ValidationError: If the option violates arity, type or required rules.
    """
    occurrences = collect_occurrences(definition, tokenized)
    value_type = definition.value_type

    if value_type is ValueType.BOOLEAN:
        if not occurrences:
            return definition.resolve_default()
        return _resolve_boolean(definition, occurrences)

    if not occurrences:
        value = definition.resolve_default()
        if value is None and definition.required:
            aliases = format_aliases(definition.aliases())
            raise ValidationError(f"{aliases} is required", aliases)
        return value

    _check_values_present(occurrences)

    if value_type is ValueType.NUMBER:
        _check_single(definition, occurrences)
        return _resolve_number(occurrences[0])

    if value_type is ValueType.STRING:
        _check_single(definition, occurrences)
        return coerce_string(occurrences[0].value)  # type: ignore[arg-type]

    if value_type is ValueType.NUMBER_ARRAY:
        numbers = []
        for occurrence in occurrences:
            try:
                numbers.append(coerce_number(occurrence.value))  # type: ignore[arg-type]
            except ValueError as error:
                aliases = format_aliases(definition.aliases())
                raise ValidationError(
                    f"All values of {aliases} should be numbers: {error}", aliases
                ) from error
        return numbers

    return [coerce_string(occurrence.value) for occurrence in occurrences]  # type: ignore[arg-type]


def check_unknown_flags(definition_set: DefinitionSet, tokenized: TokenizedArgs) -> None:
    """Fail on the first flag that names no declared option."""
    declared = definition_set.names()
    for occurrence in tokenized.flags:
        if occurrence.name not in declared:
            raise ValidationError(f"unknown option: {occurrence.token}", occurrence.token)


def check_targets(targets: list[str], require_target: bool | str) -> None:
    if not require_target or targets:
        return
    if isinstance(require_target, str):
        raise ValidationError(require_target)
    raise ValidationError(DEFAULT_TARGET_MESSAGE)


def validate(
    definition_set: DefinitionSet,
    tokenized: TokenizedArgs,
    require_target: bool | str = False,
) -> ParseResult:
    """
    Resolve every declared option and check the command line as a whole.

    Args:
        definition_set (DefinitionSet): The parsed definitions.
        tokenized (TokenizedArgs): Tokenizer output.
        require_target (bool | str): False to allow an empty target list, True
            to require one with the generic message, or a custom message.

    Returns:
        ParseResult: targets, options and rest; `help` is left for the caller to bind.

    Raises:
        ValidationError: On the first violation found.
    """
    options: dict[str, Any] = {}
    for key, definition in definition_set.items():
        options[key] = resolve_option(definition, tokenized)
        logger.debug("Resolved option '%s' -> %r", key, options[key])
    check_unknown_flags(definition_set, tokenized)
    check_targets(tokenized.targets, require_target)
    return ParseResult(
        targets=list(tokenized.targets),
        options=options,
        rest=list(tokenized.rest),
    )
