# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds a `DefinitionSet` from a mapping of caller keys to option spec strings.

Short and long flag names share a single namespace: `-a` on one option and
`--a` on another are a collision, because the tokenizer files both under the
bare name `a`. Every duplicated name is reported in one `SettingsError`.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping

from flagspec.exceptions import SettingsError
from flagspec.logger import logger
from flagspec.parser.grammar import parse_definition
from flagspec.parser.option_definition import OptionDefinition


class DefinitionSet(Mapping[str, OptionDefinition]):
    """
    Read-only, ordered mapping of caller key to `OptionDefinition`.

    Use `build_definition_set()` to construct one from spec strings; the
    constructor itself only checks alias uniqueness.
    """

    def __init__(self, definitions: Mapping[str, OptionDefinition]) -> None:
        self._definitions: dict[str, OptionDefinition] = dict(definitions)
        self._by_name: dict[str, str] = {}
        counts: Counter[str] = Counter()
        written: dict[str, list[str]] = {}
        for key, definition in self._definitions.items():
            for alias in definition.aliases():
                name = alias.lstrip("-")
                counts[name] += 1
                self._by_name[name] = key
                forms = written.setdefault(name, [])
                if alias not in forms:
                    forms.append(alias)
        duplicates = [name for name, count in counts.items() if count > 1]
        if duplicates:
            flags = ", ".join("/".join(written[name]) for name in duplicates)
            raise SettingsError(f"Duplicated option names: {flags}")

    def __getitem__(self, key: str) -> OptionDefinition:
        return self._definitions[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def names(self) -> set[str]:
        """All declared short and long names."""
        return set(self._by_name)

    def boolean_names(self) -> set[str]:
        """Short and long names of boolean options."""
        return {
            name
            for name, key in self._by_name.items()
            if self._definitions[key].value_type.is_boolean
        }

    def __str__(self) -> str:
        required = sum(definition.required for definition in self.values())
        return (
            f"DefinitionSet(options={len(self)}, "
            f"names={len(self._by_name)}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)


def build_definition_set(definitions: Mapping[str, str]) -> DefinitionSet:
    """
    Parse every spec string and check that no flag name is used twice.

    Args:
        definitions (Mapping[str, str]): Caller key to option spec string.

    Returns:
        DefinitionSet: The parsed definitions, in the caller's order.

    Raises:
        SettingsError: If a spec is invalid or any flag name is duplicated.
    """
    parsed: dict[str, OptionDefinition] = {}
    for key, spec in definitions.items():
        try:
            parsed[key] = parse_definition(spec)
        except SettingsError as error:
            raise SettingsError(f"[{key}] {error}") from error
    definition_set = DefinitionSet(parsed)
    logger.debug("Built %s", definition_set)
    return definition_set
