# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders a `DefinitionSet` into plain help text.

Example output for `usage="serve [<options>] <paths>..."`:

    Usage: serve [<options>] <paths>...

      -p, --port NUMBER       Port to use (default:3000)
      -a, --address STRING    Address to use (default:"0.0.0.0")
      --cors                  Enable CORS
      --name STRING           Service name (required)

Formatting is a pure function; printing is left to the failure sinks.
"""
from __future__ import annotations

from flagspec.parser.definitions import DefinitionSet


def format_help(usage: str | None, definition_set: DefinitionSet) -> str:
    """
    Format help text for a set of definitions.

    Args:
        usage (str | None): Usage line shown first, if given.
        definition_set (DefinitionSet): The options to describe.

    Returns:
        str: The help text, without a trailing newline.
    """
    lines: list[str] = []
    if usage:
        lines.append(f"Usage: {usage}")
        if definition_set:
            lines.append("")

    columns = [definition.get_flags_text() for definition in definition_set.values()]
    width = max((len(column) for column in columns), default=0)
    for column, definition in zip(columns, definition_set.values()):
        details = " ".join(
            part
            for part in (definition.description, definition.get_annotation_text())
            if part
        )
        lines.append(f"  {column:<{width}}    {details}".rstrip())
    return "\n".join(lines)
