# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option definitions from YAML or TOML files.

Example `options.yaml`:

    usage: "serve [<options>] <paths>..."
    require_target: "at least one path is required"
    options:
      port: "-p,--port:number=3000; Port to use"
      cors: "--cors:boolean; Enable CORS"
      help: "--help:boolean; Show this help"

The same layout works in TOML with an `[options]` table.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, TextIO

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from flagspec.logger import logger
from flagspec.parser.getargs import ParseConfig


class DefinitionsConfig(BaseModel):
    """Option definitions plus the parse settings stored alongside them."""

    usage: str | None = None
    require_target: bool | str = False
    handle_help_flag: bool = True
    options: dict[str, str] = Field(default_factory=dict)

    @field_validator("options")
    @classmethod
    def validate_options(cls, value: dict[str, str]) -> dict[str, str]:
        for key, spec in value.items():
            if not key:
                raise ValueError("option keys must be non-empty")
            if not spec.strip():
                raise ValueError(f"option '{key}' has an empty spec")
        return value

    def to_parse_config(self, exit_on_process_error: bool = True) -> ParseConfig:
        return ParseConfig(
            usage=self.usage,
            exit_on_process_error=exit_on_process_error,
            handle_help_flag=self.handle_help_flag,
            require_target=self.require_target,
        )


_READERS: dict[str, Callable[[TextIO], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".toml": toml.load,
}


def loader(file_path: Path | str) -> DefinitionsConfig:
    """
    Load option definitions from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        DefinitionsConfig: The validated definitions and settings.

    Raises:
        TypeError: If `file_path` is neither a string nor a Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported, the file cannot be parsed or
            the content is not a mapping.
        pydantic.ValidationError: If a field has the wrong type.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError(f"Expected a str or Path, got {type(file_path).__name__}")
    path = Path(file_path)
    read = _READERS.get(path.suffix.lower())
    if read is None:
        supported = ", ".join(_READERS)
        raise ValueError(f"Unsupported config format: {path.suffix!r} (use {supported})")
    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {path}")

    with path.open(encoding="UTF-8") as handle:
        try:
            content = read(handle)
        except yaml.YAMLError as error:
            raise ValueError(f"Could not parse {path}: {error}") from error
    if not isinstance(content, dict):
        raise ValueError(
            f"{path} must contain a mapping with an 'options' table, for example:\n"
            "usage: 'serve [<options>]'\n"
            "options:\n"
            "  port: '-p,--port:number=3000; Port to use'"
        )

    config = DefinitionsConfig.model_validate(content)
    logger.debug("Loaded %d option definitions from %s", len(config.options), path)
    return config
