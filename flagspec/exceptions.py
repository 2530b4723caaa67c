# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by flagspec.

Two disjoint kinds of failure exist:

- Configuration errors describe a mistake made by whoever wrote the option
  definitions (malformed spec string, duplicated alias, ill-typed default).
  They are raised as soon as definitions are parsed and are never subject to
  the exit-on-error policy.
- Validation errors describe a mistake in a concrete argument list (unknown
  flag, missing value, arity or type violation). They are handed to the
  configured failure sink, which either terminates the process or re-raises.

Exception Hierarchy:
- FlagspecError
    ├── SettingsError
    └── ValidationError
"""
from __future__ import annotations


class FlagspecError(Exception):
    """Base exception for flagspec."""


class SettingsError(FlagspecError):
    """Exception raised when option definitions are invalid."""


class ValidationError(FlagspecError):
    """
    Exception raised when a command line does not satisfy the definitions.

    Attributes:
        message (str): Human readable description of the violated rule.
        flag (str | None): The offending alias as written (e.g. `--foo`), if any.
    """

    def __init__(self, message: str, flag: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.flag = flag
