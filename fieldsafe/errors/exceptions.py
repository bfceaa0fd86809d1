"""Exception Wrappers

Raise an AppError in code that doesn't use the Result monad. Rule and field
set construction raise RuleConfigurationError; `ensure_valid` raises
FieldValidationError.
"""
from __future__ import annotations

from typing import TypeVar

from .types import AppError, Err, Ok, Result

T = TypeVar("T")


class AppErrorException(Exception):
    """Exception wrapper for AppError."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self):
        return self.error.code


class RuleConfigurationError(AppErrorException):
    """A rule or field set was built with parameters it cannot work with."""


class FieldValidationError(AppErrorException):
    """One or more fields failed their rules."""

    @property
    def messages(self) -> dict[str, str]:
        """Field name -> message of the first failing rule."""
        return dict(self.error.metadata.get("errors", {}))


def raise_error(error: AppError) -> None:
    """Raise AppError as the matching exception."""
    if error.code.category == "configuration":
        raise RuleConfigurationError(error)
    if error.code.category == "validation":
        raise FieldValidationError(error)
    raise AppErrorException(error)


def raise_result(result: Result[T, AppError]) -> T:
    """Unwrap Result or raise its error."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise_error(error)
