"""Monadic Error Handling System

Key components:
- Result[T, E]: Container for success/failure
- AppError: Error type with code, message, metadata and context
- ErrorCode: Hierarchical error code taxonomy
- Exceptions: for callers that prefer raising over Results

Usage:
    from fieldsafe.errors import Ok, Err

    match validate_result(fields):
        case Ok(values):
            save(values)
        case Err(error):
            render(error.metadata["errors"])
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    validation_error,
    rule_misconfigured,
)

from .exceptions import (
    AppErrorException,
    RuleConfigurationError,
    FieldValidationError,
    raise_error,
    raise_result,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Builders
    "validation_error",
    "rule_misconfigured",
    # Exceptions
    "AppErrorException",
    "RuleConfigurationError",
    "FieldValidationError",
    "raise_error",
    "raise_result",
]
