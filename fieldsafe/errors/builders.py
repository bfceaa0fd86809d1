"""Error Builders

Ergonomic constructors for the library's typed errors.
"""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def rule_misconfigured(
    rule: str,
    reason: str,
    *,
    code: ErrorCode = ErrorCode.E2030_RULE_MISCONFIGURED,
    parameter: Any = None,
    cause: Exception | None = None,
) -> AppError:
    """Describe a rule or field set built with unusable parameters."""
    meta = {"rule": rule}
    if parameter is not None:
        meta["parameter"] = repr(parameter)
    return AppError(
        code=code,
        message=f"Invalid configuration for '{rule}': {reason}",
        context=ErrorContext(origin="catalog"),
        metadata=meta,
        cause=cause,
    )
