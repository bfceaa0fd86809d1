"""Field Set Evaluation

Each field's rules run in order against the field's value. The first rule
that fails ends that field's evaluation: its message goes into the error map
and later rules for the same field never run. Invalid input never raises.

Usage:
    errors, ok = validate(fields)
    if not ok:
        print("why is email not valid?", errors["email"])
"""
from __future__ import annotations

from typing import Any, Iterable

from fieldsafe.config import get_settings
from fieldsafe.errors import AppError, ErrorCode, Result, Ok, raise_result, validation_error
from fieldsafe.logging import validation_logger

from .fields import Field
from .rules import ValidationResult
from .values import kind_of

ErrorMessages = dict[str, str]


def _failures(fields: Iterable[Field]) -> dict[str, ValidationResult]:
    """First failing rule's result per invalid field."""
    log = validation_logger()
    trace = get_settings().TRACE_RULES
    failures: dict[str, ValidationResult] = {}

    for f in fields:
        for rule in f.rules:
            result = rule.validate(f.value)
            if trace:
                log.debug("rule_evaluated", field=f.name, rule=rule.name, valid=result.is_valid)
            if not result.is_valid:
                log.debug("field_invalid", field=f.name, rule=rule.name,
                    code=result.error_code.name if result.error_code else None, value_kind=kind_of(f.value).value)
                failures[f.name] = result
                break  # first failure wins for this field

    return failures


def validate(fields: Iterable[Field]) -> tuple[ErrorMessages, bool]:
    """Evaluate every field; return (error map, all valid).

    The error map has one message per invalid field and is empty when all
    fields are valid.
    """
    field_list = list(fields)
    failures = _failures(field_list)
    messages: ErrorMessages = {name: result.error_message or "" for name, result in failures.items()}
    validation_logger().debug("validation_complete", fields=len(field_list), invalid=len(messages))
    return messages, not messages


def validate_result(fields: Iterable[Field]) -> Result[dict[str, Any], AppError]:
    """Ok(name -> value) when every field is valid, otherwise Err with the error map.

    The AppError metadata carries `errors` (name -> message) and `codes`
    (name -> error code name).
    """
    field_list = list(fields)
    failures = _failures(field_list)
    if not failures:
        return Ok({f.name: f.value for f in field_list})
    return validation_error(
        f"{len(failures)} field(s) failed validation",
        code=ErrorCode.E2000_VALIDATION_GENERIC,
        origin="validator",
        errors={name: result.error_message for name, result in failures.items()},
        codes={name: result.error_code.name for name, result in failures.items() if result.error_code},
    )


def ensure_valid(fields: Iterable[Field]) -> dict[str, Any]:
    """Like validate_result, but raise FieldValidationError instead of returning Err."""
    return raise_result(validate_result(fields))
