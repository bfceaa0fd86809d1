"""Tests for the error taxonomy, Result types and exception wrappers."""
import pytest

from fieldsafe.errors import (
    AppError,
    AppErrorException,
    Err,
    ErrorCode,
    ErrorContext,
    FieldValidationError,
    Ok,
    RuleConfigurationError,
    raise_error,
    raise_result,
    rule_misconfigured,
    validation_error,
)


class TestErrorCode:
    @pytest.mark.parametrize("code,category", [
        (ErrorCode.E2000_VALIDATION_GENERIC, "validation"),
        (ErrorCode.E2010_INVALID_EMAIL, "validation"),
        (ErrorCode.E2030_RULE_MISCONFIGURED, "configuration"),
        (ErrorCode.E2031_DUPLICATE_FIELD, "configuration"),
        (ErrorCode.E9001_UNEXPECTED_ERROR, "internal"),
    ])
    def test_category(self, code, category):
        assert code.category == category


class TestAppError:
    def test_to_dict(self):
        error = AppError(ErrorCode.E2002_INVALID_FORMAT, "bad", metadata={"field": "email"})
        body = error.to_dict()["error"]
        assert body["code"] == "E2002_INVALID_FORMAT"
        assert body["code_num"] == 2002
        assert body["category"] == "validation"
        assert body["metadata"] == {"field": "email"}

    def test_with_metadata_keeps_original(self):
        error = AppError(ErrorCode.E2000_VALIDATION_GENERIC, "bad", metadata={"a": 1})
        extended = error.with_metadata(b=2)
        assert extended.metadata == {"a": 1, "b": 2}
        assert error.metadata == {"a": 1}
        assert extended.context is error.context

    def test_str_and_error_id(self):
        error = AppError(ErrorCode.E2001_REQUIRED_FIELD_MISSING, "missing")
        assert str(error).startswith("[E2001_REQUIRED_FIELD_MISSING] missing")
        assert error.error_id == f"E2001_REQUIRED_FIELD_MISSING:{error.context.correlation_id}"

    def test_context_with_origin(self):
        context = ErrorContext()
        moved = context.with_origin("validator")
        assert moved.origin == "validator"
        assert moved.correlation_id == context.correlation_id


class TestResult:
    def test_ok(self):
        result = Ok(2)
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == 2
        assert result.unwrap_or(5) == 2
        assert result.map(lambda v: v * 10) == Ok(20)

    def test_err(self):
        error = AppError(ErrorCode.E2000_VALIDATION_GENERIC, "bad")
        result = Err(error)
        assert result.is_err() and not result.is_ok()
        assert result.unwrap_or(5) == 5
        assert result.unwrap_err() is error
        assert result.map(lambda v: v * 10) is result
        with pytest.raises(ValueError):
            result.unwrap()

    def test_map_err(self):
        error = AppError(ErrorCode.E2000_VALIDATION_GENERIC, "bad")
        mapped = Err(error).map_err(lambda e: e.with_metadata(field="name"))
        assert mapped.unwrap_err().metadata == {"field": "name"}


class TestBuilders:
    def test_validation_error_drops_empty_field(self):
        error = validation_error("bad", origin="validator").unwrap_err()
        assert "field" not in error.metadata
        assert error.context.origin == "validator"

    def test_validation_error_metadata(self):
        error = validation_error("bad", code=ErrorCode.E2010_INVALID_EMAIL, field="email", value_kind="string")
        assert error.unwrap_err().code is ErrorCode.E2010_INVALID_EMAIL
        assert error.unwrap_err().metadata == {"field": "email", "value_kind": "string"}

    def test_rule_misconfigured(self):
        cause = ValueError("boom")
        error = rule_misconfigured("min", "bound must be an int or float", parameter="3", cause=cause)
        assert error.message == "Invalid configuration for 'min': bound must be an int or float"
        assert error.metadata == {"rule": "min", "parameter": "'3'"}
        assert error.cause is cause
        assert error.code.category == "configuration"


class TestExceptions:
    @pytest.mark.parametrize("code,exc_type", [
        (ErrorCode.E2030_RULE_MISCONFIGURED, RuleConfigurationError),
        (ErrorCode.E2031_DUPLICATE_FIELD, RuleConfigurationError),
        (ErrorCode.E2001_REQUIRED_FIELD_MISSING, FieldValidationError),
    ])
    def test_raise_error_maps_category(self, code, exc_type):
        with pytest.raises(exc_type) as exc_info:
            raise_error(AppError(code, "boom"))
        assert exc_info.value.code is code

    def test_internal_errors_use_base_exception(self):
        with pytest.raises(AppErrorException) as exc_info:
            raise_error(AppError(ErrorCode.E9000_INTERNAL_GENERIC, "boom"))
        assert type(exc_info.value) is AppErrorException

    def test_raise_result(self):
        assert raise_result(Ok({"a": 1})) == {"a": 1}
        with pytest.raises(FieldValidationError) as exc_info:
            raise_result(validation_error("bad", errors={"name": "Campo obrigatório"}))
        assert exc_info.value.messages == {"name": "Campo obrigatório"}
