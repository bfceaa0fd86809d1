"""Tests for field set evaluation."""
import pytest

from fieldsafe.errors import Err, ErrorCode, FieldValidationError, Ok
from fieldsafe.validation import (
    Check,
    Email,
    Field,
    FieldSet,
    Max,
    Min,
    Required,
    StrongPassword,
    ensure_valid,
    messages,
    validate,
    validate_result,
)


class TestValidate:
    """Test validate() verdicts and error maps."""

    def test_sample_user_is_valid(self, sample_user, build_user_fields):
        errors, ok = validate(build_user_fields(sample_user))
        assert ok is True
        assert errors == {}

    def test_sample_user_failures(self, sample_user, build_user_fields):
        sample_user.name = "pepsimaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaannn"
        sample_user.age = 17
        sample_user.address.postal_code = ""
        sample_user.job = "pepsiman"
        sample_user.password = "ZkJ{[!#"
        sample_user.cpf_cnpj = "tananana tananana tananana pepsimaaaaan"

        max_name_chars = len(sample_user.name) - 1
        age_message = "Your beard doesn't fool me!"

        fields = build_user_fields(sample_user)
        fields.set_rules("name", [Required(), Max(max_name_chars)])
        fields.set_rules("age", [Required(), Min(18).with_message(age_message)])

        errors, ok = validate(fields)

        assert ok is False
        assert errors == {
            "name": messages.max_chars_msg(max_name_chars),
            "age": age_message,
            "address_city": messages.MANDATORY_FIELD,
            "address_state": messages.MANDATORY_FIELD,
            "job": messages.UNACCEPTABLE_VALUE,
            "password": messages.WEAK_PASSWORD,
            "cpf/cnpj": messages.INVALID_FORMAT,
        }

    def test_field_without_rules_is_valid(self):
        errors, ok = validate([Field("anything", object())])
        assert ok is True
        assert "anything" not in errors

    def test_empty_field_set(self):
        assert validate(FieldSet()) == ({}, True)

    def test_email_scenario(self):
        errors, ok = validate([Field("email", "qqq@aaa", [Email()])])
        assert ok is False
        assert errors == {"email": messages.INVALID_FORMAT}

    def test_password_scenarios(self):
        assert validate([Field("pwd", "$s3NH@!X", [StrongPassword()])]) == ({}, True)
        errors, ok = validate([Field("pwd", "password", [StrongPassword()])])
        assert not ok
        assert errors["pwd"] == messages.WEAK_PASSWORD

    def test_only_valid_fields_are_absent(self):
        errors, ok = validate([
            Field("first", "", [Required()]),
            Field("second", "ok", [Required()]),
        ])
        assert not ok
        assert list(errors) == ["first"]


class TestShortCircuit:
    """Test first-failure-wins evaluation."""

    def test_later_rules_never_run(self):
        calls = []
        spy = Check(lambda v: calls.append(v) or False, "spy message", label="spy")

        errors, ok = validate([
            Field("a", "", [Required(), spy]),
            Field("b", "", [Required(), Max(0)]),
        ])

        assert calls == []
        assert errors == {"a": messages.MANDATORY_FIELD, "b": messages.MANDATORY_FIELD}

    def test_first_failing_rule_reports(self):
        errors, _ = validate([Field("name", "abcdef", [Required(), Max(3), Min(10)])])
        assert errors == {"name": messages.max_chars_msg(3)}

    def test_rules_run_until_failure(self):
        calls = []
        spy = Check(lambda v: calls.append(v) or True, "unused", label="spy")
        validate([Field("name", "abc", [Required(), spy, Max(2), spy])])
        assert calls == ["abc"]

    def test_rule_instances_are_reusable(self):
        shared = Min(3)
        errors, ok = validate([
            Field("short", "ab", [shared]),
            Field("long", "abcd", [shared]),
        ])
        assert errors == {"short": messages.min_chars_msg(3)}


class TestValidateResult:
    """Test the Result and exception flavours."""

    def test_ok_carries_values(self):
        result = validate_result([Field("name", "pepsiman", [Required()]), Field("age", 25)])
        assert isinstance(result, Ok)
        assert result.unwrap() == {"name": "pepsiman", "age": 25}

    def test_err_carries_error_map_and_codes(self):
        result = validate_result([
            Field("name", "", [Required()]),
            Field("email", "qqq", [Email()]),
        ])
        assert isinstance(result, Err)
        error = result.unwrap_err()
        assert error.code is ErrorCode.E2000_VALIDATION_GENERIC
        assert error.metadata["errors"] == {"name": messages.MANDATORY_FIELD, "email": messages.INVALID_FORMAT}
        assert error.metadata["codes"] == {
            "name": "E2001_REQUIRED_FIELD_MISSING",
            "email": "E2010_INVALID_EMAIL",
        }
        assert error.context.origin == "validator"

    def test_ensure_valid_returns_values(self):
        assert ensure_valid([Field("name", "pepsiman", [Required()])]) == {"name": "pepsiman"}

    def test_ensure_valid_raises(self):
        with pytest.raises(FieldValidationError) as exc_info:
            ensure_valid([Field("name", "", [Required()])])
        assert exc_info.value.messages == {"name": messages.MANDATORY_FIELD}
        assert exc_info.value.code is ErrorCode.E2000_VALIDATION_GENERIC
