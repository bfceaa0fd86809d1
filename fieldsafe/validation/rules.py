"""Rule Abstraction

A rule is a predicate plus a message producer, both taking the field value
as an explicit argument. Rules are immutable and keep no per-call state, so a
single instance can be reused across validations and threads.

Features:
- Frozen dataclass rules
- Message override that leaves the predicate untouched
- Rich ValidationResult for callers that want codes and context
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar

from fieldsafe.errors import ErrorCode, RuleConfigurationError, rule_misconfigured
from fieldsafe.logging import catalog_logger

from .values import kind_of

MessageProducer = Callable[[Any], str]


def misconfigured(rule: str, reason: str, *, parameter: Any = None, cause: Exception | None = None,
                  code: ErrorCode = ErrorCode.E2030_RULE_MISCONFIGURED) -> RuleConfigurationError:
    """Build (and log) the exception for a rule constructed with unusable parameters."""
    error = rule_misconfigured(rule, reason, code=code, parameter=parameter, cause=cause)
    catalog_logger().debug("rule_misconfigured", rule=rule, reason=reason, code=error.code.name)
    return RuleConfigurationError(error)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of a single rule check."""
    is_valid: bool
    error_message: str | None = None
    error_code: ErrorCode | None = None
    constraint: str | None = None
    actual: str | None = None

    @classmethod
    def valid(cls) -> ValidationResult: return cls(is_valid=True)

    @classmethod
    def invalid(cls, message: str, code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC, *,
                constraint: str | None = None, actual: str | None = None) -> ValidationResult:
        return cls(is_valid=False, error_message=message, error_code=code, constraint=constraint, actual=actual)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        if self.is_valid: return {"valid": True}
        return {"valid": False, "message": self.error_message, "code": self.error_code.name if self.error_code else None,
            "constraint": self.constraint, "actual": self.actual}


class Rule(ABC):
    """Base class for catalog rules.

    Subclasses implement `evaluate` (the predicate), `message` (the default
    message producer) and `name` (a diagnostic label). The two callables are
    independent: `with_message` swaps the message and nothing else.
    """

    code: ClassVar[ErrorCode] = ErrorCode.E2000_VALIDATION_GENERIC

    @abstractmethod
    def evaluate(self, value: Any) -> bool:
        """Whether value satisfies the rule. Must not raise for any input."""

    @abstractmethod
    def message(self, value: Any) -> str:
        """Human-readable failure message for value."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Diagnostic label, e.g. 'email' or 'min[5]'."""

    def validate(self, value: Any) -> ValidationResult:
        if self.evaluate(value): return ValidationResult.valid()
        return ValidationResult.invalid(self.message(value), self.code, constraint=self.name,
            actual=kind_of(value).value)

    def __call__(self, value: Any) -> ValidationResult: return self.validate(value)

    def with_message(self, message: str | MessageProducer) -> WithMessage:
        """Replace the message producer with a literal or a callable of the value."""
        return WithMessage(self, message)


@dataclass(frozen=True, slots=True)
class WithMessage(Rule):
    """Wrapper that overrides a rule's message; predicate, name and code are delegated."""
    rule: Rule
    override: str | MessageProducer

    @property
    def name(self) -> str:
        return self.rule.name

    @property
    def code(self) -> ErrorCode:  # type: ignore[override]
        return self.rule.code

    def evaluate(self, value: Any) -> bool:
        return self.rule.evaluate(value)

    def message(self, value: Any) -> str:
        return self.override(value) if callable(self.override) else self.override

    def with_message(self, message: str | MessageProducer) -> WithMessage:
        return WithMessage(self.rule, message)


@dataclass(frozen=True, slots=True)
class Check(Rule):
    """Ad-hoc rule from a predicate and a message.

    Usage:
        even = Check(lambda v: isinstance(v, int) and v % 2 == 0, "Must be even", label="even")
    """
    predicate: Callable[[Any], bool]
    default: str | MessageProducer
    label: str = "check"

    @property
    def name(self) -> str:
        return self.label

    def evaluate(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def message(self, value: Any) -> str:
        return self.default(value) if callable(self.default) else self.default
