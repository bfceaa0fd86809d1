"""Rule Catalog

Built-in rules, grouped the way they are usually combined on a form:
presence, formats, bounds, membership, cross-field and dates.

Shared conventions:
- Format, pattern and length rules let an empty string through; pair them
  with Required (or RequiredUnless) when the field must be filled.
- A value of a kind the rule does not handle fails the rule. Nothing in
  `evaluate` raises; bad parameters are rejected at construction with
  RuleConfigurationError.

Example:
    fields = FieldSet([
        Field("email", user.email, [Required(), Email(), Max(128)]),
        Field("password", user.password, [Required(), Max(128), StrongPassword()]),
    ])
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from abc import abstractmethod
from collections.abc import Iterable
from typing import Any

from fieldsafe.errors import ErrorCode

from . import messages
from .patterns import (
    CNPJ,
    CPF,
    EMAIL,
    PHONE,
    POSTAL_CODE,
    UUID,
    UUID_V4,
    compile_patterns,
    search_all,
    search_any,
)
from .rules import Rule, misconfigured
from .values import (
    NUMERIC_KINDS,
    SECRET_MIN_LENGTH,
    ValueKind,
    all_unique,
    days_between,
    describe,
    has_value,
    is_sequence_of,
    is_strong_secret,
    kind_of,
    same_awareness,
    values_equal,
)


# ============================================================================
# Presence
# ============================================================================

@dataclass(frozen=True, slots=True)
class Required(Rule):
    """The field must have a value (see `has_value`).

    False is not a value, so Required on a boolean demands True; use IsFalse
    to demand False explicitly.
    """
    code = ErrorCode.E2001_REQUIRED_FIELD_MISSING

    @property
    def name(self) -> str:
        return "required"

    def evaluate(self, value: Any) -> bool:
        return has_value(value)

    def message(self, value: Any) -> str:
        return messages.MANDATORY_FIELD


@dataclass(frozen=True, slots=True)
class IsTrue(Rule):
    """Boolean that must be True (e.g. accepted terms)."""
    code = ErrorCode.E2001_REQUIRED_FIELD_MISSING

    @property
    def name(self) -> str:
        return "true"

    def evaluate(self, value: Any) -> bool:
        return kind_of(value) is ValueKind.BOOLEAN and value is True

    def message(self, value: Any) -> str:
        return messages.MANDATORY_FIELD


@dataclass(frozen=True, slots=True)
class IsFalse(Rule):
    """Boolean that must be False."""
    code = ErrorCode.E2001_REQUIRED_FIELD_MISSING

    @property
    def name(self) -> str:
        return "false"

    def evaluate(self, value: Any) -> bool:
        return kind_of(value) is ValueKind.BOOLEAN and value is False

    def message(self, value: Any) -> str:
        return messages.MANDATORY_FIELD


@dataclass(frozen=True, slots=True)
class RequiredUnless(Rule):
    """Required unless at least one of the other values has a value.

    To waive the requirement only when several values are all present, fold
    them first with `all_have_value`.
    """
    others: tuple[Any, ...]
    code = ErrorCode.E2001_REQUIRED_FIELD_MISSING

    def __init__(self, *others: Any):
        object.__setattr__(self, "others", others)

    @property
    def name(self) -> str:
        return f"required_unless[{len(self.others)}]"

    def evaluate(self, value: Any) -> bool:
        return has_value(value) or any(has_value(other) for other in self.others)

    def message(self, value: Any) -> str:
        return messages.MANDATORY_FIELD


# ============================================================================
# Formats
# ============================================================================

class _PatternRule(Rule):
    """String rule: empty passes, otherwise any of `self.patterns` must be found."""
    code = ErrorCode.E2002_INVALID_FORMAT

    def evaluate(self, value: Any) -> bool:
        if kind_of(value) is not ValueKind.STRING: return False
        if value == "": return True
        return search_any(self.patterns, value)

    def message(self, value: Any) -> str:
        return messages.INVALID_FORMAT


@dataclass(frozen=True, slots=True)
class Email(_PatternRule):
    patterns = (EMAIL,)
    code = ErrorCode.E2010_INVALID_EMAIL

    @property
    def name(self) -> str:
        return "email"


@dataclass(frozen=True, slots=True)
class Phone(_PatternRule):
    """Phone number with optional country and area codes."""
    patterns = (PHONE,)

    @property
    def name(self) -> str:
        return "phone"


@dataclass(frozen=True, slots=True)
class Cpf(_PatternRule):
    patterns = (CPF,)

    @property
    def name(self) -> str:
        return "cpf"


@dataclass(frozen=True, slots=True)
class Cnpj(_PatternRule):
    patterns = (CNPJ,)

    @property
    def name(self) -> str:
        return "cnpj"


@dataclass(frozen=True, slots=True)
class CpfCnpj(_PatternRule):
    """Either an individual (CPF) or a company (CNPJ) tax id."""
    patterns = (CPF, CNPJ)

    @property
    def name(self) -> str:
        return "cpf_cnpj"


@dataclass(frozen=True, slots=True)
class PostalCode(_PatternRule):
    patterns = (POSTAL_CODE,)

    @property
    def name(self) -> str:
        return "postal_code"


@dataclass(frozen=True, slots=True)
class UUIDString(_PatternRule):
    """Textual UUID, versions 1, 4, 5 or 7."""
    patterns = (UUID,)
    code = ErrorCode.E2011_INVALID_UUID

    @property
    def name(self) -> str:
        return "uuid"


@dataclass(frozen=True, slots=True)
class PixKey(_PatternRule):
    """Any Pix key: CPF, CNPJ, email, phone or random key."""
    patterns = (CPF, CNPJ, EMAIL, PHONE, UUID_V4)

    @property
    def name(self) -> str:
        return "pix_key"


@dataclass(frozen=True, slots=True)
class RandomPixKey(_PatternRule):
    """Random Pix key (a version 4 UUID)."""
    patterns = (UUID_V4,)

    @property
    def name(self) -> str:
        return "random_pix_key"


@dataclass(frozen=True, slots=True)
class Match(_PatternRule):
    """String matching at least one of the given patterns.

    Usage:
        Match(ADDRESS_NUMBER)
        Match(r"^[A-Z]{2}$", r"^\\d{2}$")
    """
    patterns: tuple[re.Pattern[str], ...]

    def __init__(self, *patterns: str | re.Pattern[str]):
        object.__setattr__(self, "patterns", compile_patterns(patterns, rule="match"))

    @property
    def name(self) -> str:
        return f"match[{', '.join(p.pattern for p in self.patterns)}]"


@dataclass(frozen=True, slots=True)
class MatchList(Rule):
    """List of strings where every item matches every pattern. None or [] passes."""
    patterns: tuple[re.Pattern[str], ...]
    code = ErrorCode.E2002_INVALID_FORMAT

    def __init__(self, *patterns: str | re.Pattern[str]):
        object.__setattr__(self, "patterns", compile_patterns(patterns, rule="match_list"))

    @property
    def name(self) -> str:
        return f"match_list[{', '.join(p.pattern for p in self.patterns)}]"

    def evaluate(self, value: Any) -> bool:
        if value is None: return True
        if not is_sequence_of(value, str): return False
        return all(search_all(self.patterns, item) for item in value)

    def message(self, value: Any) -> str:
        return messages.INVALID_FORMAT


@dataclass(frozen=True, slots=True)
class StrongPassword(Rule):
    """8+ characters (up to max_length) with upper, lower, digit and symbol."""
    max_length: int | None = None
    code = ErrorCode.E2005_CONSTRAINT_VIOLATION

    def __post_init__(self):
        if self.max_length is None: return
        if kind_of(self.max_length) is not ValueKind.INTEGER or self.max_length < SECRET_MIN_LENGTH:
            raise misconfigured("strong_password", f"max_length must be an integer >= {SECRET_MIN_LENGTH}",
                parameter=self.max_length)

    @property
    def name(self) -> str:
        return "strong_password" if self.max_length is None else f"strong_password[max={self.max_length}]"

    def evaluate(self, value: Any) -> bool:
        if kind_of(value) is not ValueKind.STRING: return False
        if value == "": return True
        return is_strong_secret(value, self.max_length)

    def message(self, value: Any) -> str:
        return messages.WEAK_PASSWORD


# ============================================================================
# Bounds
# ============================================================================

@dataclass(frozen=True, slots=True)
class _Bound(Rule):
    """Numeric value bound, or character-count bound for strings."""
    bound: int | float
    code = ErrorCode.E2003_OUT_OF_RANGE

    def __post_init__(self):
        if kind_of(self.bound) not in NUMERIC_KINDS:
            raise misconfigured(self.name, "bound must be an int or float", parameter=self.bound)

    @abstractmethod
    def _within(self, measured: int | float) -> bool:
        """Whether a number or a length satisfies the bound."""

    def evaluate(self, value: Any) -> bool:
        match kind_of(value):
            case ValueKind.INTEGER | ValueKind.FLOAT:
                return self._within(value)
            case ValueKind.STRING:
                return value == "" or self._within(len(value))
            case _:
                return False


@dataclass(frozen=True, slots=True)
class Min(_Bound):
    """Minimum value for numbers, minimum length for strings.

    Message is chosen by the value's kind: "Valor mínimo: n" for numbers,
    "Mínimo de n caracteres" for anything else.
    """

    @property
    def name(self) -> str:
        return f"min[{self.bound}]"

    def _within(self, measured: int | float) -> bool:
        return measured >= self.bound

    def message(self, value: Any) -> str:
        if kind_of(value) in NUMERIC_KINDS: return messages.min_value_msg(self.bound)
        return messages.min_chars_msg(self.bound)


@dataclass(frozen=True, slots=True)
class Max(_Bound):
    """Maximum value for numbers, maximum length for strings."""

    @property
    def name(self) -> str:
        return f"max[{self.bound}]"

    def _within(self, measured: int | float) -> bool:
        return measured <= self.bound

    def message(self, value: Any) -> str:
        if kind_of(value) in NUMERIC_KINDS: return messages.max_value_msg(self.bound)
        return messages.max_chars_msg(self.bound)


# ============================================================================
# Membership
# ============================================================================

def _options(rule: str, options: Iterable[Any]) -> tuple[Any, ...]:
    if isinstance(options, (str, bytes)) or not isinstance(options, Iterable):
        raise misconfigured(rule, "options must be a collection of values", parameter=options)
    return tuple(options)


@dataclass(frozen=True, slots=True)
class OneOf(Rule):
    """Value must equal (same kind, same value) one of the options."""
    options: tuple[Any, ...]
    code = ErrorCode.E2005_CONSTRAINT_VIOLATION

    def __init__(self, options: Iterable[Any]):
        object.__setattr__(self, "options", _options("one_of", options))

    @property
    def name(self) -> str:
        return f"one_of[{describe(self.options)}]"

    def evaluate(self, value: Any) -> bool:
        return any(values_equal(value, option) for option in self.options)

    def message(self, value: Any) -> str:
        return messages.UNACCEPTABLE_VALUE


@dataclass(frozen=True, slots=True)
class NotOneOf(Rule):
    """Value must not equal any of the options."""
    options: tuple[Any, ...]
    code = ErrorCode.E2005_CONSTRAINT_VIOLATION

    def __init__(self, options: Iterable[Any]):
        object.__setattr__(self, "options", _options("not_one_of", options))

    @property
    def name(self) -> str:
        return f"not_one_of[{describe(self.options)}]"

    def evaluate(self, value: Any) -> bool:
        return not any(values_equal(value, option) for option in self.options)

    def message(self, value: Any) -> str:
        return messages.UNACCEPTABLE_VALUE


@dataclass(frozen=True, slots=True)
class UniqueList(Rule):
    """list/tuple without repeated items; optionally every item must be an item_type."""
    item_type: type | tuple[type, ...] | None = None
    code = ErrorCode.E2005_CONSTRAINT_VIOLATION

    def __post_init__(self):
        if self.item_type is None or isinstance(self.item_type, type): return
        if isinstance(self.item_type, tuple) and self.item_type and all(isinstance(t, type) for t in self.item_type):
            return
        raise misconfigured("unique_list", "item_type must be a type or a non-empty tuple of types",
            parameter=self.item_type)

    @property
    def name(self) -> str:
        if self.item_type is None: return "unique_list"
        types = self.item_type if isinstance(self.item_type, tuple) else (self.item_type,)
        return f"unique_list[{', '.join(t.__name__ for t in types)}]"

    def evaluate(self, value: Any) -> bool:
        if not is_sequence_of(value, self.item_type): return False
        return all_unique(value)

    def message(self, value: Any) -> str:
        return messages.UNIQUE_LIST


# ============================================================================
# Dates
# ============================================================================

def _reference(rule: str, reference: Any) -> None:
    if kind_of(reference) is not ValueKind.DATETIME:
        raise misconfigured(rule, "reference must be a datetime", parameter=reference)


@dataclass(frozen=True, slots=True)
class _DateRelation(Rule):
    """Chronological comparison against a reference datetime.

    Non-datetime values fail, and so do naive/aware pairs, which cannot be ordered.
    """
    reference: datetime
    code = ErrorCode.E2012_INVALID_DATE

    def __post_init__(self):
        _reference(self.name, self.reference)

    @abstractmethod
    def _holds(self, value: datetime) -> bool:
        """Comparison against the reference for a datetime of matching awareness."""

    def evaluate(self, value: Any) -> bool:
        if kind_of(value) is not ValueKind.DATETIME: return False
        if not same_awareness(value, self.reference): return False
        return self._holds(value)

    def message(self, value: Any) -> str:
        return messages.ILLOGICAL_DATES


@dataclass(frozen=True, slots=True)
class After(_DateRelation):
    @property
    def name(self) -> str:
        return "after"

    def _holds(self, value: datetime) -> bool:
        return value > self.reference


@dataclass(frozen=True, slots=True)
class Before(_DateRelation):
    @property
    def name(self) -> str:
        return "before"

    def _holds(self, value: datetime) -> bool:
        return value < self.reference


@dataclass(frozen=True, slots=True)
class NotAfter(_DateRelation):
    @property
    def name(self) -> str:
        return "not_after"

    def _holds(self, value: datetime) -> bool:
        return value <= self.reference


@dataclass(frozen=True, slots=True)
class NotBefore(_DateRelation):
    @property
    def name(self) -> str:
        return "not_before"

    def _holds(self, value: datetime) -> bool:
        return value >= self.reference


@dataclass(frozen=True, slots=True)
class MaxDaysRange(Rule):
    """At most max_days calendar days between the value and the reference, in either direction."""
    reference: datetime
    max_days: int
    code = ErrorCode.E2003_OUT_OF_RANGE

    def __post_init__(self):
        _reference("max_days_range", self.reference)
        if kind_of(self.max_days) is not ValueKind.INTEGER or self.max_days < 0:
            raise misconfigured("max_days_range", "max_days must be a non-negative integer",
                parameter=self.max_days)

    @property
    def name(self) -> str:
        return f"max_days_range[{self.max_days}]"

    def evaluate(self, value: Any) -> bool:
        if kind_of(value) is not ValueKind.DATETIME: return False
        return days_between(self.reference, value) <= self.max_days

    def message(self, value: Any) -> str:
        return messages.time_range_too_long_msg(self.max_days)
