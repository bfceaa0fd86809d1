"""Value Semantics

What "having a value" means for each kind of field value, plus the equality,
uniqueness, password-strength and calendar helpers the catalog is built on.

Field values are dynamically typed. Every helper first classifies the value
into a closed set of kinds (ValueKind) and matches on that; anything the
library does not recognize lands in ValueKind.OTHER and is treated as
valueless/invalid rather than raising.
"""
from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Sequence


class ValueKind(str, Enum):
    """Closed classification of field values."""
    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DATETIME = "datetime"
    SEQUENCE = "sequence"
    OTHER = "other"


NUMERIC_KINDS = frozenset({ValueKind.INTEGER, ValueKind.FLOAT})

# Canonical "zero" instant: a datetime equal to this (ignoring tzinfo) has no value.
ZERO_DATETIME = datetime.min

SECRET_MIN_LENGTH = 8
SECRET_SYMBOLS = "@!\"#$%&'()*+"

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(f"[{re.escape(SECRET_SYMBOLS)}]")


def kind_of(value: Any) -> ValueKind:
    """Classify a runtime value. bool is checked before int (bool subclasses int)."""
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, datetime):
        return ValueKind.DATETIME
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def has_value(value: Any) -> bool:
    """Whether a value counts as present.

    - bool: it must be True.
    - str: at least one character (code point); whitespace counts.
    - int, float: not zero.
    - datetime: not the zero instant (datetime.min).
    - anything else, including None: never has a value.
    """
    match kind_of(value):
        case ValueKind.BOOLEAN:
            return value
        case ValueKind.STRING:
            return len(value) > 0
        case ValueKind.INTEGER | ValueKind.FLOAT:
            return value != 0
        case ValueKind.DATETIME:
            return value.replace(tzinfo=None) != ZERO_DATETIME
        case _:
            return False


def all_have_value(*values: Any) -> bool:
    """All provided values must have a value.

    Useful to fold several related fields into one condition, e.g. to require
    a state registration unless the full address is given:

        RequiredUnless(all_have_value(postal_code, street, number))
    """
    return all(has_value(v) for v in values)


def values_equal(a: Any, b: Any) -> bool:
    """Kind-aware equality: 1 != 1.0 and True != 1."""
    return kind_of(a) is kind_of(b) and a == b


def all_unique(values: Iterable[Any]) -> bool:
    """Single pass; False on the first value already seen anywhere before it."""
    seen: set[tuple[ValueKind, Any]] = set()
    unhashable: list[Any] = []
    for value in values:
        try:
            key = (kind_of(value), value)
            if key in seen:
                return False
            seen.add(key)
        except TypeError:
            if any(values_equal(value, other) for other in unhashable):
                return False
            unhashable.append(value)
    return True


def is_strong_secret(secret: str, max_length: int | None = None) -> bool:
    """8+ characters with uppercase, lowercase, digit and a symbol from SECRET_SYMBOLS."""
    length = len(secret)
    if length < SECRET_MIN_LENGTH:
        return False
    if max_length is not None and length > max_length:
        return False
    return all(p.search(secret) for p in (_UPPERCASE, _LOWERCASE, _DIGIT, _SYMBOL))


def days_between(a: datetime, b: datetime) -> int:
    """Whole calendar days between two datetimes, ignoring time of day.

    Each datetime is truncated to midnight in its own zone, so 23:59 and
    00:01 on consecutive days are one day apart.
    """
    return abs((a.date() - b.date()).days)


def same_awareness(a: datetime, b: datetime) -> bool:
    """Both naive or both timezone-aware; mixed pairs cannot be ordered."""
    return (a.utcoffset() is None) == (b.utcoffset() is None)


def is_sequence_of(value: Any, item_type: type | tuple[type, ...] | None = None) -> bool:
    """list/tuple whose items (if item_type is given) are all instances of it."""
    if kind_of(value) is not ValueKind.SEQUENCE:
        return False
    if item_type is None:
        return True
    return all(isinstance(item, item_type) for item in value)


def describe(values: Sequence[Any], limit: int = 5) -> str:
    """Compact rendering of option lists for rule names."""
    shown = ", ".join(repr(v) for v in values[:limit])
    suffix = f"... +{len(values) - limit}" if len(values) > limit else ""
    return f"{shown}{suffix}"
