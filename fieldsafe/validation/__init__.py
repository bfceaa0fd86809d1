"""Declarative Field Validation

Named values, each with an ordered list of rules. Validation reports, per
field, the message of the first rule that fails, plus an overall verdict.

Key Features:
- Immutable, reusable rules (predicate + message producer)
- Built-in catalog: presence, formats, bounds, membership, cross-field, dates
- Message override per rule via `with_message`
- Short-circuit evaluation per field
- Error map, Result or exception flavours of the same evaluation

Usage:
    from fieldsafe.validation import (
        Field, FieldSet, validate,
        Required, Email, Max, StrongPassword,
    )

    fields = FieldSet([
        Field("email", user.email, [Required(), Email(), Max(128)]),
        Field("password", user.password, [Required(), Max(128), StrongPassword()]),
    ])
    errors, ok = validate(fields)
"""

from .values import (
    ValueKind,
    kind_of,
    has_value,
    all_have_value,
    values_equal,
    all_unique,
    is_strong_secret,
    days_between,
    SECRET_SYMBOLS,
)

from .rules import (
    ValidationResult,
    Rule,
    WithMessage,
    Check,
)

from . import messages, patterns

from .catalog import (
    # Presence
    Required,
    IsTrue,
    IsFalse,
    RequiredUnless,
    # Formats
    Email,
    Phone,
    Cpf,
    Cnpj,
    CpfCnpj,
    PostalCode,
    UUIDString,
    PixKey,
    RandomPixKey,
    Match,
    MatchList,
    StrongPassword,
    # Bounds
    Min,
    Max,
    # Membership
    OneOf,
    NotOneOf,
    UniqueList,
    # Dates
    After,
    Before,
    NotAfter,
    NotBefore,
    MaxDaysRange,
)

from .fields import Field, FieldSet

from .validator import (
    ErrorMessages,
    validate,
    validate_result,
    ensure_valid,
)

__all__ = [
    # Value semantics
    "ValueKind",
    "kind_of",
    "has_value",
    "all_have_value",
    "values_equal",
    "all_unique",
    "is_strong_secret",
    "days_between",
    "SECRET_SYMBOLS",
    # Rules
    "ValidationResult",
    "Rule",
    "WithMessage",
    "Check",
    # Catalogs
    "messages",
    "patterns",
    "Required",
    "IsTrue",
    "IsFalse",
    "RequiredUnless",
    "Email",
    "Phone",
    "Cpf",
    "Cnpj",
    "CpfCnpj",
    "PostalCode",
    "UUIDString",
    "PixKey",
    "RandomPixKey",
    "Match",
    "MatchList",
    "StrongPassword",
    "Min",
    "Max",
    "OneOf",
    "NotOneOf",
    "UniqueList",
    "After",
    "Before",
    "NotAfter",
    "NotBefore",
    "MaxDaysRange",
    # Fields
    "Field",
    "FieldSet",
    # Evaluation
    "ErrorMessages",
    "validate",
    "validate_result",
    "ensure_valid",
]
