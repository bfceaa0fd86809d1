"""Pattern Catalog

Compiled patterns behind the format rules, exposed so callers can compose
them with Match and MatchList. Patterns are searched, not fully matched:
those that must cover the whole value carry their own anchors. Catalog
patterns are ASCII-only and end-anchor with \Z, so a trailing newline or
a non-ASCII digit never matches.
"""
from __future__ import annotations

import re
from typing import Iterable

from .rules import misconfigured

# Literally accepts anything
WHATEVER = re.compile(r".*")

EMAIL = re.compile(r"[^@ \t\r\n]+@[^@ \t\r\n]+\.[^@ \t\r\n]+", re.ASCII)

# Optional country (+55/0055) and area codes, with or without symbols (+-()) and whitespace
PHONE = re.compile(r"(?:(?:\+|00)?(55)\s?)?(?:\(?([1-9][0-9])\)?\s?)(?:((?:9\d|[2-9])\d{3})\-?(\d{4}))", re.ASCII)

# With or without symbols (.-)
CPF = re.compile(r"^\d{3}.?\d{3}.?\d{3}\-?\d{2}\Z", re.ASCII)

# With or without symbols (.-/)
CNPJ = re.compile(r"^(\d{2}.?\d{3}.?\d{3}\/?\d{4}\-?\d{2})\Z", re.ASCII)

# Brazilian CEP, with or without dash
POSTAL_CODE = re.compile(r"(^\d{5})\-?(\d{3}\Z)", re.ASCII)

# Digits only, or "no number" written as s/n in any letter case
ADDRESS_NUMBER = re.compile(r"^(?:s\/n|S\/n|S\/N|s\/N)|^(\d)*\Z", re.ASCII)

UUID = re.compile(r"^[a-fA-F0-9]{8}-[a-fA-F0-9]{4}-(1|4|5|7)[a-fA-F0-9]{3}-[89abAB][a-fA-F0-9]{3}-[a-fA-F0-9]{12}\Z", re.ASCII)

# Random Pix keys are version 4 UUIDs
UUID_V4 = re.compile(r"^[a-fA-F0-9]{8}-[a-fA-F0-9]{4}-4[a-fA-F0-9]{3}-[89abAB][a-fA-F0-9]{3}-[a-fA-F0-9]{12}\Z", re.ASCII)


def compile_patterns(patterns: Iterable[str | re.Pattern[str]], *, rule: str = "match") -> tuple[re.Pattern[str], ...]:
    """Compile pattern text, passing already-compiled patterns through.

    Raises RuleConfigurationError for malformed pattern text or an empty list.
    """
    compiled = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
        elif isinstance(pattern, str):
            try:
                compiled.append(re.compile(pattern))
            except re.error as e:
                raise misconfigured(rule, f"malformed pattern: {e}", parameter=pattern, cause=e) from e
        else:
            raise misconfigured(rule, f"expected str or compiled pattern, got {type(pattern).__name__}",
                parameter=pattern)
    if not compiled:
        raise misconfigured(rule, "at least one pattern is required")
    return tuple(compiled)


def search_any(patterns: Iterable[re.Pattern[str]], value: str) -> bool:
    return any(p.search(value) for p in patterns)


def search_all(patterns: Iterable[re.Pattern[str]], value: str) -> bool:
    return all(p.search(value) for p in patterns)
