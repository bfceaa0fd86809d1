"""Fields and Field Sets

A Field is a name, a value and an ordered list of rules. A FieldSet keeps
fields in insertion order with unique names, and lets callers build a base
template once and re-parameterize it right before validating:

    fields = user_fields(user)
    fields.set_rules("name", [Required(), Max(limit)]).set_value("age", age)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from fieldsafe.errors import ErrorCode

from .rules import Rule, misconfigured


@dataclass(slots=True)
class Field:
    """An individual field to be validated.

    `name` is the key used in the error map when the field is not valid.
    """
    name: str
    value: Any = None
    rules: list[Rule] = field(default_factory=list)

    def __post_init__(self):
        self.rules = list(self.rules)

    def __str__(self) -> str:
        rule_names = ", ".join(rule.name for rule in self.rules)
        return f"{{ Name: {self.name}, Value: {self.value!r}, Rules: {rule_names} }}"


class FieldSet:
    """Ordered collection of fields keyed by unique name."""

    __slots__ = ("_fields", "_index")

    def __init__(self, fields: Iterable[Field] = ()):
        self._fields: list[Field] = []
        self._index: dict[str, int] = {}
        for f in fields:
            self.append(f)

    def append(self, new_field: Field) -> FieldSet:
        """Add a field; its name must not be taken."""
        if new_field.name in self._index:
            raise misconfigured("field_set", f"duplicate field name '{new_field.name}'",
                parameter=new_field.name, code=ErrorCode.E2031_DUPLICATE_FIELD)
        self._index[new_field.name] = len(self._fields)
        self._fields.append(new_field)
        return self

    def get(self, name: str) -> Field | None:
        position = self._index.get(name)
        return None if position is None else self._fields[position]

    def set_rules(self, name: str, rules: Iterable[Rule]) -> FieldSet:
        """Overwrite the rules of the named field. No-op if absent."""
        if (f := self.get(name)) is not None:
            f.rules = list(rules)
        return self

    def set_value(self, name: str, value: Any) -> FieldSet:
        """Overwrite the value of the named field. No-op if absent."""
        if (f := self.get(name)) is not None:
            f.value = value
        return self

    def upsert_field(self, name: str, new_field: Field) -> FieldSet:
        """Replace the field stored under name in place, or append new_field.

        The replacement keeps the position of the field it replaces. Renaming
        onto a name held by another field is rejected.
        """
        position = self._index.get(name)
        if position is None:
            return self.append(new_field)
        if new_field.name != name and new_field.name in self._index:
            raise misconfigured("field_set", f"duplicate field name '{new_field.name}'",
                parameter=new_field.name, code=ErrorCode.E2031_DUPLICATE_FIELD)
        del self._index[name]
        self._index[new_field.name] = position
        self._fields[position] = new_field
        return self

    def names(self) -> list[str]:
        return [f.name for f in self._fields]

    def __getitem__(self, name: str) -> Field:
        if (f := self.get(name)) is None:
            raise KeyError(name)
        return f

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __str__(self) -> str:
        return "[" + ", ".join(str(f) for f in self._fields) + "]"

    def __repr__(self) -> str:
        return f"FieldSet({self._fields!r})"
