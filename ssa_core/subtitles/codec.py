# ssa_core/subtitles/codec.py
# -*- coding: utf-8 -*-
"""
Generic record codec shared by the style and event sections.

A concrete context (``StyleContext``, ``EventContext``) binds:

- the field-name enum used to resolve the section's ``Format:`` line
- the record-type enum for the tag before ``:`` on each data line
- a loose record class (every known field optional) and a strict one
  (every mandatory field required)
- a table mapping each known field to its record attribute and value parser

Decode splits a data line into exactly ``len(schema)`` values and assigns them
by position; encode walks the same schema and joins the rendered values back.
For any line that decodes, encoding with the same schema reproduces the line
(modulo whitespace around values, which decode trims).
"""
from __future__ import annotations

import logging
from dataclasses import fields as dataclass_fields
from typing import Any, Callable, ClassVar

from .errors import FieldCountMismatchError, MissingFieldError, UnknownFieldMissingError
from .schema import FIELD_SEPARATOR, FieldSchema, split_label, split_values
from .values import SymbolEnum, Unknown, format_value

logger = logging.getLogger(__name__)

ValueParser = Callable[[str], Any]


class FieldSpec:
    """Where a known field lives on a record and how its text is parsed."""

    __slots__ = ('attr', 'parse')

    def __init__(self, attr: str, parse: ValueParser | None = None):
        self.attr = attr
        self.parse = parse

    def __repr__(self) -> str:
        return f"FieldSpec({self.attr!r})"


class SectionContext:
    """
    Decode/encode data lines of one section against its resolved schema.

    The schema is built once from the section's Format line and reused, read
    only, for every line of that section.
    """

    field_enum: ClassVar[type[SymbolEnum]]
    type_enum: ClassVar[type[SymbolEnum]]
    record_cls: ClassVar[type]
    strict_cls: ClassVar[type]
    field_specs: ClassVar[dict[SymbolEnum, FieldSpec]]
    mandatory_fields: ClassVar[tuple[SymbolEnum, ...]]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        missing = [f for f in cls.field_enum if f not in cls.field_specs]
        if missing:
            raise TypeError(f"{cls.__name__} has no field spec for: {missing}")

    def __init__(self, schema: FieldSchema):
        self.schema = schema

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.schema.to_format_line()!r})"

    @classmethod
    def from_format_line(cls, line: str) -> SectionContext:
        return cls(FieldSchema.from_format_line(line, cls.field_enum))

    def format_line(self) -> str:
        return self.schema.to_format_line()

    # ------------------------------------------------------------------
    # Decode
    # ------------------------------------------------------------------

    def record_from_line(self, line: str):
        """Decode a data line into a loose record (known fields optional)."""
        label, body = split_label(line)
        values = split_values(body, len(self.schema))
        if len(values) != len(self.schema):
            raise FieldCountMismatchError(len(self.schema), len(values))

        record = self.record_cls(record_type=self.type_enum.parse(label))
        for field_id, value in zip(self.schema, values):
            if isinstance(field_id, Unknown):
                # Duplicate unknown names collapse onto one entry, last one wins.
                record.unknown_fields[field_id.text] = value
                continue
            spec = self.field_specs[field_id]
            setattr(record, spec.attr, spec.parse(value) if spec.parse else value)
        return record

    def to_strict(self, record):
        """Promote a loose record; the first unset mandatory field is an error."""
        values = {}
        for field_id in self.mandatory_fields:
            attr = self.field_specs[field_id].attr
            value = getattr(record, attr)
            if value is None:
                raise MissingFieldError(field_id.value)
            values[attr] = value
        for field_id, spec in self.field_specs.items():
            if spec.attr not in values:
                values[spec.attr] = getattr(record, spec.attr)
        return self.strict_cls(
            record_type=record.record_type,
            unknown_fields=record.unknown_fields,
            **values,
        )

    def strict_from_line(self, line: str):
        return self.to_strict(self.record_from_line(line))

    # ------------------------------------------------------------------
    # Encode
    # ------------------------------------------------------------------

    def line_from_strict(self, record) -> str:
        """Render a strict record back to a data line in schema order."""
        values = []
        for field_id in self.schema:
            if isinstance(field_id, Unknown):
                try:
                    value = record.unknown_fields[field_id.text]
                except KeyError:
                    raise UnknownFieldMissingError(field_id.text) from None
            else:
                value = getattr(record, self.field_specs[field_id].attr)
            values.append(format_value(value))
        return f"{format_value(record.record_type)}: " + FIELD_SEPARATOR.join(values)

    def roundtrip(self, line: str) -> str:
        """Decode ``line`` strictly and encode it again with this schema."""
        encoded = self.line_from_strict(self.strict_from_line(line))
        if encoded != line:
            logger.debug("Line not canonical: %r -> %r", line, encoded)
        return encoded


def record_to_dict(record) -> dict[str, Any]:
    """Flatten a (loose or strict) record to plain strings for JSON output."""
    result: dict[str, Any] = {}
    for f in dataclass_fields(record):
        value = getattr(record, f.name)
        if f.name == 'unknown_fields':
            result[f.name] = dict(value)
        elif value is None:
            result[f.name] = None
        else:
            result[f.name] = format_value(value)
    return result
