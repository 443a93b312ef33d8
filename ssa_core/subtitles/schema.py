# ssa_core/subtitles/schema.py
"""
Field schema resolution for ``Format:``-driven sections.

A ``[V4+ Styles]`` or ``[Events]`` section declares its column layout once:

    Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text

Every following data line is read against that ordered list of names.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .errors import MalformedLineError
from .values import SymbolEnum, Unknown, format_value

LABEL_SEPARATOR = ':'
FIELD_SEPARATOR = ','

FieldId = SymbolEnum | Unknown


def split_label(line: str) -> tuple[str, str]:
    """Split ``label: rest`` on the first ':'; the label is returned untrimmed."""
    label, sep, rest = line.partition(LABEL_SEPARATOR)
    if not sep:
        raise MalformedLineError(line)
    return label, rest


def split_values(text: str, count: int) -> list[str]:
    """
    Split ``text`` into at most ``count`` trimmed values.

    The last value keeps any remaining separators, so free text such as an
    event's Text field may contain commas.
    """
    return [v.strip() for v in text.split(FIELD_SEPARATOR, max(count - 1, 0))]


@dataclass(frozen=True)
class FieldSchema:
    """Ordered field identifiers of one section, exactly as declared."""

    fields: tuple[FieldId, ...]

    @classmethod
    def from_format_line(cls, line: str, field_enum: type[SymbolEnum]) -> FieldSchema:
        _, names = split_label(line)
        return cls(tuple(field_enum.parse(n.strip()) for n in names.split(FIELD_SEPARATOR)))

    def to_format_line(self, label: str = 'Format') -> str:
        return f"{label}: " + ', '.join(format_value(f) for f in self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[FieldId]:
        return iter(self.fields)

    def __getitem__(self, index: int) -> FieldId:
        return self.fields[index]
