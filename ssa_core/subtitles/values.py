# ssa_core/subtitles/values.py
# -*- coding: utf-8 -*-
"""
Permissive enumerations for ASS/SSA field names and field values.

Every enum here has a closed set of symbols mapped to an exact literal
(e.g. ``"-1"`` for a true boolean, ``"MarginL"`` for a field name). Parsing
never fails: text that matches no literal comes back as an ``Unknown``
wrapping the text unchanged, so ``format_value(X.parse(s)) == s`` for any
string ``s``. That is what lets unrecognised fields and values survive a
decode -> encode cycle.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Unknown:
    """Catch-all variant holding text that matched no known symbol."""

    text: str

    def __str__(self) -> str:
        return self.text


class SymbolEnum(str, Enum):
    """Base for closed symbol sets whose values are their literal spelling."""

    @classmethod
    def parse(cls, text: str) -> SymbolEnum | Unknown:
        try:
            return cls(text)
        except ValueError:
            return Unknown(text)

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


def format_value(value: SymbolEnum | Unknown | str) -> str:
    """Render a parsed value (or plain text) back to its literal form."""
    if isinstance(value, SymbolEnum):
        return value.value
    if isinstance(value, Unknown):
        return value.text
    return value


class Boolean(SymbolEnum):
    """
    ASS tri-state boolean.

    ``-1`` is true and ``0`` is false; ``1`` is NOT true and is kept as
    ``Unknown("1")`` like any other text.
    """

    TRUE = '-1'
    FALSE = '0'


class BorderStyle(SymbolEnum):
    OUTLINE_AND_DROP_SHADOW = '1'
    OPAQUE_BOX = '3'


class Alignment(SymbolEnum):
    """Numpad-style alignment codes."""

    BOTTOM_LEFT = '1'
    BOTTOM_CENTER = '2'
    BOTTOM_RIGHT = '3'
    MIDDLE_LEFT = '4'
    MIDDLE_CENTER = '5'
    MIDDLE_RIGHT = '6'
    TOP_LEFT = '7'
    TOP_CENTER = '8'
    TOP_RIGHT = '9'
