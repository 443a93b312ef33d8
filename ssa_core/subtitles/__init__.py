# ssa_core/subtitles/__init__.py
"""
Schema-driven record codec for ASS/SSA script sections.

This package provides:
- Permissive value enums (tri-state boolean, border style, alignment)
- FieldSchema: field layout resolved from a section's Format line
- StyleContext / EventContext: decode, strict conversion and encode of data lines
- Script helpers: section splitting and round-trip verification
"""

from .codec import FieldSpec, SectionContext, record_to_dict
from .errors import (
    CodecError,
    FieldCountMismatchError,
    MalformedLineError,
    MissingFieldError,
    RoundTripMismatchError,
    UnknownFieldMissingError,
)
from .event import Event, EventContext, EventField, EventStrict, EventType
from .schema import FieldSchema
from .style import Style, StyleContext, StyleField, StyleStrict, StyleType
from .values import Alignment, Boolean, BorderStyle, SymbolEnum, Unknown, format_value

__all__ = [
    # Values
    'Alignment',
    'Boolean',
    'BorderStyle',
    'SymbolEnum',
    'Unknown',
    'format_value',
    # Schema and codec
    'FieldSchema',
    'FieldSpec',
    'SectionContext',
    'record_to_dict',
    # Styles
    'Style',
    'StyleContext',
    'StyleField',
    'StyleStrict',
    'StyleType',
    # Events
    'Event',
    'EventContext',
    'EventField',
    'EventStrict',
    'EventType',
    # Errors
    'CodecError',
    'FieldCountMismatchError',
    'MalformedLineError',
    'MissingFieldError',
    'RoundTripMismatchError',
    'UnknownFieldMissingError',
]
