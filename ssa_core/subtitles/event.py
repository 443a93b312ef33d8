# ssa_core/subtitles/event.py
# -*- coding: utf-8 -*-
"""
[Events] section records.

Timing, style references and override tags are kept as the text found in the
file; the codec only guarantees that they come back out unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .codec import FieldSpec, SectionContext
from .values import SymbolEnum, Unknown


class EventField(SymbolEnum):
    """Known columns of the [Events] section."""

    LAYER = 'Layer'
    START = 'Start'
    END = 'End'
    STYLE = 'Style'
    NAME = 'Name'
    MARGIN_L = 'MarginL'
    MARGIN_R = 'MarginR'
    MARGIN_V = 'MarginV'
    EFFECT = 'Effect'
    TEXT = 'Text'


class EventType(SymbolEnum):
    """Line types of the [Events] section."""

    DIALOGUE = 'Dialogue'
    COMMENT = 'Comment'
    PICTURE = 'Picture'
    MOVIE = 'Movie'
    SOUND = 'Sound'
    COMMAND = 'Command'

    @classmethod
    def default(cls) -> EventType:
        return cls.DIALOGUE


@dataclass
class Event:
    """A decoded event line; any known field may still be missing."""

    layer: str | None = None
    start: str | None = None
    end: str | None = None
    style: str | None = None
    name: str | None = None
    margin_l: str | None = None
    margin_r: str | None = None
    margin_v: str | None = None
    effect: str | None = None
    text: str | None = None

    record_type: EventType | Unknown = field(default_factory=EventType.default)
    unknown_fields: dict[str, str] = field(default_factory=dict)


@dataclass
class EventStrict:
    """An event line with every known field present; the only form encoded."""

    layer: str
    start: str
    end: str
    style: str
    name: str
    margin_l: str
    margin_r: str
    margin_v: str
    effect: str
    text: str

    record_type: EventType | Unknown = field(default_factory=EventType.default)
    unknown_fields: dict[str, str] = field(default_factory=dict)

    @property
    def is_comment(self) -> bool:
        return self.record_type is EventType.COMMENT


class EventContext(SectionContext):
    """Codec for the data lines of one [Events] section."""

    field_enum = EventField
    type_enum = EventType
    record_cls = Event
    strict_cls = EventStrict
    field_specs = {
        EventField.LAYER: FieldSpec('layer'),
        EventField.START: FieldSpec('start'),
        EventField.END: FieldSpec('end'),
        EventField.STYLE: FieldSpec('style'),
        EventField.NAME: FieldSpec('name'),
        EventField.MARGIN_L: FieldSpec('margin_l'),
        EventField.MARGIN_R: FieldSpec('margin_r'),
        EventField.MARGIN_V: FieldSpec('margin_v'),
        EventField.EFFECT: FieldSpec('effect'),
        EventField.TEXT: FieldSpec('text'),
    }
    mandatory_fields = tuple(EventField)

    def event_from_line(self, line: str) -> Event:
        return self.record_from_line(line)

    def event_strict_from_line(self, line: str) -> EventStrict:
        return self.strict_from_line(line)

    def line_from_event_strict(self, event: EventStrict) -> str:
        return self.line_from_strict(event)
