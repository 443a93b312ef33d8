# ssa_core/subtitles/interop.py
# -*- coding: utf-8 -*-
"""
Hand decoded sections to pysubs2.

The codec keeps colours, timestamps and override tags as opaque text. When a
caller needs their meaning (milliseconds, pysubs2.Color, ...), the strict
records are rendered back through their own contexts and loaded by pysubs2,
so both sides read exactly the same lines.
"""
from __future__ import annotations

from typing import Iterable

import pysubs2

from .event import EventContext, EventStrict
from .style import StyleContext, StyleStrict


def build_script_text(
    style_context: StyleContext | None,
    styles: Iterable[StyleStrict],
    event_context: EventContext | None,
    events: Iterable[EventStrict],
) -> str:
    """Render a minimal ASS script from decoded styles and events."""
    lines = ['[Script Info]', 'ScriptType: v4.00+', '']

    if style_context is not None:
        lines.append('[V4+ Styles]')
        lines.append(style_context.format_line())
        lines.extend(style_context.line_from_strict(s) for s in styles)
        lines.append('')

    if event_context is not None:
        lines.append('[Events]')
        lines.append(event_context.format_line())
        lines.extend(event_context.line_from_strict(e) for e in events)
        lines.append('')

    return '\n'.join(lines)


def to_ssafile(
    style_context: StyleContext | None,
    styles: Iterable[StyleStrict],
    event_context: EventContext | None,
    events: Iterable[EventStrict],
) -> pysubs2.SSAFile:
    """Load decoded sections into a pysubs2.SSAFile."""
    text = build_script_text(style_context, styles, event_context, events)
    return pysubs2.SSAFile.from_string(text, format_='ass')
