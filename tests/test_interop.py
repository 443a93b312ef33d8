# tests/test_interop.py
from ssa_core.subtitles.event import EventContext
from ssa_core.subtitles.interop import build_script_text, to_ssafile
from ssa_core.subtitles.script import decode_section, read_script
from ssa_core.subtitles.style import StyleContext


def _decode(sample_script):
    script = read_script(sample_script)
    styles = decode_section(script.sections["[V4+ Styles]"], StyleContext)
    events = decode_section(script.sections["[Events]"], EventContext)
    return styles, events


def test_build_script_text_reuses_codec_lines(sample_script, style_format, event_format):
    styles, events = _decode(sample_script)
    text = build_script_text(
        styles.context, [s for _, s in styles.records],
        events.context, [e for _, e in events.records],
    )
    lines = text.splitlines()
    assert style_format in lines
    assert event_format in lines
    assert "Dialogue: 0,0:00:00.00,0:00:05.00,Default,,0,0,0,,Hello, world" in lines


def test_to_ssafile(sample_script):
    styles, events = _decode(sample_script)
    subs = to_ssafile(
        styles.context, [s for _, s in styles.records],
        events.context, [e for _, e in events.records],
    )

    assert set(subs.styles) == {"Default", "zhu2"}
    assert subs.styles["Default"].fontname == "Roboto Medium"
    assert subs.styles["zhu2"].bold
    assert not subs.styles["Default"].bold

    assert len(subs.events) == 3
    first = subs.events[0]
    assert first.start == 0
    assert first.end == 5000
    assert first.style == "Default"
    assert first.text == "Hello, world"
    assert subs.events[1].is_comment


def test_to_ssafile_events_only(event_format):
    context = EventContext.from_format_line(event_format)
    event = context.event_strict_from_line("Dialogue: 0,0:00:01.50,0:00:02.00,Default,,0,0,0,,x")
    subs = to_ssafile(None, [], context, [event])
    assert subs.events[0].start == 1500
