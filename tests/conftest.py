# tests/conftest.py
from pathlib import Path
import pytest

DEFAULT_STYLE_FORMAT = (
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, "
    "BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, "
    "BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding"
)
DEFAULT_EVENT_FORMAT = (
    "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"
)

SAMPLE_SCRIPT = """[Script Info]
; Script generated by Aegisub
Title: Sample
ScriptType: v4.00+
PlayResX: 1920
PlayResY: 1080

[V4+ Styles]
{style_format}
Style: Default,Roboto Medium,26,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,1.3,0,2,20,20,23,0
Style: zhu2,方正准圆_GBK,33,&H02FFFFFF,&H000000FF,&H00000000,&H00000000,-1,0,0,0,100,100,0,0,1,2,0.1,2,10,10,10,1

[Events]
{event_format}
; a comment line
Dialogue: 0,0:00:00.00,0:00:05.00,Default,,0,0,0,,Hello, world
Comment: 0,0:04:12.94,0:04:12.98,Default,,0,0,0,,==========OP==========
Dialogue: 0,0:24:00.43,0:24:02.42,Default,,0,0,0,,
""".format(style_format=DEFAULT_STYLE_FORMAT, event_format=DEFAULT_EVENT_FORMAT)


@pytest.fixture
def style_format():
    return DEFAULT_STYLE_FORMAT


@pytest.fixture
def event_format():
    return DEFAULT_EVENT_FORMAT


@pytest.fixture
def sample_script_text():
    return SAMPLE_SCRIPT


@pytest.fixture
def sample_script(tmp_path: Path):
    """Write the sample script to disk as UTF-8 (no BOM)."""
    path = tmp_path / "sample.ass"
    path.write_text(SAMPLE_SCRIPT, encoding="utf-8")
    return path


@pytest.fixture
def write_script(tmp_path: Path):
    """Helper: write arbitrary script text under tmp_path and return the path."""
    def _write(text: str, name: str = "script.ass", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path
    return _write
