# tests/test_style.py
import pytest

from ssa_core.subtitles.errors import MissingFieldError
from ssa_core.subtitles.style import Style, StyleContext, StyleStrict, StyleType
from ssa_core.subtitles.values import Alignment, Boolean, BorderStyle, Unknown


@pytest.mark.parametrize("line", [
    r"Style: Default,Roboto Medium,26,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,1.3,0,2,20,20,23,0",
    r"Style: zhu2,方正准圆_GBK,33,&H02FFFFFF,&H000000FF,&H00000000,&H00000000,-1,0,0,0,100,100,0,0,1,2,0.1,2,10,10,10,1",
    r"Style: Box,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H80000000,1,-1,0,0,100,100,0,0,3,2,0,7,10,10,10,1",
])
def test_style_lossless(style_format, line):
    context = StyleContext.from_format_line(style_format)
    parsed = context.style_strict_from_line(line)
    assert context.line_from_style_strict(parsed) == line


def test_style_values_are_typed(style_format):
    context = StyleContext.from_format_line(style_format)
    style = context.style_strict_from_line(
        r"Style: zhu2,方正准圆_GBK,33,&H02FFFFFF,&H000000FF,&H00000000,&H00000000,-1,0,0,0,100,100,0,0,1,2,0.1,2,10,10,10,1"
    )
    assert isinstance(style, StyleStrict)
    assert style.record_type is StyleType.STYLE
    assert style.name == "zhu2"
    assert style.fontname == "方正准圆_GBK"
    assert style.primary_color == "&H02FFFFFF"
    assert style.bold is Boolean.TRUE
    assert style.italic is Boolean.FALSE
    assert style.border_style is BorderStyle.OUTLINE_AND_DROP_SHADOW
    assert style.alignment is Alignment.BOTTOM_CENTER
    assert style.shadow == "0.1"
    assert style.unknown_fields == {}


def test_non_canonical_boolean_survives(style_format):
    context = StyleContext.from_format_line(style_format)
    line = r"Style: Box,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H80000000,1,-1,0,0,100,100,0,0,3,2,0,7,10,10,10,1"
    style = context.style_strict_from_line(line)
    assert style.bold == Unknown("1")
    assert style.italic is Boolean.TRUE
    assert style.border_style is BorderStyle.OPAQUE_BOX
    assert style.alignment is Alignment.TOP_LEFT
    assert context.line_from_style_strict(style) == line


def test_reordered_and_extra_columns_roundtrip():
    context = StyleContext.from_format_line(
        "Format: Name, Bold, Fontname, Fontsize, PrimaryColour, SecondaryColour, "
        "OutlineColour, BackColour, Italic, Underline, StrikeOut, ScaleX, ScaleY, "
        "Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, "
        "MarginV, Encoding, RelativeTo"
    )
    line = "Style: Sign,-1,Arial,40,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,100,100,0,0,1,2,2,8,10,10,10,1,0"
    style = context.style_strict_from_line(line)
    assert style.bold is Boolean.TRUE
    assert style.fontname == "Arial"
    assert style.unknown_fields == {"RelativeTo": "0"}
    assert context.line_from_style_strict(style) == line


def test_loose_style_leaves_missing_fields_unset():
    context = StyleContext.from_format_line("Format: Name, Fontname, Bold")
    style = context.style_from_line("Style: Default,Arial,-1")
    assert isinstance(style, Style)
    assert style.name == "Default"
    assert style.bold is Boolean.TRUE
    assert style.alignment is None
    assert style.encoding is None


def test_strict_style_requires_all_fields():
    context = StyleContext.from_format_line("Format: Name, Fontname, Bold")
    with pytest.raises(MissingFieldError) as exc:
        context.style_strict_from_line("Style: Default,Arial,-1")
    assert exc.value.field == "Fontsize"
    assert str(exc.value) == "Fontsize not found"


def test_v4_style_without_outline_colour_is_rejected():
    # SSA v4 uses TertiaryColour instead of OutlineColour
    context = StyleContext.from_format_line(
        "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, TertiaryColour, "
        "BackColour, Bold, Italic, BorderStyle, Outline, Shadow, Alignment, MarginL, "
        "MarginR, MarginV, AlphaLevel, Encoding"
    )
    line = "Style: Default,Arial,20,16777215,65535,65535,-2147483640,-1,0,1,3,0,2,30,30,30,0,0"
    style = context.style_from_line(line)
    assert style.unknown_fields["TertiaryColour"] == "65535"
    with pytest.raises(MissingFieldError) as exc:
        context.to_strict(style)
    assert exc.value.field == "OutlineColour"
