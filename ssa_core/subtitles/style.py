# ssa_core/subtitles/style.py
# -*- coding: utf-8 -*-
"""
[V4+ Styles] section records.

Field order matches the usual V4+ Styles Format line, but the actual order
(and any extra columns) always comes from the section's own Format line.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .codec import FieldSpec, SectionContext
from .values import Alignment, Boolean, BorderStyle, SymbolEnum, Unknown


class StyleField(SymbolEnum):
    """Known columns of the [V4+ Styles] section."""

    NAME = 'Name'
    FONTNAME = 'Fontname'
    FONTSIZE = 'Fontsize'
    PRIMARY_COLOUR = 'PrimaryColour'
    SECONDARY_COLOUR = 'SecondaryColour'
    OUTLINE_COLOUR = 'OutlineColour'
    BACK_COLOUR = 'BackColour'
    BOLD = 'Bold'
    ITALIC = 'Italic'
    UNDERLINE = 'Underline'
    STRIKE_OUT = 'StrikeOut'
    SCALE_X = 'ScaleX'
    SCALE_Y = 'ScaleY'
    SPACING = 'Spacing'
    ANGLE = 'Angle'
    BORDER_STYLE = 'BorderStyle'
    OUTLINE = 'Outline'
    SHADOW = 'Shadow'
    ALIGNMENT = 'Alignment'
    MARGIN_L = 'MarginL'
    MARGIN_R = 'MarginR'
    MARGIN_V = 'MarginV'
    ENCODING = 'Encoding'


class StyleType(SymbolEnum):
    STYLE = 'Style'

    @classmethod
    def default(cls) -> StyleType:
        return cls.STYLE


@dataclass
class Style:
    """A decoded style line; any known field may still be missing."""

    name: str | None = None
    fontname: str | None = None
    fontsize: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    outline_color: str | None = None
    back_color: str | None = None
    bold: Boolean | Unknown | None = None
    italic: Boolean | Unknown | None = None
    underline: Boolean | Unknown | None = None
    strike_out: Boolean | Unknown | None = None
    scale_x: str | None = None
    scale_y: str | None = None
    spacing: str | None = None
    angle: str | None = None
    border_style: BorderStyle | Unknown | None = None
    outline: str | None = None
    shadow: str | None = None
    alignment: Alignment | Unknown | None = None
    margin_l: str | None = None
    margin_r: str | None = None
    margin_v: str | None = None
    encoding: str | None = None

    record_type: StyleType | Unknown = field(default_factory=StyleType.default)
    unknown_fields: dict[str, str] = field(default_factory=dict)


@dataclass
class StyleStrict:
    """A style line with every known field present; the only form encoded."""

    name: str
    fontname: str
    fontsize: str
    primary_color: str
    secondary_color: str
    outline_color: str
    back_color: str
    bold: Boolean | Unknown
    italic: Boolean | Unknown
    underline: Boolean | Unknown
    strike_out: Boolean | Unknown
    scale_x: str
    scale_y: str
    spacing: str
    angle: str
    border_style: BorderStyle | Unknown
    outline: str
    shadow: str
    alignment: Alignment | Unknown
    margin_l: str
    margin_r: str
    margin_v: str
    encoding: str

    record_type: StyleType | Unknown = field(default_factory=StyleType.default)
    unknown_fields: dict[str, str] = field(default_factory=dict)


class StyleContext(SectionContext):
    """Codec for the data lines of one [V4+ Styles] section."""

    field_enum = StyleField
    type_enum = StyleType
    record_cls = Style
    strict_cls = StyleStrict
    field_specs = {
        StyleField.NAME: FieldSpec('name'),
        StyleField.FONTNAME: FieldSpec('fontname'),
        StyleField.FONTSIZE: FieldSpec('fontsize'),
        StyleField.PRIMARY_COLOUR: FieldSpec('primary_color'),
        StyleField.SECONDARY_COLOUR: FieldSpec('secondary_color'),
        StyleField.OUTLINE_COLOUR: FieldSpec('outline_color'),
        StyleField.BACK_COLOUR: FieldSpec('back_color'),
        StyleField.BOLD: FieldSpec('bold', Boolean.parse),
        StyleField.ITALIC: FieldSpec('italic', Boolean.parse),
        StyleField.UNDERLINE: FieldSpec('underline', Boolean.parse),
        StyleField.STRIKE_OUT: FieldSpec('strike_out', Boolean.parse),
        StyleField.SCALE_X: FieldSpec('scale_x'),
        StyleField.SCALE_Y: FieldSpec('scale_y'),
        StyleField.SPACING: FieldSpec('spacing'),
        StyleField.ANGLE: FieldSpec('angle'),
        StyleField.BORDER_STYLE: FieldSpec('border_style', BorderStyle.parse),
        StyleField.OUTLINE: FieldSpec('outline'),
        StyleField.SHADOW: FieldSpec('shadow'),
        StyleField.ALIGNMENT: FieldSpec('alignment', Alignment.parse),
        StyleField.MARGIN_L: FieldSpec('margin_l'),
        StyleField.MARGIN_R: FieldSpec('margin_r'),
        StyleField.MARGIN_V: FieldSpec('margin_v'),
        StyleField.ENCODING: FieldSpec('encoding'),
    }
    mandatory_fields = tuple(StyleField)

    def style_from_line(self, line: str) -> Style:
        return self.record_from_line(line)

    def style_strict_from_line(self, line: str) -> StyleStrict:
        return self.strict_from_line(line)

    def line_from_style_strict(self, style: StyleStrict) -> str:
        return self.line_from_strict(style)
