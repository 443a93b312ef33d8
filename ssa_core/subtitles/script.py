# ssa_core/subtitles/script.py
# -*- coding: utf-8 -*-
"""
Script-level helpers around the record codec.

Splits an ASS/SSA script into its bracketed sections, feeds each styles or
events section through the matching context and checks that every data line
re-encodes to exactly the text it was read from.
"""
from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

from ..config import CodecConfig
from .codec import SectionContext
from .errors import CodecError, MalformedLineError, RoundTripMismatchError
from .event import EventContext
from .style import StyleContext

logger = logging.getLogger(__name__)

# Encodings to try when auto-detecting
ENCODINGS_TO_TRY = [
    'utf-8',
    'shift_jis',
    'gbk',
    'big5',
    'cp1252',     # Windows Western European
    'latin1',
]


def detect_encoding(path: Path) -> tuple[str, bool]:
    """
    Detect file encoding.

    Returns:
        Tuple of (encoding_name, has_bom)
    """
    with open(path, 'rb') as f:
        raw = f.read()

    # UTF-32 BOMs first, their prefix looks like a UTF-16 BOM
    if raw.startswith(codecs.BOM_UTF32_LE):
        return ('utf-32-le', True)
    if raw.startswith(codecs.BOM_UTF32_BE):
        return ('utf-32-be', True)
    if raw.startswith(codecs.BOM_UTF8):
        return ('utf-8-sig', True)
    if raw.startswith(codecs.BOM_UTF16_LE):
        return ('utf-16-le', True)
    if raw.startswith(codecs.BOM_UTF16_BE):
        return ('utf-16-be', True)

    for encoding in ENCODINGS_TO_TRY:
        try:
            raw.decode(encoding)
            return (encoding, False)
        except (UnicodeDecodeError, LookupError):
            continue

    return ('utf-8', False)


@dataclass
class ScriptSections:
    """Raw lines of a script, bucketed by section header in file order."""

    sections: dict[str | None, list[str]]
    encoding: str = 'utf-8'
    has_bom: bool = False
    source_path: Path | None = None

    def names(self) -> list[str]:
        return [name for name in self.sections if name is not None]


def split_sections(lines: list[str]) -> dict[str | None, list[str]]:
    """
    Bucket lines under the most recent ``[Section]`` header.

    Lines before the first header are kept under ``None``. A header seen twice
    keeps appending to the same bucket.
    """
    sections: dict[str | None, list[str]] = {}
    current: str | None = None

    for line in lines:
        stripped = line.strip()
        if stripped.startswith('[') and stripped.endswith(']'):
            current = stripped
            sections.setdefault(current, [])
            continue
        sections.setdefault(current, []).append(line)

    return sections


def read_script(path: Path, encoding: str | None = None) -> ScriptSections:
    """Read an ASS/SSA file and split it into sections."""
    path = Path(path)
    has_bom = False
    if not encoding:
        encoding, has_bom = detect_encoding(path)

    with open(path, 'r', encoding=encoding, newline='') as f:
        content = f.read()
    if content.startswith('\ufeff'):
        content = content[1:]
        has_bom = True

    logger.debug("Read %s as %s (BOM: %s)", path, encoding, has_bom)
    return ScriptSections(
        sections=split_sections(content.splitlines()),
        encoding=encoding,
        has_bom=has_bom,
        source_path=path,
    )


def _data_lines(lines: list[str], comment_prefix: str) -> Iterator[tuple[int, str]]:
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        if comment_prefix and line.lstrip().startswith(comment_prefix):
            continue
        yield line_no, line


@dataclass
class DecodedSection:
    context: SectionContext | None
    records: list[tuple[int, Any]] = field(default_factory=list)


def decode_section(
    lines: list[str],
    context_cls: type[SectionContext],
    comment_prefix: str = ';',
) -> DecodedSection:
    """
    Decode every data line of one section into strict records.

    The first non-blank, non-comment line is the section's Format line.
    Codec errors propagate unchanged.
    """
    decoded = DecodedSection(context=None)
    for line_no, line in _data_lines(lines, comment_prefix):
        if decoded.context is None:
            decoded.context = context_cls.from_format_line(line)
            continue
        decoded.records.append((line_no, decoded.context.strict_from_line(line)))
    return decoded


@dataclass
class LineFailure:
    line_no: int  # 1-based, relative to the section header
    line: str
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {'line_no': self.line_no, 'line': self.line, 'reason': self.reason}


@dataclass
class SectionReport:
    section: str
    kind: str  # 'styles' or 'events'
    records: int = 0
    failures: list[LineFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        return {
            'section': self.section,
            'kind': self.kind,
            'records': self.records,
            'failures': [f.to_dict() for f in self.failures],
        }


def verify_section(
    section: str,
    lines: list[str],
    context_cls: type[SectionContext],
    comment_prefix: str = ';',
    stop_on_error: bool = False,
) -> SectionReport:
    """Round-trip every data line of a section and collect the ones that fail."""
    kind = 'styles' if issubclass(context_cls, StyleContext) else 'events'
    report = SectionReport(section=section, kind=kind)
    context: SectionContext | None = None

    for line_no, line in _data_lines(lines, comment_prefix):
        if context is None:
            try:
                context = context_cls.from_format_line(line)
            except MalformedLineError as e:
                if stop_on_error:
                    raise
                logger.warning("%s: bad Format line %d: %s", section, line_no, e)
                report.failures.append(LineFailure(line_no, line, str(e)))
                return report
            continue

        try:
            encoded = context.roundtrip(line)
            if encoded != line:
                raise RoundTripMismatchError(line, encoded)
        except CodecError as e:
            if stop_on_error:
                raise
            logger.warning("%s: line %d: %s", section, line_no, e)
            report.failures.append(LineFailure(line_no, line, str(e)))
            continue
        report.records += 1

    logger.info(
        "%s: %d record(s) round-tripped, %d failure(s)",
        section, report.records, len(report.failures),
    )
    return report


def section_context(name: str, config: CodecConfig) -> type[SectionContext] | None:
    """Pick the context for a section header, or None if the config skips it."""
    if name.lower() in {s.lower() for s in config.get('styles_sections', [])}:
        return StyleContext
    if name.lower() in {s.lower() for s in config.get('events_sections', [])}:
        return EventContext
    return None


def verify_script(script: ScriptSections, config: CodecConfig | None = None) -> list[SectionReport]:
    """Verify every styles/events section of ``script`` named in the config."""
    config = config or CodecConfig()
    comment_prefix = config.get('comment_prefix', ';')
    stop_on_error = bool(config.get('stop_on_error', False))

    reports = []
    for name in script.names():
        context_cls = section_context(name, config)
        if context_cls is None:
            logger.debug("Skipping section %s", name)
            continue
        reports.append(
            verify_section(name, script.sections[name], context_cls, comment_prefix, stop_on_error)
        )
    return reports
