# ssa_core/subtitles/errors.py
"""Errors raised by the section record codec."""
from __future__ import annotations


class CodecError(ValueError):
    """Base error for header/record decoding and encoding."""


class MalformedLineError(CodecError):
    """A header or data line has no ':' between its label and its values."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"unable to split on ':': {line!r}")


class FieldCountMismatchError(CodecError):
    """A data line does not carry as many values as the Format line declares."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"wrong number of fields, expected: {expected}, actual: {actual}"
        )


class MissingFieldError(CodecError):
    """A mandatory field was not set while building a strict record."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} not found")


class UnknownFieldMissingError(CodecError):
    """The schema names an unknown field the record does not carry."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"unknown fields did not contain field: {field}")


class RoundTripMismatchError(CodecError):
    """A line decoded fine but did not re-encode to the same text."""

    def __init__(self, line: str, encoded: str):
        self.line = line
        self.encoded = encoded
        super().__init__(f"re-encoded line differs: {line!r} -> {encoded!r}")
