"""Exceptions raised while tokenizing, deducing and decoding display records."""

from typing import Optional


class SegmentSearchError(ValueError):
    """Base class for all decode failures. Carries the input line when known."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self):
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class TokenizeError(SegmentSearchError):
    """Malformed record text: wrong token counts, bad letters, bad lengths."""


class MalformedTrainingSetError(SegmentSearchError):
    """The 10 training patterns cannot be the digits 0-9 under any wiring."""


class UnknownPatternError(SegmentSearchError):
    """A readout pattern does not match any training pattern of its record."""


class ReadoutLengthError(SegmentSearchError):
    """A readout does not have exactly four patterns."""
