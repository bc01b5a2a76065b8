"""Core types."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Pattern:
    """A literal phrase to flag."""
    text: str                       # one or more words, single-spaced
    category: str                   # "filler" | "redundancy" | "cliche" | custom
    replacement: str | None = None  # suggestion shown to the writer

    def to_payload(self) -> dict[str, object]:
        return {
            "text": self.text,
            "category": self.category,
            "replacement": self.replacement,
        }


@dataclass(frozen=True, slots=True)
class Match:
    """One occurrence of a pattern; codepoint offsets, end exclusive."""
    pattern: Pattern
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class StyleMatch:
    """A match resolved against the document for display."""
    start: int
    end: int
    text: str                       # literal source text, original casing
    category: str
    replacement: str | None
    line: int                       # 1-based
    column: int                     # 0-based, in codepoints

    def to_payload(self) -> dict[str, object]:
        return {
            "from": self.start,
            "to": self.end,
            "text": self.text,
            "category": self.category,
            "replacement": self.replacement,
            "line": self.line,
            "column": self.column,
        }
