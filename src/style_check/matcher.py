"""Aho-Corasick matcher for flagging literal phrases in prose.

Build is O(total pattern length); a scan is a single left-to-right pass,
O(len(text) + matches).  Matching is case-insensitive and only reports
occurrences that sit on word boundaries, so "just" flags "is just a" but
not "Justice" or "éjust".

Usage:
    from style_check import Pattern, PatternMatcher

    matcher = PatternMatcher([Pattern("in order to", "redundancy", "to")])
    for m in matcher.scan("We did it in order to win."):
        print(m.start, m.end, m.pattern.replacement)   # 10 21 to
"""

from __future__ import annotations
import logging
import unicodedata
from collections import deque
from typing import Iterable

from .types import Match, Pattern

logger = logging.getLogger(__name__)


def fold(text: str) -> str:
    """Lowercase codepoint by codepoint, never changing the length.

    A codepoint whose lowercase form expands (e.g. "İ") is kept as is, and
    no context rules apply (final sigma folds like any other sigma), so
    offsets in the folded text line up with the original.
    """
    out: list[str] = []
    for ch in text:
        lowered = ch.lower()
        out.append(lowered if len(lowered) == 1 else ch)
    return "".join(out)


def is_word_char(ch: str) -> bool:
    """Unicode letter, decimal digit or underscore."""
    if ch == "_":
        return True
    category = unicodedata.category(ch)
    return category[0] == "L" or category == "Nd"


class _Node:
    __slots__ = ("children", "fail", "output")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.fail: _Node | None = None
        self.output: list[int] = []     # indices into CompiledMatcher.patterns


class CompiledMatcher:
    """Immutable automaton over a fixed pattern list.  Use compile_patterns()."""

    __slots__ = ("patterns", "_root", "_lengths")

    def __init__(self, patterns: tuple[Pattern, ...], root: _Node, lengths: tuple[int, ...]) -> None:
        self.patterns = patterns
        self._root = root
        self._lengths = lengths

    @property
    def is_empty(self) -> bool:
        return not self._root.children

    def scan(self, text: str) -> list[Match]:
        """Return every boundary-respecting occurrence, sorted by (start, end, pattern order)."""
        if not text or self.is_empty:
            return []

        root = self._root
        lengths = self._lengths
        size = len(text)
        hits: list[tuple[int, int, int]] = []

        node = root
        for i, ch in enumerate(fold(text)):
            while node is not root and ch not in node.children:
                node = node.fail
            node = node.children.get(ch, root)

            for index in node.output:
                start = i - lengths[index] + 1
                end = i + 1
                if start > 0 and is_word_char(text[start - 1]):
                    continue
                if end < size and is_word_char(text[end]):
                    continue
                hits.append((start, end, index))

        hits.sort()
        patterns = self.patterns
        return [Match(pattern=patterns[index], start=start, end=end) for start, end, index in hits]


def compile_patterns(patterns: Iterable[Pattern]) -> CompiledMatcher:
    """Build a fresh automaton.  Empty pattern texts are skipped."""
    frozen = tuple(patterns)
    root = _Node()
    lengths: list[int] = []

    # --- Trie ---
    for index, pattern in enumerate(frozen):
        folded = fold(pattern.text)
        lengths.append(len(folded))
        if not folded:
            logger.debug("skipping empty pattern at position %d (%s)", index, pattern.category)
            continue
        node = root
        for ch in folded:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = _Node()
            node = child
        node.output.append(index)

    # --- Failure links (breadth-first) ---
    queue: deque[_Node] = deque()
    for child in root.children.values():
        child.fail = root
        queue.append(child)

    while queue:
        current = queue.popleft()
        for ch, child in current.children.items():
            fail = current.fail
            while fail is not None and ch not in fail.children:
                fail = fail.fail
            child.fail = root if fail is None else fail.children[ch]
            child.output.extend(child.fail.output)
            queue.append(child)

    logger.debug("compiled %d patterns", len(frozen))
    return CompiledMatcher(frozen, root, tuple(lengths))


class PatternMatcher:
    """Multi-pattern scanner that can be rebuilt when the pattern set changes.

    Scans are safe to run in parallel.  rebuild() swaps the compiled
    automaton in a single assignment; a scan already running keeps the
    automaton it started with.
    """

    __slots__ = ("_compiled",)

    def __init__(self, patterns: Iterable[Pattern] = ()) -> None:
        self._compiled = compile_patterns(patterns)

    def rebuild(self, patterns: Iterable[Pattern]) -> None:
        """Replace the pattern set wholesale, as if freshly constructed."""
        self._compiled = compile_patterns(patterns)

    def scan(self, text: str) -> list[Match]:
        """Scan text for all pattern matches."""
        return self._compiled.scan(text)

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return self._compiled.patterns
