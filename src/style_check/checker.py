"""StyleChecker — the main API.  Settings in, display-ready matches out.

Usage:
    from style_check import StyleChecker, load_config

    checker = StyleChecker(load_config({"categories": {"cliche": False}}))
    for m in checker.scan("Basically, we did it in order to win."):
        print(m.line, m.column, m.text, m.replacement)

    checker.update_settings(new_settings)   # rebuilds; safe while scans run
"""

from __future__ import annotations
import bisect
import logging
import threading
from typing import Iterable

from .config import StyleCheckSettings, build_patterns
from .matcher import PatternMatcher
from .types import Match, Pattern, StyleMatch

logger = logging.getLogger(__name__)


class StyleChecker:
    """Owns the active settings and the matcher compiled from them.

    Settings updates build a new matcher first and then swap the reference,
    so concurrent scans never see a half-built pattern set.
    """

    def __init__(self, settings: StyleCheckSettings | None = None) -> None:
        self._lock = threading.Lock()
        self._settings = settings or StyleCheckSettings()
        self._matcher = PatternMatcher(build_patterns(self._settings))

    @property
    def settings(self) -> StyleCheckSettings:
        return self._settings

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return self._matcher.patterns

    def update_settings(self, settings: StyleCheckSettings) -> None:
        """Replace the settings and recompile the pattern set."""
        matcher = PatternMatcher(build_patterns(settings))
        with self._lock:
            self._settings = settings
            self._matcher = matcher
        logger.info("style check settings updated: %d patterns active", len(matcher.patterns))

    def scan(self, text: str) -> list[StyleMatch]:
        """Scan text and resolve matches to line/column for display."""
        with self._lock:
            settings, matcher = self._settings, self._matcher
        if not settings.enabled:
            return []
        return collect_style_matches(text, matcher.scan(text))


def _line_starts(text: str) -> list[int]:
    starts = [0]
    index = text.find("\n")
    while index != -1:
        starts.append(index + 1)
        index = text.find("\n", index + 1)
    return starts


def collect_style_matches(text: str, matches: Iterable[Match]) -> list[StyleMatch]:
    """Turn raw matches into StyleMatches.

    Spans outside the text are dropped, matches sharing span, category and
    replacement are collapsed into one, and the result is sorted by
    (start, end, category).
    """
    size = len(text)
    starts = _line_starts(text)
    seen: set[tuple[int, int, str, str | None]] = set()
    out: list[StyleMatch] = []

    for match in matches:
        if match.start < 0 or match.end <= match.start or match.end > size:
            continue

        key = (match.start, match.end, match.pattern.category, match.pattern.replacement)
        if key in seen:
            continue
        seen.add(key)

        line_index = bisect.bisect_right(starts, match.start) - 1
        out.append(StyleMatch(
            start=match.start,
            end=match.end,
            text=text[match.start:match.end],
            category=match.pattern.category,
            replacement=match.pattern.replacement,
            line=line_index + 1,
            column=match.start - starts[line_index],
        ))

    out.sort(key=lambda m: (m.start, m.end, m.category))
    return out


def resolve_style_match_at_position(
    matches: list[StyleMatch],
    position: int,
    side: int = 0,
) -> StyleMatch | None:
    """Find the match under a cursor.

    `matches` must be sorted by start.  With side < 0 the cursor is taken
    to sit just after the character it touches.
    """
    position = position - 1 if side < 0 and position > 0 else position
    for match in matches:
        if match.start > position:
            break
        if match.start <= position < match.end:
            return match
    return None
