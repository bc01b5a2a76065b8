"""Built-in pattern tables — fillers, redundancies and clichés.

Plain immutable data.  The config layer picks the enabled categories and
hands the result to the matcher; nothing here is consulted at scan time.
"""

from __future__ import annotations
from typing import Mapping

from .types import Pattern

FILLER = "filler"
REDUNDANCY = "redundancy"
CLICHE = "cliche"

CATEGORIES: tuple[str, ...] = (FILLER, REDUNDANCY, CLICHE)

CATEGORY_LABELS: dict[str, str] = {
    FILLER: "Fillers & Weak Language",
    REDUNDANCY: "Redundancies",
    CLICHE: "Clichés",
}

MARKER_STYLES: tuple[str, ...] = ("strikethrough", "underline", "highlight")

# Each entry: (text, replacement).  None = just delete it / rephrase.
_FILLERS: tuple[tuple[str, str | None], ...] = (
    ("actually", None),
    ("basically", None),
    ("literally", None),
    ("just", None),
    ("really", None),
    ("very", None),
    ("simply", None),
    ("totally", None),
    ("quite", None),
    ("somewhat", None),
    ("kind of", None),
    ("sort of", None),
    ("a bit", None),
    ("pretty much", None),
    ("i think", None),
    ("i believe", None),
    ("in my opinion", None),
    ("needless to say", None),
    ("for all intents and purposes", None),
    ("it is important to note that", None),
    ("in terms of", "about"),
    ("a lot of", "many"),
)

_REDUNDANCIES: tuple[tuple[str, str | None], ...] = (
    ("in order to", "to"),
    ("at this point in time", "now"),
    ("at the present time", "now"),
    ("due to the fact that", "because"),
    ("in spite of the fact that", "although"),
    ("in the event that", "if"),
    ("for the purpose of", "for"),
    ("with regard to", "about"),
    ("each and every", "every"),
    ("absolutely essential", "essential"),
    ("advance planning", "planning"),
    ("basic fundamentals", "fundamentals"),
    ("close proximity", "proximity"),
    ("completely finished", "finished"),
    ("end result", "result"),
    ("final outcome", "outcome"),
    ("free gift", "gift"),
    ("future plans", "plans"),
    ("join together", "join"),
    ("past history", "history"),
    ("repeat again", "repeat"),
    ("revert back", "revert"),
    ("unexpected surprise", "surprise"),
    ("first and foremost", "first"),
)

_CLICHES: tuple[tuple[str, str | None], ...] = (
    ("at the end of the day", "ultimately"),
    ("think outside the box", "be creative"),
    ("beat around the bush", "be direct"),
    ("low-hanging fruit", "easy wins"),
    ("the bottom line", None),
    ("needle in a haystack", None),
    ("only time will tell", None),
    ("better late than never", None),
    ("avoid like the plague", "avoid"),
    ("every cloud has a silver lining", None),
    ("in the nick of time", "just in time"),
    ("last but not least", "finally"),
    ("easier said than done", "difficult"),
    ("a blessing in disguise", None),
    ("when all is said and done", "ultimately"),
    ("it goes without saying", None),
    ("the tip of the iceberg", None),
    ("move the needle", None),
    ("game changer", None),
    ("paradigm shift", "change"),
    ("touch base", "talk"),
    ("circle back", "follow up"),
)

_TABLES: dict[str, tuple[tuple[str, str | None], ...]] = {
    FILLER: _FILLERS,
    REDUNDANCY: _REDUNDANCIES,
    CLICHE: _CLICHES,
}


def builtin_patterns(categories: Mapping[str, bool] | None = None) -> list[Pattern]:
    """Built-in patterns for the categories switched on (all when None)."""
    out: list[Pattern] = []
    for category in CATEGORIES:
        if categories is not None and not categories.get(category, False):
            continue
        out.extend(Pattern(text, category, replacement) for text, replacement in _TABLES[category])
    return out


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category.replace("_", " ").title())
