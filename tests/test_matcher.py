"""Tests for the pattern matcher — automaton, boundaries, ordering, rebuild."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from concurrent.futures import ThreadPoolExecutor

from style_check import Pattern, PatternMatcher, builtin_patterns, compile_patterns
from style_check.matcher import fold, is_word_char


def filler(text, replacement=None):
    return Pattern(text, "filler", replacement)


# ── Basics ───────────────────────────────────────────────────────────

def test_single_word_patterns():
    matcher = PatternMatcher([filler("basically"), filler("actually")])
    matches = matcher.scan("This is basically just a test actually")
    assert len(matches) == 2
    assert matches[0].pattern.text == "basically"
    assert matches[1].pattern.text == "actually"


def test_multi_word_patterns():
    matcher = PatternMatcher([
        Pattern("in order to", "redundancy"),
        Pattern("at this point in time", "redundancy"),
    ])
    text = "We need to act in order to succeed. At this point in time, we are ready."
    matches = matcher.scan(text)
    assert len(matches) == 2
    assert matches[0].pattern.text == "in order to"
    assert text[matches[0].start:matches[0].end] == "in order to"
    assert matches[1].pattern.text == "at this point in time"
    assert text[matches[1].start:matches[1].end] == "At this point in time"


def test_phrase_interior_must_match_exactly():
    matcher = PatternMatcher([Pattern("in order to", "redundancy")])
    assert matcher.scan("in  order to win") == []
    assert matcher.scan("in-order-to win") == []
    assert len(matcher.scan("IN ORDER TO win")) == 1


def test_case_insensitive():
    matcher = PatternMatcher([filler("basically")])
    assert len(matcher.scan("This is BASICALLY a test. Basically speaking.")) == 2


def test_match_carries_canonical_pattern():
    pattern = Pattern("in order to", "redundancy", "to")
    matches = PatternMatcher([pattern]).scan("In Order To win")
    assert matches[0].pattern is pattern
    assert matches[0].pattern.replacement == "to"


def test_repeated_occurrences_left_to_right():
    matches = PatternMatcher([filler("just")]).scan("just just, JUST")
    assert [(m.start, m.end) for m in matches] == [(0, 4), (5, 9), (11, 15)]


# ── Word boundaries ──────────────────────────────────────────────────

def test_word_boundaries():
    matcher = PatternMatcher([filler("just")])
    matches = matcher.scan("This is just a test. Justice is important. Adjusting takes time.")
    assert len(matches) == 1
    assert matches[0].pattern.text == "just"
    assert matches[0].start == 8
    assert matches[0].end == 12


def test_unicode_word_boundaries():
    matcher = PatternMatcher([filler("just")])
    text = "éjust should not match, but just should."
    matches = matcher.scan(text)
    assert len(matches) == 1
    assert matches[0].start == text.rindex("just")
    assert matches[0].end == matches[0].start + 4


def test_digits_and_underscore_are_word_characters():
    matcher = PatternMatcher([filler("just")])
    assert matcher.scan("3just") == []
    assert matcher.scan("just_") == []
    assert matcher.scan("just٣") == []      # Arabic-Indic digit three


def test_punctuation_is_a_boundary():
    matcher = PatternMatcher([filler("just")])
    matches = matcher.scan("(just-in-time) «just»")
    assert [(m.start, m.end) for m in matches] == [(1, 5), (16, 20)]


def test_match_at_text_edges():
    matches = PatternMatcher([filler("basically")]).scan("Basically")
    assert [(m.start, m.end) for m in matches] == [(0, 9)]


def test_is_word_char():
    assert is_word_char("a")
    assert is_word_char("é")
    assert is_word_char("字")
    assert is_word_char("7")
    assert is_word_char("_")
    assert not is_word_char(" ")
    assert not is_word_char("-")
    assert not is_word_char("’")


# ── Offsets against the original text ────────────────────────────────

def test_fold_preserves_length():
    text = "İstanbul ΟΔΟΣ Straße"
    assert len(fold(text)) == len(text)
    assert fold("ABC Éé") == "abc éé"


def test_offsets_survive_expanding_lowercase():
    # "İ".lower() is two codepoints; offsets must still index the original
    text = "İİİ is just fine"
    matches = PatternMatcher([filler("just")]).scan(text)
    assert len(matches) == 1
    assert matches[0].start == text.index("just")


def test_offset_invariant_over_builtins():
    text = (
        "Basically, at the end of the day we need to act in order to win. "
        "It goes without saying that each and every one of us would, at this "
        "point in time, literally avoid like the plague the low-hanging fruit."
    )
    matches = PatternMatcher(builtin_patterns()).scan(text)
    assert len(matches) >= 8
    for m in matches:
        assert m.start < m.end
        assert fold(text[m.start:m.end]) == fold(m.pattern.text)


# ── Overlap, duplicates, ordering ────────────────────────────────────

def test_overlapping_patterns_both_reported():
    matcher = PatternMatcher([
        Pattern("at the", "filler"),
        Pattern("at the end of the day", "cliche"),
    ])
    matches = matcher.scan("At the end of the day, we won.")
    assert len(matches) == 2
    assert [(m.start, m.end) for m in matches] == [(0, 6), (0, 21)]
    assert [m.pattern.category for m in matches] == ["filler", "cliche"]


def test_nested_suffix_patterns():
    matches = PatternMatcher([filler("day"), filler("the day")]).scan("the day")
    assert [(m.start, m.end, m.pattern.text) for m in matches] == [(0, 7, "the day"), (4, 7, "day")]


def test_duplicates_not_deduplicated():
    matcher = PatternMatcher([
        Pattern("very", "filler"),
        Pattern("very", "custom", "extremely"),
    ])
    matches = matcher.scan("a very good day")
    assert len(matches) == 2
    assert matches[0].start == matches[1].start == 2
    # Same span: configured order wins
    assert [m.pattern.category for m in matches] == ["filler", "custom"]


def test_sorted_by_start():
    matcher = PatternMatcher(builtin_patterns())
    matches = matcher.scan("Very basically, in order to really win, just act.")
    starts = [m.start for m in matches]
    assert starts == sorted(starts)


# ── Degenerate input ─────────────────────────────────────────────────

def test_empty_patterns():
    assert PatternMatcher([]).scan("Any text here") == []
    assert compile_patterns([]).is_empty


def test_empty_text():
    assert PatternMatcher([filler("test")]).scan("") == []


def test_empty_pattern_text_never_matches():
    matcher = PatternMatcher([filler(""), filler("just")])
    matches = matcher.scan("just")
    assert len(matches) == 1
    assert matches[0].pattern.text == "just"
    assert PatternMatcher([filler("")]).scan("anything at all") == []


# ── Rebuild ──────────────────────────────────────────────────────────

def test_rebuild_with_new_patterns():
    matcher = PatternMatcher([filler("basically")])
    assert len(matcher.scan("basically")) == 1

    matcher.rebuild([filler("actually")])
    assert len(matcher.scan("basically")) == 0
    assert len(matcher.scan("actually")) == 1


def test_rebuild_equals_fresh_construction():
    text = "Basically, at the end of the day we act in order to win."
    matcher = PatternMatcher([filler("we")])
    matcher.rebuild(builtin_patterns())
    assert matcher.scan(text) == PatternMatcher(builtin_patterns()).scan(text)
    assert matcher.patterns == tuple(builtin_patterns())


def test_rebuild_to_empty():
    matcher = PatternMatcher([filler("just")])
    matcher.rebuild([])
    assert matcher.scan("just") == []
    assert matcher.patterns == ()


# ── Concurrency ──────────────────────────────────────────────────────

def test_parallel_scans_agree():
    matcher = PatternMatcher(builtin_patterns())
    text = "Basically, in order to win, we really just act. " * 50
    expected = matcher.scan(text)
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(matcher.scan, [text] * 8))
    assert all(r == expected for r in results)


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
