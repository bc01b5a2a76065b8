"""style-check — flag filler words, redundancies and clichés in prose."""

from .matcher import CompiledMatcher, PatternMatcher, compile_patterns
from .checker import StyleChecker, collect_style_matches, resolve_style_match_at_position
from .config import (
    StyleCheckSettings, build_patterns, has_any_patterns_enabled,
    load_config, load_from_yaml, settings_to_dict,
)
from .patterns import CATEGORIES, CATEGORY_LABELS, builtin_patterns
from .types import Match, Pattern, StyleMatch

__all__ = [
    "PatternMatcher", "CompiledMatcher", "compile_patterns",
    "StyleChecker", "collect_style_matches", "resolve_style_match_at_position",
    "StyleCheckSettings", "build_patterns", "has_any_patterns_enabled",
    "load_config", "load_from_yaml", "settings_to_dict",
    "CATEGORIES", "CATEGORY_LABELS", "builtin_patterns",
    "Match", "Pattern", "StyleMatch",
]
__version__ = "0.1.0"
