"""YAML/dict config loader for style-check.

Supports loading from a YAML file or a plain dict (for embedding in a
larger editor settings file).

Example YAML:

    style_check:
      enabled: true
      marker_style: underline     # "strikethrough" | "underline" | "highlight"
      categories:
        filler: true
        redundancy: true
        cliche: false
      custom_patterns:
        - text: leverage
          category: filler
          replacement: use
        - synergy                 # bare string = filler, no suggestion
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .patterns import CATEGORIES, FILLER, MARKER_STYLES, builtin_patterns
from .types import Pattern

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.environ.get("STYLE_CHECK_CONFIG", "")


def _all_categories() -> dict[str, bool]:
    return {category: True for category in CATEGORIES}


@dataclass
class StyleCheckSettings:
    """User-facing style check settings."""
    enabled: bool = True
    categories: dict[str, bool] = field(default_factory=_all_categories)
    custom_patterns: list[Pattern] = field(default_factory=list)
    marker_style: str = "highlight"


def _parse_custom_pattern(entry: Any, position: int) -> Pattern | None:
    if isinstance(entry, str):
        entry = {"text": entry}
    if not isinstance(entry, dict):
        raise ValueError(f"custom pattern #{position} must be a mapping or a string, got {type(entry).__name__}")

    # Collapse runs of whitespace; the matcher compares phrases literally
    text = " ".join(str(entry.get("text") or "").split())
    if not text:
        logger.warning("dropping custom pattern #%d: empty text", position)
        return None

    replacement = entry.get("replacement")
    return Pattern(
        text=text,
        category=str(entry.get("category") or "").strip().lower() or FILLER,
        replacement=str(replacement) if replacement else None,
    )


def _require_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def load_config(data: dict[str, Any]) -> StyleCheckSettings:
    """Normalize a config dict (from YAML, JSON or inline)."""
    if not isinstance(data, dict):
        raise ValueError(f"settings must be a mapping, got {type(data).__name__}")
    # Support nested under "style_check" key or flat
    if "style_check" in data:
        data = data["style_check"] or {}
        if not isinstance(data, dict):
            raise ValueError(f"style_check must be a mapping, got {type(data).__name__}")

    raw_categories = data.get("categories") or {}
    if not isinstance(raw_categories, dict):
        raise ValueError("categories must be a mapping of category name to bool")
    categories = _all_categories()
    for name, flag in raw_categories.items():
        if name not in categories:
            logger.warning("ignoring unknown category toggle %r", name)
            continue
        categories[name] = _require_bool(flag, f"categories.{name}")

    marker_style = data.get("marker_style", data.get("markerStyle", "highlight"))
    if marker_style not in MARKER_STYLES:
        raise ValueError(f"marker_style must be one of {', '.join(MARKER_STYLES)}, got {marker_style!r}")

    raw_patterns = data.get("custom_patterns", data.get("customPatterns")) or []
    if not isinstance(raw_patterns, list):
        raise ValueError(f"custom_patterns must be a list, got {type(raw_patterns).__name__}")
    custom: list[Pattern] = []
    for position, entry in enumerate(raw_patterns, start=1):
        pattern = _parse_custom_pattern(entry, position)
        if pattern is not None:
            custom.append(pattern)

    return StyleCheckSettings(
        enabled=_require_bool(data.get("enabled", True), "enabled"),
        categories=categories,
        custom_patterns=custom,
        marker_style=marker_style,
    )


def load_from_yaml(path: str | Path) -> StyleCheckSettings:
    """Load settings from a YAML file.  Malformed YAML raises ValueError."""
    import yaml  # optional dependency
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML in {path}: {e}") from e
    return load_config(data or {})


def settings_to_dict(settings: StyleCheckSettings) -> dict[str, Any]:
    """Persisted form of the settings (round-trips through load_config)."""
    return {
        "enabled": settings.enabled,
        "categories": dict(settings.categories),
        "custom_patterns": [p.to_payload() for p in settings.custom_patterns],
        "marker_style": settings.marker_style,
    }


def has_any_patterns_enabled(settings: StyleCheckSettings) -> bool:
    return bool(settings.custom_patterns) or any(settings.categories.values())


def build_patterns(settings: StyleCheckSettings) -> list[Pattern]:
    """The full pattern set to compile: enabled built-ins, then custom entries.

    Custom patterns are not subject to the category toggles.
    """
    if not settings.enabled:
        return []
    patterns = builtin_patterns(settings.categories)
    patterns.extend(p for p in settings.custom_patterns if p.text)
    return patterns
