"""CLI interface for style-check.

Usage:
    # Scan text on stdin, JSON out
    echo 'Basically, we did it in order to win.' | python -m style_check.cli scan

    # Scan a file, one finding per line
    python -m style_check.cli scan --file draft.md --format text

    # Skip clichés, add a custom phrase with a suggestion
    python -m style_check.cli --disable cliche --custom 'leverage|use' scan --file draft.md

    # Show the active pattern set
    python -m style_check.cli --config style.yaml patterns

If --config is omitted, $STYLE_CHECK_CONFIG is used when set.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from .checker import StyleChecker
from .config import DEFAULT_CONFIG_PATH, StyleCheckSettings, load_from_yaml
from .patterns import CATEGORIES, category_label
from .types import Pattern


def _build_settings(args: argparse.Namespace, parser: argparse.ArgumentParser) -> StyleCheckSettings:
    try:
        settings = load_from_yaml(args.config) if args.config else StyleCheckSettings()
    except (OSError, ValueError) as e:
        parser.error(f"cannot load config {args.config}: {e}")

    if args.disable:
        for name in args.disable.split(","):
            name = name.strip()
            if name not in CATEGORIES:
                parser.error(f"unknown category {name!r} (choose from {', '.join(CATEGORIES)})")
            settings.categories[name] = False

    for raw in args.custom:
        text, _, replacement = raw.partition("|")
        text = " ".join(text.split())
        if not text:
            parser.error(f"empty custom pattern {raw!r}")
        category = args.custom_category.strip().lower() or "filler"
        settings.custom_patterns.append(Pattern(text, category, replacement.strip() or None))

    return settings


def cmd_scan(args: argparse.Namespace, checker: StyleChecker) -> None:
    """Scan text from --file or stdin."""
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    matches = checker.scan(text)

    if args.format == "text":
        for m in matches:
            line = f"{m.line}:{m.column + 1}\t{category_label(m.category)}\t{m.text!r}"
            if m.replacement:
                line += f" -> {m.replacement}"
            sys.stdout.write(line + "\n")
        return

    output = {
        "matches": [m.to_payload() for m in matches],
        "count": len(matches),
    }
    json.dump(output, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_patterns(args: argparse.Namespace, checker: StyleChecker) -> None:
    """Dump the active pattern set as JSON."""
    json.dump([p.to_payload() for p in checker.patterns], sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="style-check",
        description="Flag filler words, redundancies and clichés in prose",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="YAML settings file")
    parser.add_argument("--disable", default="", help="Comma-separated built-in categories to skip")
    parser.add_argument("--custom", action="append", default=[], metavar="TEXT[|REPLACEMENT]",
                        help="Extra phrase to flag (repeatable)")
    parser.add_argument("--custom-category", default="filler", help="Category for --custom phrases")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    scan = sub.add_parser("scan", help="Scan text (stdin or --file)")
    scan.add_argument("--file", help="Read text from this file instead of stdin")
    scan.add_argument("--format", choices=("json", "text"), default="json")
    sub.add_parser("patterns", help="List the active patterns")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    checker = StyleChecker(_build_settings(args, parser))

    cmds = {
        "scan": cmd_scan,
        "patterns": cmd_patterns,
    }
    cmds[args.command](args, checker)


if __name__ == "__main__":
    main()
