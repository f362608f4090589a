"""CLI interface for phishlens — a thin developer shell over the engine.

Usage:
    # Highlight a message (stdin: text, stdout: JSON)
    echo 'URGENT: click here http://bit.ly/x' | \
        python -m phishlens.cli highlight \
            --reason "Urgency language detected" \
            --reason "Suspicious link instructions" --level phishing

    # Pull URLs out of pasted text
    echo 'see www.example.com and http://bit.ly/x' | \
        python -m phishlens.cli extract-urls --unique

    # Presentation tokens for a verdict
    python -m phishlens.cli present suspicious

    # List the reasons the taxonomy knows
    python -m phishlens.cli reasons

A YAML config can be given with --config or $PHISHLENS_CONFIG.
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys

import yaml

from .analyzer import ThreatAnalyzer, to_dict
from .config import ENV_VAR, create_analyzer, load_from_yaml
from .patterns import TaxonomyError
from .presentation import presentation_for
from .urls import extract_urls, unique_urls


def _build_analyzer(args: argparse.Namespace) -> ThreatAnalyzer:
    if args.config:
        return create_analyzer(load_from_yaml(args.config))
    return create_analyzer()


def _emit(data: object) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_highlight(args: argparse.Namespace) -> None:
    """Highlight text from stdin for the given reasons."""
    analyzer = _build_analyzer(args)
    text = sys.stdin.read()
    result = analyzer.analyze(text, args.reason or [], args.level)
    if args.markup:
        sys.stdout.write(result.markup)
        sys.stdout.write("\n")
    else:
        _emit(to_dict(result))


def cmd_extract_urls(args: argparse.Namespace) -> None:
    """Extract URLs from text on stdin."""
    text = sys.stdin.read()
    _emit(unique_urls(text) if args.unique else extract_urls(text))


def cmd_present(args: argparse.Namespace) -> None:
    p = presentation_for(args.level)
    _emit({"level": args.level, "color": p.color, "icon": p.icon})


def cmd_reasons(args: argparse.Namespace) -> None:
    """List taxonomy reasons."""
    _emit(_build_analyzer(args).config.taxonomy.reasons)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="phishlens",
        description="Phishing content highlighting and presentation tokens",
    )
    parser.add_argument("--config", default=os.environ.get(ENV_VAR), help="YAML config path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    hl = sub.add_parser("highlight", help="Highlight text (stdin)")
    hl.add_argument("--reason", action="append", help="Reason label (repeatable)")
    hl.add_argument("--level", default=None, help="Threat level from the classifier")
    hl.add_argument("--markup", action="store_true", help="Print HTML instead of JSON")
    ex = sub.add_parser("extract-urls", help="Extract URLs (stdin)")
    ex.add_argument("--unique", action="store_true", help="Drop duplicate URLs")
    pr = sub.add_parser("present", help="Color/icon for a threat level")
    pr.add_argument("level")
    sub.add_parser("reasons", help="List known reasons")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    cmds = {
        "highlight": cmd_highlight,
        "extract-urls": cmd_extract_urls,
        "present": cmd_present,
        "reasons": cmd_reasons,
    }
    try:
        cmds[args.command](args)
    except (TaxonomyError, OSError, yaml.YAMLError) as e:
        sys.stderr.write(f"phishlens: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
