#!/usr/bin/env python3
"""
english_inflect command line.

Usage:
    inflect-cli plural child ox            # children / oxen
    inflect-cli singular cacti             # cactus
    inflect-cli an "honest cat"            # an honest cat
    inflect-cli compare indexes indices    # p:p
    inflect-cli --ancient plural formula   # formulae
    inflect-cli --a-pattern 'euler.*' an euler   # a euler

Each result is printed on its own line. An invalid --a-pattern/--an-pattern
exits with status 2.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from english_inflect.core.domain.exceptions import InvalidPatternError
from english_inflect.core.engine import Engine
from english_inflect.shared.config import settings
from english_inflect.shared.logging_setup import get_logger, init_logging

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inflect-cli",
        description="English noun inflection and indefinite articles",
    )

    # --- Classical mode ---
    parser.add_argument("--classical", action="store_true", help="Enable every classical flag")
    parser.add_argument("--ancient", action="store_true", help="Latin/Greek plurals (formula -> formulae)")
    parser.add_argument("--persons", action="store_true", help="person -> persons")
    parser.add_argument("--names", action="store_true", help="Leave proper names ending in a sibilant unchanged")
    parser.add_argument("--herd", action="store_true", help="Herd animals keep their singular form")

    # --- Article overrides ---
    parser.add_argument(
        "--a-pattern",
        action="append",
        default=[],
        metavar="REGEX",
        help="Force 'a' for first words matching REGEX (repeatable)",
    )
    parser.add_argument(
        "--an-pattern",
        action="append",
        default=[],
        metavar="REGEX",
        help="Force 'an' for first words matching REGEX (repeatable)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Operation to run")

    plural_parser = subparsers.add_parser("plural", help="Pluralize one or more nouns")
    plural_parser.add_argument("words", nargs="+")

    singular_parser = subparsers.add_parser("singular", help="Singularize one or more nouns")
    singular_parser.add_argument("words", nargs="+")

    an_parser = subparsers.add_parser("an", help="Prefix a phrase with a/an")
    an_parser.add_argument("phrase", nargs="+", help="Phrase (joined with single spaces)")

    compare_parser = subparsers.add_parser("compare", help="Number relation of two words")
    compare_parser.add_argument("word1")
    compare_parser.add_argument("word2")

    return parser


def _configure(engine: Engine, args: argparse.Namespace) -> None:
    if args.classical:
        engine.classical_all(True)
    if args.ancient:
        engine.classical_ancient(True)
    if args.persons:
        engine.classical_persons(True)
    if args.names:
        engine.classical_names(True)
    if args.herd:
        engine.classical_herd(True)

    for pattern in args.a_pattern:
        engine.def_a_pattern(pattern)
    for pattern in args.an_pattern:
        engine.def_an_pattern(pattern)


def run(engine: Engine, args: argparse.Namespace) -> List[str]:
    """Execute the parsed command and return the output lines."""
    if args.command == "plural":
        return [engine.plural(word) for word in args.words]
    if args.command == "singular":
        return [engine.singular(word) for word in args.words]
    if args.command == "an":
        return [engine.an(" ".join(args.phrase))]
    if args.command == "compare":
        return [str(engine.compare(args.word1, args.word2))]
    raise ValueError(f"Unknown command: {args.command!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    init_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    engine = Engine(settings.initial_classical_flags())
    try:
        _configure(engine, args)
    except InvalidPatternError as exc:
        log.debug("cli_invalid_pattern", pattern=exc.pattern)
        print(f"inflect-cli: error: {exc}", file=sys.stderr)
        return 2

    for line in run(engine, args):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
