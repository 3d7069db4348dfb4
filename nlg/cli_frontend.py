"""
nlg/cli_frontend.py

Command-line interface for the English agreement helpers.

Typical usage:

    plural-cli noun knife --count 2
    plural-cli phrase "a bag of holding" --count 2
    plural-cli verb glorifies
    plural-cli spell -- -42
    plural-cli option "is:are remainder" --index 1
    plural-cli verb-option "(does) it" --plurality 1
    plural-cli render '$e $v(does) $s own thing.' --gender 3

The CLI:

- Loads the irregular-form tables through the DI container (from
  --lexicon-dir or the settings) and releases them on exit.
- Runs one operation and prints its result to stdout.
- With --debug, logs at DEBUG level and prints the consumed character count
  of option scans to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from dependency_injector import providers

from app.shared.config import Settings, settings
from app.shared.container import Container
from morphology.pronouns import Gender, gender_name
from nlg.api import Pluralizer
from nlg.options import OptionChoice
from utils.logging_setup import init_logging


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plural-cli",
        description="English pluralization, verb agreement and option parsing.",
    )

    parser.add_argument(
        "--lexicon-dir",
        metavar="PATH",
        default=None,
        help="Directory holding plural_nouns.txt / plural_verbs.txt.",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Verbose logging and option-scan details on stderr.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    noun = subparsers.add_parser("noun", help="Pluralize a single noun.")
    noun.add_argument("word")
    noun.add_argument("--count", type=int, default=2)

    phrase = subparsers.add_parser("phrase", help="Pluralize a noun phrase.")
    phrase.add_argument("phrase")
    phrase.add_argument("--count", type=int, required=True)

    verb = subparsers.add_parser(
        "verb", help="Plural-subject form of a third-person singular verb."
    )
    verb.add_argument("word")

    spell = subparsers.add_parser("spell", help="Spell out an integer.")
    spell.add_argument("number", type=int)

    option = subparsers.add_parser(
        "option", help="Select one alternative from an alternatives expression."
    )
    option.add_argument("expression")
    option.add_argument("--index", type=int, required=True)
    option.add_argument("--capacity", type=int, default=None)

    verb_option = subparsers.add_parser(
        "verb-option",
        help="Select a verb form, deriving the plural when it is not given.",
    )
    verb_option.add_argument("expression")
    verb_option.add_argument(
        "--plurality",
        type=int,
        choices=[0, 1],
        required=True,
        help="0 for a singular subject, 1 for a plural subject.",
    )
    verb_option.add_argument("--capacity", type=int, default=None)

    render = subparsers.add_parser(
        "render", help="Expand $v/$e/$m/$s codes in a template."
    )
    render.add_argument("template")
    render.add_argument(
        "--gender",
        type=int,
        default=int(Gender.NEUTRAL),
        help="0 neutral, 1 masculine, 2 feminine, 3 plural.",
    )

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _settings_for(args: argparse.Namespace) -> Settings:
    """Apply --lexicon-dir on top of the environment settings."""
    if not args.lexicon_dir:
        return settings
    return settings.model_copy(update={"LEXICON_DIR": args.lexicon_dir})


def _print_choice(choice: OptionChoice, debug: bool) -> None:
    print(choice.text)
    if debug:
        print(f"[DEBUG] consumed={choice.consumed}", file=sys.stderr)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _run(plural: Pluralizer, args: argparse.Namespace) -> int:
    if args.command == "noun":
        print(plural.noun(args.word, args.count))
    elif args.command == "phrase":
        print(plural.noun_phrase(args.phrase, args.count))
    elif args.command == "verb":
        print(plural.verb(args.word))
    elif args.command == "spell":
        print(plural.spell(args.number))
    elif args.command == "option":
        _print_choice(plural.option(args.expression, args.index, args.capacity), args.debug)
    elif args.command == "verb-option":
        _print_choice(
            plural.verb_option(args.expression, args.plurality, args.capacity),
            args.debug,
        )
    elif args.command == "render":
        if args.debug:
            print(f"[DEBUG] gender={gender_name(args.gender)}", file=sys.stderr)
        print(plural.render(args.template, args.gender))
    else:
        raise SystemExit(f"Error: unknown command {args.command!r}.")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    init_logging(level=logging.DEBUG if args.debug else None)

    container = Container()
    container.config.override(providers.Object(_settings_for(args)))
    container.init_resources()
    try:
        exit_code = _run(container.pluralizer(), args)
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}") from exc
    finally:
        container.shutdown_resources()

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
