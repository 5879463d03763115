"""Command-line entry point: print the words a letter pool can spell."""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys

from . import load
from ._errors import LetterbagError
from ._loader import compile_corpus
from ._random import DEFAULT_LENGTH, generate_random_letters

WORDS_ENV = "LETTERBAG_WORDS"
DEFAULT_WORDS = "words.txt"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="letterbag",
        description="List the words that can be spelled from a bag of letters.",
    )
    parser.add_argument(
        "-w", "--words",
        default=os.getenv(WORDS_ENV, DEFAULT_WORDS),
        help=f"word file or compiled corpus directory (default: ${WORDS_ENV} "
             f"or {DEFAULT_WORDS})",
    )
    parser.add_argument(
        "-l", "--letters",
        help="letter pool; a random pool is generated when omitted",
    )
    parser.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"length of the random pool (default: {DEFAULT_LENGTH})",
    )
    parser.add_argument("--seed", type=int, help="seed for the random pool")
    parser.add_argument(
        "-j", "--workers", type=int,
        help="scan with this many worker processes",
    )
    parser.add_argument(
        "--compile", metavar="OUT_DIR",
        help="compile the word file into a corpus directory and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be >= 1")
    if args.length < 0:
        parser.error("--length must be >= 0")

    try:
        if args.compile:
            compile_corpus(args.words, args.compile)
            return 0
        finder = load(args.words)
    except LetterbagError as e:
        print(f"letterbag: {e}", file=sys.stderr)
        return 1

    letters = args.letters
    if letters is None:
        letters = generate_random_letters(args.length, rng=random.Random(args.seed))

    print(f"List of letters: {letters}")
    print("Words that can be constructed")
    for word in finder.find(letters, workers=args.workers):
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
