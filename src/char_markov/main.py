"""
Command-line entry point for the character-level Markov text model.

Usage:
    char-markov 3 "The " 200 fixed corpus.txt      # reproducible output (seed 20)
    char-markov 3 "The " 200 random corpus.txt     # different text every run
    char-markov 2 "th" 100 fixed corpus.txt --dump # also print the learned table

Generated text goes to stdout; logs go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_SEED, ModelConfig
from .errors import CharMarkovError, WordBoundaryNotReached
from .model import LanguageModel

logger = logging.getLogger(__name__)

RANDOM_MODE = "random"


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-markov",
        description="Generate text from a character-level Markov model trained on a corpus",
    )

    parser.add_argument("window_length", type=positive_int, help="Window length k")
    parser.add_argument("initial_text", help="Text to start generating from")
    parser.add_argument("length", type=non_negative_int, help="Minimum length of the output")
    parser.add_argument(
        "mode",
        help=f"'{RANDOM_MODE}' for non-reproducible output; anything else uses the fixed seed",
    )
    parser.add_argument("corpus", type=Path, help="Path to the training corpus")

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help=f"Seed used outside random mode (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--max-chars",
        type=non_negative_int,
        default=None,
        help="Maximum characters to generate before giving up on a word boundary (0 disables)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Path to a JSON model configuration file",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the learned context table to stderr",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")

    return parser


def build_config(args: argparse.Namespace) -> ModelConfig:
    base = ModelConfig.from_json(args.config).to_dict() if args.config else {}
    base["window_length"] = args.window_length

    if args.mode == RANDOM_MODE:
        base["seed"] = None
    elif args.seed is not None:
        base["seed"] = args.seed
    elif base.get("seed") is None:
        base["seed"] = DEFAULT_SEED

    if args.max_chars is not None:
        base["max_generated_chars"] = args.max_chars or None

    return ModelConfig.from_dict(base)


def configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args)

    try:
        config = build_config(args)
        model = LanguageModel.from_config(config)
        model.train(args.corpus)

        if args.dump:
            print(model, file=sys.stderr, end="")

        try:
            text = model.generate(args.initial_text, args.length)
        except WordBoundaryNotReached as e:
            logger.warning(str(e))
            text = e.text
    except (CharMarkovError, OSError, UnicodeDecodeError) as e:
        logger.error(str(e))
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
