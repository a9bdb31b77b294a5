"""
Command-line entry point.

Usage:
    char-ngram 7 Natural 172 fixed originofspecies.txt
    char-ngram 3 "the " 500 random corpus.txt -v

Arguments are positional: window length, initial text, number of
characters to generate, mode ("random" for an unseeded run, anything
else for seed 20) and the corpus file. The generated text is printed
as a single line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import GenerationConfig
from .errors import LanguageModelError
from .language_model import LanguageModel

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-ngram",
        description="Generate text from a character-level n-gram model trained on a corpus",
    )
    parser.add_argument("window_length", type=_positive_int, help="Characters of context per prediction")
    parser.add_argument("initial_text", help="Seed text to continue")
    parser.add_argument("output_length", type=_non_negative_int, help="Number of characters to generate")
    parser.add_argument("mode", help='"random" for an unseeded run, anything else for a fixed seed')
    parser.add_argument("corpus", help="Path to the training corpus")
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output)",
    )
    return parser


def run(config: GenerationConfig) -> str:
    """Train on the configured corpus and return the generated text."""
    lm = LanguageModel(config.window_length, config.resolved_seed())
    lm.train_file(config.corpus_path)
    return lm.generate(config.initial_text, config.output_length)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    config = GenerationConfig.from_mode(
        args.window_length,
        args.initial_text,
        args.output_length,
        args.mode,
        args.corpus,
    )

    try:
        text = run(config)
    except (LanguageModelError, OSError) as e:
        logger.error(f"Generation failed: {e}")
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
