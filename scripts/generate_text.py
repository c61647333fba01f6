#!/usr/bin/env python3
"""
Train a character window model from a text file and print generated text.
"""

import argparse
import sys

from charlm.config import settings
from charlm.services.corpus import CorpusError, train_from_file
from charlm.utils.logger import setup_logger

logger = setup_logger("charlm")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate text with a character window model")

    parser.add_argument("corpus", type=str, help="Path to the training text file")
    parser.add_argument("--window-length", type=int, default=settings.DEFAULT_WINDOW_LENGTH,
                        help="Number of characters used to predict the next one")
    parser.add_argument("--text-length", type=int, default=settings.DEFAULT_TEXT_LENGTH,
                        help="Number of characters to generate")
    parser.add_argument("--initial-text", type=str, default=None,
                        help="Text to continue from; required unless --dump is given")
    parser.add_argument("--seed", type=int, default=settings.RANDOM_SEED,
                        help="Random seed for reproducible output")
    parser.add_argument("--encoding", type=str, default=settings.CORPUS_ENCODING,
                        help="Corpus file encoding")
    parser.add_argument("--dump", action="store_true",
                        help="Print the trained window map instead of generating")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if not args.initial_text and not args.dump:
        logger.error("[ERR] --initial-text is required to generate text")
        return 2

    try:
        model = train_from_file(
            args.corpus, args.window_length, seed=args.seed, encoding=args.encoding
        )
    except CorpusError as e:
        logger.error(f"[ERR] {e}")
        return 1

    if args.dump:
        print(model, end="")
        return 0

    text = model.generate(args.initial_text, args.text_length)
    print(args.initial_text + text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
