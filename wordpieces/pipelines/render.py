#!/usr/bin/env python3
"""
render.py

Segment a CoNLL corpus with a word piece vocabulary and print one line per
sentence to stdout. Pieces are space-separated; every piece after the first
of a word carries the continuation marker (``##`` by default). Words that
cannot be fully segmented are printed as the unknown token (``[UNK]``).
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from wordpieces.config_loader import load_wordpieces_config
from wordpieces.errors import WordPiecesError
from wordpieces.pipelines.shared import iter_corpus_sentences, load_vocabulary
from wordpieces.vocab import Vocabulary, render_sentence
from wordpieces.vocab.wordpiece_logging import get_wordpiece_logger, setup_wordpiece_logging

# Module-level logger that gets configured in main()
logger = None


def get_logger() -> logging.Logger:
    """Get the module logger, creating a basic one if none exists."""
    global logger
    if logger is None:
        logger = get_wordpiece_logger('wordpieces.render')
    return logger


def add_arguments(p: argparse.ArgumentParser) -> argparse.ArgumentParser:
    p.add_argument("wordpieces", metavar="WORDPIECES", type=Path, help="Word pieces file")
    p.add_argument("corpus", metavar="CORPUS", type=Path, help="Corpus in CoNLL-X or CoNLL-U format")
    p.add_argument(
        "-m", "--marker",
        dest="marker", type=str, default=None,
        help="Continuation marker for non-initial pieces (default from config: ##)"
    )
    p.add_argument(
        "-u", "--unknown",
        dest="unknown", type=str, default=None,
        help="Token printed for words that cannot be segmented (default from config: [UNK])"
    )
    return p


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(
        prog="wordpieces-print",
        description="Print a CoNLL corpus segmented into word pieces"
    )
    add_arguments(p)
    p.add_argument("-c", "--config", dest="config", type=Path, default=None, help="YAML configuration file")
    p.add_argument("--log-dir", dest="log_dir", type=Path, default=None, help="Also write a log file to this directory")
    p.add_argument("-v", "--verbose", action="store_true", help="Show debug messages")
    return p.parse_args(argv)


def render_corpus(
    vocab: Vocabulary,
    corpus: Path,
    marker: str,
    unknown_token: str,
    encoding: str = "utf-8",
) -> Iterator[str]:
    """Yield the rendered line of every sentence in the corpus."""
    for sentence in iter_corpus_sentences(corpus, encoding):
        yield render_sentence(vocab, sentence.forms, marker, unknown_token)


def run(
    wordpieces: Path,
    corpus: Path,
    marker: Optional[str] = None,
    unknown: Optional[str] = None,
    config: Optional[Path] = None,
    out: Optional[TextIO] = None,
    show_config: bool = False,
) -> int:
    """
    Run the print pipeline.

    With ``show_config`` the effective configuration is printed to stderr.

    Returns:
        Number of sentences written

    Raises:
        WordPiecesError: If the vocabulary or corpus cannot be read
    """
    log = get_logger()
    cfg = load_wordpieces_config(config, quiet=not show_config)
    marker = cfg["render"]["continuation_marker"] if marker is None else marker
    unknown = cfg["render"]["unknown_token"] if unknown is None else unknown
    out = out or sys.stdout

    vocab = load_vocabulary(wordpieces, cfg["vocab"]["encoding"])
    log.debug(f"Continuation marker: {marker!r}, unknown token: {unknown!r}")

    n_sentences = 0
    for line in render_corpus(vocab, corpus, marker, unknown, cfg["corpus"]["encoding"]):
        out.write(line + "\n")
        n_sentences += 1

    log.info(f"Wrote {n_sentences:,} sentences")
    return n_sentences


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    global logger
    logger = setup_wordpiece_logging(args.log_dir, 'wordpieces.render', args.verbose)

    try:
        run(args.wordpieces, args.corpus, args.marker, args.unknown, args.config, show_config=args.verbose)
    except WordPiecesError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
