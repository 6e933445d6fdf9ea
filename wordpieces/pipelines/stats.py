#!/usr/bin/env python3
"""
stats.py

Segment every token of a CoNLL corpus with a word piece vocabulary and report
how well the vocabulary covers it:

- Unknown: tokens where no piece matches at the start
- Unknown suffix: tokens with a known prefix and an unmatchable remainder
- Average / median length: piece counts of fully known tokens

The report is written to stderr; ``--output`` also saves it as JSON.
"""
import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from wordpieces.config_loader import load_wordpieces_config
from wordpieces.errors import UnwritableOutput, WordPiecesError
from wordpieces.pipelines.shared import iter_corpus_forms, load_vocabulary
from wordpieces.schema.segmentation_stats import SegmentationStats
from wordpieces.vocab import SegmentationStatsAccumulator, Vocabulary
from wordpieces.vocab.wordpiece_logging import get_wordpiece_logger, setup_wordpiece_logging

# Module-level logger that gets configured in main()
logger = None

PROGRESS_EVERY = 100_000


def get_logger() -> logging.Logger:
    """Get the module logger, creating a basic one if none exists."""
    global logger
    if logger is None:
        logger = get_wordpiece_logger('wordpieces.stats')
    return logger


def add_arguments(p: argparse.ArgumentParser) -> argparse.ArgumentParser:
    p.add_argument("wordpieces", metavar="WORDPIECES", type=Path, help="Word pieces file")
    p.add_argument("corpus", metavar="CORPUS", type=Path, help="Corpus in CoNLL-X or CoNLL-U format")
    p.add_argument(
        "-o", "--output",
        dest="output", type=Path, default=None,
        help="Also save the statistics report as JSON"
    )
    return p


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(
        prog="wordpieces-stats",
        description="Report word piece coverage statistics for a CoNLL corpus"
    )
    add_arguments(p)
    p.add_argument("-c", "--config", dest="config", type=Path, default=None, help="YAML configuration file")
    p.add_argument("--log-dir", dest="log_dir", type=Path, default=None, help="Also write a log file to this directory")
    p.add_argument("-v", "--verbose", action="store_true", help="Show debug messages")
    return p.parse_args(argv)


def collect_stats(vocab: Vocabulary, corpus: Path, encoding: str = "utf-8") -> SegmentationStats:
    """Segment every token in the corpus and aggregate the outcomes."""
    log = get_logger()
    acc = SegmentationStatsAccumulator()

    for form in iter_corpus_forms(corpus, encoding):
        acc.add(vocab.split(form))
        if acc.n_tokens % PROGRESS_EVERY == 0:
            log.debug(f"  Processed {acc.n_tokens:,} tokens")

    log.info(f"Segmented {acc.n_tokens:,} tokens")
    return acc.report()


def write_report(stats: SegmentationStats, console: Optional[Console] = None) -> None:
    """Print the four metrics to stderr."""
    console = console or Console(stderr=True, highlight=False)
    for line in stats.summary_lines():
        console.print(line, markup=False)


def save_report(stats: SegmentationStats, path: Path) -> None:
    """
    Save the report as JSON.

    Raises:
        UnwritableOutput: If the file or its parent directory cannot be created
    """
    get_logger().info(f"Saving statistics to: {path}")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(stats.model_dump_json(indent=2))
    except OSError as e:
        raise UnwritableOutput(path, str(e)) from e


def run(
    wordpieces: Path,
    corpus: Path,
    output: Optional[Path] = None,
    config: Optional[Path] = None,
    show_config: bool = False,
) -> SegmentationStats:
    """
    Run the stats pipeline.

    With ``show_config`` the effective configuration is printed to stderr.

    Raises:
        WordPiecesError: If the vocabulary or corpus cannot be read, or the
            report cannot be saved
    """
    log = get_logger()
    cfg = load_wordpieces_config(config, quiet=not show_config)
    start_time = time.time()

    vocab = load_vocabulary(wordpieces, cfg["vocab"]["encoding"])
    stats = collect_stats(vocab, corpus, cfg["corpus"]["encoding"])

    write_report(stats)
    if output is not None:
        save_report(stats, output)

    log.debug(f"Stats completed in {time.time() - start_time:.2f}s")
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    global logger
    logger = setup_wordpiece_logging(args.log_dir, 'wordpieces.stats', args.verbose)

    try:
        run(args.wordpieces, args.corpus, args.output, args.config, show_config=args.verbose)
    except WordPiecesError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
