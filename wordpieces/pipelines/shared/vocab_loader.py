"""
Loading of word piece vocabularies from newline-delimited text files.

One piece per line, no header. Only the line terminator (``\\n`` or
``\\r\\n``) is removed: any other whitespace is part of the piece. A blank
line is an empty piece and makes the vocabulary malformed.
"""
import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

from wordpieces.errors import MalformedVocabulary, UnreadableSource
from wordpieces.vocab import Vocabulary, describe_vocabulary

logger = logging.getLogger(__name__)


def strip_line_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_vocabulary_lines(lines: Iterable[str], source: str = "<lines>") -> Iterator[str]:
    """
    Yield vocabulary pieces from raw text lines.

    Raises:
        MalformedVocabulary: On a blank line, naming the source and line number
    """
    for line_no, line in enumerate(lines, 1):
        piece = strip_line_terminator(line)
        if not piece:
            raise MalformedVocabulary(f"{source}:{line_no}: empty word piece")
        yield piece


def load_vocabulary(path: Union[str, Path], encoding: str = "utf-8") -> Vocabulary:
    """
    Load a vocabulary file.

    Args:
        path: Vocabulary file, one piece per line
        encoding: Text encoding of the file

    Returns:
        The vocabulary

    Raises:
        UnreadableSource: If the file cannot be opened or decoded
        MalformedVocabulary: If the file contains an empty piece
    """
    path = Path(path)
    logger.info(f"Loading word pieces from: {path}")

    try:
        # newline="" keeps "\r\n" intact so only the terminator is stripped
        with path.open("r", encoding=encoding, newline="") as f:
            pieces = list(read_vocabulary_lines(f, str(path)))
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableSource(path, str(e)) from e

    stats = describe_vocabulary(pieces)
    logger.debug(f"  Single-char pieces: {stats['single_chars']:,}")
    logger.debug(f"  Multi-char pieces: {stats['multi_chars']:,}")
    logger.debug(f"  Average piece length: {stats['avg_length']:.2f} chars")
    if stats["duplicates"]:
        logger.debug(f"  {stats['duplicates']:,} duplicate pieces collapsed")
    if not pieces:
        logger.warning(f"Vocabulary file is empty, every word will be unknown: {path}")

    vocab = Vocabulary.build(pieces)
    logger.info(f"Loaded {len(vocab):,} word pieces (longest: {stats['max_length']} chars)")
    return vocab
