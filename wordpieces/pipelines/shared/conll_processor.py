"""
Shared CoNLL corpus reading for the word piece pipelines.

Reads CoNLL-X and CoNLL-U files: sentences are separated by blank lines,
``#`` lines are comments and token lines have ten tab-separated columns.
CoNLL-U multiword token ranges (``1-2``) and empty nodes (``1.1``) are not
tokens and are skipped.

Parsing is fail-fast: the first malformed line raises ``CorpusParseError``.
"""
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from pydantic import ValidationError

from wordpieces.errors import CorpusParseError, UnreadableSource
from wordpieces.schema.corpus import CorpusToken, Sentence

logger = logging.getLogger(__name__)

N_COLUMNS = 10


def _column(value: str) -> Optional[str]:
    return None if value == "_" else value


def _is_index(value: str) -> bool:
    # str.isdigit() alone accepts non-ASCII digits such as "²" that int() rejects
    return value.isascii() and value.isdigit()


def parse_token_line(line: str, path: Optional[Path] = None, line_no: Optional[int] = None) -> Optional[CorpusToken]:
    """
    Parse a single token line.

    Args:
        line: Token line without its line terminator
        path: Source file, for error messages
        line_no: 1-based line number, for error messages

    Returns:
        The token, or None for multiword ranges and empty nodes

    Raises:
        CorpusParseError: If the line is not a valid token line
    """
    parts = line.split("\t")
    if len(parts) != N_COLUMNS:
        raise CorpusParseError(f"expected {N_COLUMNS} tab-separated columns, found {len(parts)}", path, line_no)

    tid = parts[0]
    if "-" in tid or "." in tid:
        return None

    if not _is_index(tid):
        raise CorpusParseError(f"invalid token id: {tid!r}", path, line_no)

    head = _column(parts[6])
    if head is not None and not _is_index(head):
        raise CorpusParseError(f"invalid head: {head!r}", path, line_no)

    try:
        return CorpusToken(
            id=int(tid),
            form=parts[1],
            lemma=_column(parts[2]),
            cpos=_column(parts[3]),
            pos=_column(parts[4]),
            features=_column(parts[5]),
            head=int(head) if head is not None else None,
            head_rel=_column(parts[7]),
            extra=[_column(p) for p in parts[8:]],
        )
    except ValidationError as e:
        raise CorpusParseError(f"invalid token: {e.errors()[0]['msg']}", path, line_no) from e


def read_sentences(lines: Iterable[str], path: Optional[Path] = None) -> Iterator[Sentence]:
    """
    Yield sentences from CoNLL lines.

    A final sentence without a trailing blank line is still yielded. Blank
    lines between sentences never produce empty sentences.

    Raises:
        CorpusParseError: On the first malformed token line
    """
    tokens: List[CorpusToken] = []
    comments: List[str] = []

    for line_no, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")

        if not line.strip():
            if tokens:
                yield Sentence(tokens=tokens, comments=comments)
            tokens, comments = [], []
            continue

        if line.startswith("#"):
            if tokens:
                raise CorpusParseError("comment line inside a sentence", path, line_no)
            comments.append(line[1:])
            continue

        token = parse_token_line(line, path, line_no)
        if token is not None:
            tokens.append(token)

    if tokens:
        yield Sentence(tokens=tokens, comments=comments)


def iter_corpus_sentences(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[Sentence]:
    """
    Stream the sentences of a CoNLL corpus file.

    Raises:
        UnreadableSource: If the file cannot be opened or decoded
        CorpusParseError: On the first malformed sentence
    """
    path = Path(path)
    logger.info(f"Reading corpus: {path}")

    try:
        f = path.open("r", encoding=encoding)
    except OSError as e:
        raise UnreadableSource(path, str(e)) from e

    n_sentences = 0
    with f:
        try:
            for sentence in read_sentences(f, path):
                n_sentences += 1
                yield sentence
        except UnicodeDecodeError as e:
            raise UnreadableSource(path, str(e)) from e

    logger.info(f"Read {n_sentences:,} sentences from {path.name}")


def iter_corpus_forms(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[str]:
    """Stream every token form of a CoNLL corpus file, in corpus order."""
    for sentence in iter_corpus_sentences(path, encoding):
        yield from sentence.forms
