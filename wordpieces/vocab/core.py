"""
Core word piece segmentation.

This module contains the vocabulary lookup structure and the greedy
longest-match splitting algorithm that turns a word form into a sequence of
piece results. Forms are handled at codepoint granularity: a piece boundary
always falls between two Python ``str`` characters.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, Optional, Sequence, Union

from .validation import validate_vocabulary_entries

# Module-level logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Piece:
    """A vocabulary piece matched in a word form."""
    text: str

    @property
    def piece(self) -> Optional[str]:
        return self.text

    @property
    def is_missing(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Missing:
    """
    Sentinel for a position where no vocabulary piece matches.

    Carries no text. All instances compare equal; use the ``MISSING``
    singleton.
    """

    @property
    def piece(self) -> Optional[str]:
        return None

    @property
    def is_missing(self) -> bool:
        return True

    def __str__(self) -> str:
        return "<missing>"


MISSING = Missing()

WordPiece = Union[Piece, Missing]


class SegmentationShape(str, Enum):
    """Observable shapes of a word's segmentation."""
    EMPTY = "empty"
    KNOWN = "known"
    UNKNOWN = "unknown"
    SUFFIX_UNKNOWN = "suffix_unknown"


class Vocabulary:
    """
    Immutable set of known word pieces.

    Membership is an exact, case-sensitive string test. Duplicate entries
    collapse to one. An empty vocabulary is legal: every non-empty form is
    then fully unknown.
    """

    __slots__ = ("_pieces", "_max_piece_len")

    def __init__(self, pieces: Iterable[str] = ()):
        pieces = list(pieces)
        validate_vocabulary_entries(pieces)
        self._pieces: FrozenSet[str] = frozenset(pieces)
        self._max_piece_len = max((len(p) for p in self._pieces), default=0)

    @classmethod
    def build(cls, pieces: Iterable[str]) -> "Vocabulary":
        """Build a vocabulary from an iterable of piece strings."""
        vocab = cls(pieces)
        logger.debug(f"Built vocabulary with {len(vocab):,} pieces (longest: {vocab.max_piece_len})")
        return vocab

    @property
    def max_piece_len(self) -> int:
        return self._max_piece_len

    def contains(self, candidate: str) -> bool:
        return candidate in self._pieces

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._pieces

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[str]:
        return iter(self._pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._pieces == other._pieces

    def __hash__(self) -> int:
        return hash(self._pieces)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._pieces)} pieces)"

    def split(self, form: str) -> Iterator[WordPiece]:
        """Split a word form into pieces. See ``split_word``."""
        return split_word(self, form)


def split_word(vocab: Vocabulary, form: str) -> Iterator[WordPiece]:
    """
    Greedy longest-match segmentation of a single word form.

    Starting at the beginning of the form, the longest vocabulary piece
    beginning at the cursor is yielded as a ``Piece`` and the cursor moves
    past it. If no piece matches at the cursor, not even a single character,
    ``MISSING`` is yielded and segmentation stops; no attempt is made to
    recover further along the form.

    An empty form yields nothing.

    Args:
        vocab: Vocabulary to match pieces against
        form: Word form to segment

    Yields:
        ``Piece`` results in left-to-right order, possibly followed by a
        single trailing ``MISSING``
    """
    start = 0
    length = len(form)

    while start < length:
        # No candidate can be longer than the longest piece.
        end = min(length, start + vocab.max_piece_len)
        while end > start:
            candidate = form[start:end]
            if candidate in vocab:
                break
            end -= 1
        else:
            yield MISSING
            return

        yield Piece(candidate)
        start = end


def segmentation_shape(pieces: Sequence[WordPiece]) -> SegmentationShape:
    """
    Classify a word's piece sequence.

    Args:
        pieces: Materialized output of ``split_word``

    Returns:
        EMPTY for an empty sequence, UNKNOWN when nothing matched at the
        start, SUFFIX_UNKNOWN when a known prefix is followed by ``MISSING``,
        KNOWN otherwise
    """
    if not pieces:
        return SegmentationShape.EMPTY
    if pieces[0].is_missing:
        return SegmentationShape.UNKNOWN
    if pieces[-1].is_missing:
        return SegmentationShape.SUFFIX_UNKNOWN
    return SegmentationShape.KNOWN
