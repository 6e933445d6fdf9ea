"""
Rendering of segmented words as printable token streams.

Non-initial pieces of a word are prefixed with a continuation marker so that
downstream consumers can tell which pieces belong together. A word that could
not be fully segmented is replaced by a single placeholder token.
"""

from typing import Iterable, Iterator, List, Optional

from .core import Vocabulary, WordPiece

DEFAULT_CONTINUATION_MARKER = "##"
DEFAULT_UNKNOWN_TOKEN = "[UNK]"


def add_continuation_markers(pieces: Iterable[WordPiece], marker: str = DEFAULT_CONTINUATION_MARKER) -> Iterator[Optional[str]]:
    """
    Prefix every piece except the first with ``marker``.

    Yields:
        Printable piece text, or None for a missing piece
    """
    initial = True
    for item in pieces:
        text = item.piece
        if text is not None and not initial:
            text = marker + text
        initial = False
        yield text


def render_word(
    pieces: Iterable[WordPiece],
    marker: str = DEFAULT_CONTINUATION_MARKER,
    unknown_token: str = DEFAULT_UNKNOWN_TOKEN,
) -> List[str]:
    """
    Render one word's segmentation.

    Returns the marked pieces, or ``[unknown_token]`` when any piece is
    missing. Partially matched prefixes are never printed.
    """
    rendered = []
    for text in add_continuation_markers(pieces, marker):
        if text is None:
            return [unknown_token]
        rendered.append(text)
    return rendered


def render_sentence(
    vocab: Vocabulary,
    forms: Iterable[str],
    marker: str = DEFAULT_CONTINUATION_MARKER,
    unknown_token: str = DEFAULT_UNKNOWN_TOKEN,
) -> str:
    """Segment and render every form of a sentence as one space-joined line."""
    tokens = []
    for form in forms:
        tokens.extend(render_word(vocab.split(form), marker, unknown_token))
    return " ".join(tokens)
