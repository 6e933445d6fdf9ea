"""
Shared utilities for the word piece pipelines.
"""

from .conll_processor import (
    parse_token_line,
    read_sentences,
    iter_corpus_sentences,
    iter_corpus_forms
)
from .vocab_loader import (
    strip_line_terminator,
    read_vocabulary_lines,
    load_vocabulary
)

__all__ = [
    "parse_token_line",
    "read_sentences",
    "iter_corpus_sentences",
    "iter_corpus_forms",
    "strip_line_terminator",
    "read_vocabulary_lines",
    "load_vocabulary"
]
