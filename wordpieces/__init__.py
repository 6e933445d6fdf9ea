"""
Word piece segmentation of word forms against a fixed vocabulary.
"""

from .errors import WordPiecesError, MalformedVocabulary, UnreadableSource, UnwritableOutput, CorpusParseError
from .vocab import Vocabulary, Piece, Missing, MISSING, split_word

__version__ = "0.1.0"
