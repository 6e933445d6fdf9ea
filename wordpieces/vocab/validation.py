"""
Validation functions for word piece vocabularies.

A vocabulary entry must be a non-empty string: an empty piece would match at
every position without consuming input.
"""

from typing import Dict, List, Union

from ..errors import MalformedVocabulary


def validate_vocabulary_entries(pieces: List[str]) -> None:
    """
    Validate the raw entries a vocabulary is built from.

    Args:
        pieces: Vocabulary entries in source order

    Raises:
        MalformedVocabulary: If an entry is not a string or is empty
    """
    for idx, piece in enumerate(pieces, 1):
        if not isinstance(piece, str):
            raise MalformedVocabulary(f"Vocabulary entry {idx} is not a string: {piece!r}")
        if not piece:
            raise MalformedVocabulary(f"Vocabulary entry {idx} is an empty piece")


def describe_vocabulary(pieces: List[str]) -> Dict[str, Union[int, float]]:
    """
    Summarize the structure of a list of vocabulary entries.

    Args:
        pieces: Vocabulary entries in source order

    Returns:
        Dictionary with entry, unique piece, duplicate and length statistics
    """
    unique = set(pieces)
    single_chars = [p for p in unique if len(p) == 1]

    return {
        "total_entries": len(pieces),
        "unique_pieces": len(unique),
        "duplicates": len(pieces) - len(unique),
        "single_chars": len(single_chars),
        "multi_chars": len(unique) - len(single_chars),
        "max_length": max((len(p) for p in unique), default=0),
        "avg_length": sum(len(p) for p in unique) / len(unique) if unique else 0.0,
    }
