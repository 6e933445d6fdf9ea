"""
Word piece vocabulary and segmentation.

Key modules:
- core: Vocabulary, piece results and greedy longest-match splitting
- validation: Vocabulary entry validation
- rendering: Continuation-marker rendering of segmented words
- statistics: Corpus-level aggregation of segmentation outcomes
"""

from .core import (
    Piece,
    Missing,
    MISSING,
    WordPiece,
    SegmentationShape,
    Vocabulary,
    split_word,
    segmentation_shape
)

from .validation import (
    validate_vocabulary_entries,
    describe_vocabulary
)

from .rendering import (
    DEFAULT_CONTINUATION_MARKER,
    DEFAULT_UNKNOWN_TOKEN,
    add_continuation_markers,
    render_word,
    render_sentence
)

from .statistics import (
    SegmentationStatsAccumulator,
    median_length
)

__all__ = [
    # Core
    "Piece",
    "Missing",
    "MISSING",
    "WordPiece",
    "SegmentationShape",
    "Vocabulary",
    "split_word",
    "segmentation_shape",

    # Validation
    "validate_vocabulary_entries",
    "describe_vocabulary",

    # Rendering
    "DEFAULT_CONTINUATION_MARKER",
    "DEFAULT_UNKNOWN_TOKEN",
    "add_continuation_markers",
    "render_word",
    "render_sentence",

    # Statistics
    "SegmentationStatsAccumulator",
    "median_length"
]
