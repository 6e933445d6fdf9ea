"""
Aggregation of segmentation outcomes over a corpus.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..schema.segmentation_stats import SegmentationStats
from .core import SegmentationShape, WordPiece, segmentation_shape

logger = logging.getLogger(__name__)


def median_length(counts: Sequence[int]) -> Optional[int]:
    """
    Middle element of the sorted piece counts, selected by integer index
    ``len // 2``; never interpolated.

    Returns:
        The median, or None for an empty collection
    """
    if not counts:
        return None
    ordered = sorted(counts)
    return ordered[len(ordered) // 2]


class SegmentationStatsAccumulator:
    """Collects per-token segmentation outcomes for the statistics report."""

    def __init__(self):
        self.n_tokens = 0
        self.unknowns = 0
        self.suffix_unknowns = 0
        self.counts: List[int] = []

    def add(self, pieces: Iterable[WordPiece]) -> SegmentationShape:
        """Record the segmentation of one token and return its shape."""
        pieces = list(pieces)
        shape = segmentation_shape(pieces)

        if shape is SegmentationShape.UNKNOWN:
            self.unknowns += 1
        elif shape is SegmentationShape.SUFFIX_UNKNOWN:
            self.suffix_unknowns += 1
        elif shape is SegmentationShape.KNOWN:
            self.counts.append(len(pieces))

        self.n_tokens += 1
        return shape

    def report(self) -> SegmentationStats:
        n = self.n_tokens
        known = len(self.counts)

        if n == 0:
            logger.warning("No tokens processed; rates are undefined")
        elif known == 0:
            logger.warning("No fully known tokens; length statistics are undefined")

        return SegmentationStats(
            n_tokens=n,
            unknowns=self.unknowns,
            suffix_unknowns=self.suffix_unknowns,
            known=known,
            unknown_rate=self.unknowns / n if n else None,
            suffix_unknown_rate=self.suffix_unknowns / n if n else None,
            average_length=sum(self.counts) / known if known else None,
            median_length=median_length(self.counts),
        )
