# wordpieces/schema/__init__.py
from .corpus import CorpusToken, Sentence
from .segmentation_stats import SegmentationStats, NO_DATA
