"""
Segmentation Statistics Schema

Report produced by the ``stats`` pipeline. Metrics that cannot be computed
(no tokens, or no fully known tokens) are None, which is rendered as an
explicit "no data" value rather than NaN.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

NO_DATA = "n/a (no data)"


class SegmentationStats(BaseModel):
    """
    Corpus-level segmentation statistics.

    - unknown_rate: fraction of tokens where nothing matched at the start
    - suffix_unknown_rate: fraction of tokens with a known prefix but an
      unmatchable remainder
    - average_length / median_length: piece counts over fully known tokens
    """
    n_tokens: int = Field(..., ge=0, description="Number of tokens processed")
    unknowns: int = Field(..., ge=0, description="Tokens that are fully unknown")
    suffix_unknowns: int = Field(..., ge=0, description="Tokens with an unknown suffix")
    known: int = Field(..., ge=0, description="Tokens fully covered by known pieces")
    unknown_rate: Optional[float] = Field(None, ge=0.0, le=1.0, description="unknowns / n_tokens, None without tokens")
    suffix_unknown_rate: Optional[float] = Field(None, ge=0.0, le=1.0, description="suffix_unknowns / n_tokens, None without tokens")
    average_length: Optional[float] = Field(None, ge=0.0, description="Mean piece count of known tokens, None without known tokens")
    median_length: Optional[int] = Field(None, ge=0, description="Median piece count of known tokens, None without known tokens")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "n_tokens": 1000,
                "unknowns": 12,
                "suffix_unknowns": 3,
                "known": 985,
                "unknown_rate": 0.012,
                "suffix_unknown_rate": 0.003,
                "average_length": 1.42,
                "median_length": 1
            }
        }
    )

    @property
    def has_data(self) -> bool:
        return self.n_tokens > 0

    @staticmethod
    def format_percentage(rate: Optional[float]) -> str:
        if rate is None:
            return NO_DATA
        return f"{rate * 100:.2f}%"

    @staticmethod
    def format_length(length: Optional[float]) -> str:
        if length is None:
            return NO_DATA
        return f"{length:.2f}"

    def summary_lines(self) -> List[str]:
        """Format the four reported metrics, one per line."""
        median = NO_DATA if self.median_length is None else str(self.median_length)
        return [
            f"Unknown: {self.format_percentage(self.unknown_rate)}",
            f"Unknown suffix: {self.format_percentage(self.suffix_unknown_rate)}",
            f"Average length: {self.format_length(self.average_length)}",
            f"Median length: {median}",
        ]
