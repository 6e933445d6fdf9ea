from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CorpusToken(BaseModel):
    """
    A token line of a CoNLL-X or CoNLL-U sentence.

    Only ``id`` and ``form`` are used for segmentation; the remaining columns
    are kept for completeness. Underscore placeholders are stored as None.
    """
    id: int = Field(..., ge=1, description="1-based token index within the sentence")
    form: str = Field(..., description="Surface form of the token")
    lemma: Optional[str] = Field(None, description="Lemma or stem")
    cpos: Optional[str] = Field(None, description="Coarse-grained (universal) part-of-speech tag")
    pos: Optional[str] = Field(None, description="Fine-grained (language-specific) part-of-speech tag")
    features: Optional[str] = Field(None, description="Morphological features")
    head: Optional[int] = Field(None, ge=0, description="Index of the syntactic head, 0 for the root")
    head_rel: Optional[str] = Field(None, description="Dependency relation to the head")
    extra: List[Optional[str]] = Field(default_factory=list, description="Remaining columns (PHEAD/PDEPREL or DEPS/MISC)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "form": "Unworkable",
                "lemma": "unworkable",
                "cpos": "ADJ",
                "pos": "JJ",
                "features": None,
                "head": 0,
                "head_rel": "root",
                "extra": [None, None]
            }
        }
    )


class Sentence(BaseModel):
    tokens: List[CorpusToken] = Field(default_factory=list, description="Tokens in sentence order")
    comments: List[str] = Field(default_factory=list, description="Comment lines preceding the sentence, without the leading '#'")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "tokens": [
                    {"id": 1, "form": "Hello", "head": 0, "head_rel": "root"},
                    {"id": 2, "form": "!", "head": 1, "head_rel": "punct"}
                ],
                "comments": [" text = Hello!"]
            }
        }
    )

    @property
    def forms(self) -> List[str]:
        return [token.form for token in self.tokens]

    def __len__(self) -> int:
        return len(self.tokens)
