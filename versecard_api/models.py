# versecard_api/models.py
"""
Pydantic models for request validation and response serialization.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List


class FormatRequest(BaseModel):
    """Ad-hoc formatting request"""

    text: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="Verse text, may contain <br> markup (max 2000 chars)"
    )

    max_length: int = Field(
        default=15,
        ge=5,
        le=200,
        description="Maximum characters per line (5-200)"
    )

    @field_validator('text')
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Reject whitespace-only text"""
        if not v.strip():
            raise ValueError("Text must contain at least one non-whitespace character")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "하나님께서 너희에게 지혜를 구하라. 그리하면 너의 길이 평탄하리라.",
                "max_length": 15
            }
        }
    )


class FormatResponse(BaseModel):
    """Formatted card text in the three shapes a client may render"""
    formatted: str = Field(..., description="Newline-separated lines")
    lines: List[str] = Field(..., description="The individual lines")
    html: str = Field(..., description="Lines joined with <br>")
    fallback_used: bool = Field(..., description="True if plain word wrapping was used")


class CardResponse(FormatResponse):
    """The next verse card of the shuffled rotation"""
    index: int = Field(..., ge=0, description="Index of the verse in the verse store")
    reference: str = Field(..., description="Verse reference, e.g. 야고보서 1:5")
    content: str = Field(..., description="Original verse text")


class CacheStatsResponse(BaseModel):
    """Formatting cache statistics"""
    total_entries: int
    hits: int
    misses: int
    hit_rate: float


class CacheClearResponse(BaseModel):
    """Result of clearing the formatting cache"""
    cleared: int
