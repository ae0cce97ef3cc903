"""
Pydantic schemas for quotes.

A quote is attributed to a free-text ``author`` and filed under a
``category``; it is owned indirectly through ``contributor_id``, the
contributor that submitted it.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Identifiers are unsigned 64-bit integers.
U64_MAX = 2**64 - 1


class QuotePayload(BaseModel):
    """Schema for creating or replacing a quote."""

    contributor_id: int = Field(..., ge=0, le=U64_MAX, examples=[1])
    author: str = Field(..., examples=["Ada"])
    text: str = Field(..., examples=["Think."])
    category: str = Field(..., examples=["Wisdom"], description="At least 3 characters, matched case-insensitively")


class Quote(BaseModel):
    """Stored quote record, also returned by the API."""

    id: int
    contributor_id: int
    author: str
    text: str
    category: str
    created_at: int
    updated_at: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
