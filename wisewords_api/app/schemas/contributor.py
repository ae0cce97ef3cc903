"""
Pydantic schemas for contributors.

A contributor is the profile a caller registers before submitting
quotes.  The payload carries only the editable fields; identifiers,
the owner principal and timestamps are assigned by the service layer.
Field constraints (minimum username length, minimum age) are enforced
by ``services.validators`` so that every violation is reported at once
as a ``ValidationFailed`` error; the schema only fixes the wire types.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ContributorPayload(BaseModel):
    """Schema for creating or replacing a contributor profile."""

    username: str = Field(..., examples=["ada"])
    email: str = Field(..., examples=["ada@x.io"])
    age: int = Field(..., examples=[30], description="Age in years, at least 18")


class Contributor(BaseModel):
    """Stored contributor record, also returned by the API."""

    id: int
    owner: str = Field(..., description="Principal of the caller that created the profile")
    username: str
    email: str
    age: int
    created_at: int = Field(..., description="Creation time in nanoseconds since the epoch")
    updated_at: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
