""" Pydantic models for the name registry endpoints. """
from pydantic import BaseModel, Field


class NameIn(BaseModel):
    """Schema for JSON name registration requests."""
    name: str = Field(..., min_length=1)


class NameOut(BaseModel):
    """Schema for a single entry of the name listing."""
    name: str
