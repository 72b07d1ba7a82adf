"""Standardized response envelopes."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error body for every 4xx/5xx response."""

    code: str = Field(..., description="Machine-readable error code", examples=["NOT_FOUND"])
    message: str = Field(..., description="Human-readable error message")


class SuccessResponse(BaseModel):
    """Body of update/delete responses."""

    message: str = Field(..., examples=["Customer deleted successfully"])
