"""Common Pydantic models for error responses."""
from typing import Optional

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    """Error payload rendered by the global handlers."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    details: Optional[dict] = None


class ErrorResponse(BaseModel):
    """Envelope for every non-2xx JSON response."""

    error: ErrorBody
