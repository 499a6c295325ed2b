"""
API response models.

Pydantic models for OpenAPI schema generation.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str
