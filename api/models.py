"""
Pydantic models for API responses.
Auto-generates OpenAPI documentation.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Uniform error envelope returned by every proxy endpoint."""
    status: str = Field(..., description="Numeric status code as a string (DART's own code when forwarded)")
    message: str = Field(..., description="Human-readable error text")


class HealthResponse(BaseModel):
    """API health check response."""
    service: str
    version: str
    status: str
    api_key_configured: bool
