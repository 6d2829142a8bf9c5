"""Response models for the profile API."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class UserModel(BaseModel):
    """Static profile of the API owner."""
    email: str = Field(..., description="Contact email", examples=["eacontent1@gmail.com"])
    name: str = Field(..., description="Full name", examples=["Eniola Agboola"])
    stack: str = Field(..., description="Backend stack", examples=["Python/FastAPI"])


class ProfileResponse(BaseModel):
    """Profile envelope returned by ``GET /me``."""
    status: Literal["success"] = Field("success", description="Always 'success'; upstream failures are reported in 'fact'")
    user: UserModel
    timestamp: str = Field(..., description="Current UTC time in ISO 8601 format", examples=["2025-01-01T12:00:00.000Z"])
    fact: str = Field(
        ...,
        description="A random cat fact, or a 'Fact retrieval failed: ...' message",
        examples=["Cats sleep 70% of their lives."],
    )


class RootResponse(BaseModel):
    """Root endpoint response model."""
    message: str = Field(..., description="Welcome message")
    instructions: str = Field(..., description="How to use the API")
    endpoint: str = Field(..., description="Path of the profile endpoint", examples=["/me"])
