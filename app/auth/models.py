# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class Principal(BaseModel):
    """
    Caller identity derived from one request's Authorization header.

    Built fresh for every request; nothing about the caller is kept
    between requests.
    """
    token: str

    model_config = ConfigDict(frozen=True)  # Make immutable

    @property
    def is_admin(self) -> bool:
        """Any token mentioning "admin" grants administrator access."""
        return "admin" in self.token


class TokenResponse(BaseModel):
    """Response of POST /login."""
    token: str = Field(..., examples=["admin"])
