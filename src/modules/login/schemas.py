"""Pydantic schemas documenting the login API."""

from pydantic import BaseModel, ConfigDict, Field


class AccessTokenResponse(BaseModel):
    """Schema for a successful login."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")


class ErrorResponse(BaseModel):
    """Schema for every non-200 login response."""

    error: str
