"""Data models for Podio OAuth2 responses"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Token endpoint response body

    Podio does not rotate refresh tokens, so a refresh response may omit one.
    """
    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(min_length=1)
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_in: Optional[int] = None
