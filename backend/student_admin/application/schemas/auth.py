"""Pydantic DTOs for the login/registration demo."""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Username/password pair used by both register and login."""

    username: str = Field(..., min_length=1, max_length=255, examples=["jdoe"])
    password: str = Field(..., min_length=1, max_length=255)


class AuthMessageResponse(BaseModel):
    message: str


class AuthStatusResponse(BaseModel):
    is_allowed: bool
