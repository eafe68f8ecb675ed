# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the auth endpoints."""

from pydantic import BaseModel, Field


# -- Requests --------------------------------------------------------------


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    password: str


# -- Responses -------------------------------------------------------------


class UserInfoResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    user: UserInfoResponse
    token: str
