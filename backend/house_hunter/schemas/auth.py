# house_hunter/schemas/auth.py
from typing import Any

from pydantic import BaseModel, ConfigDict


class RegisterIn(BaseModel):
    # Extra profile fields (name, photo, role, ...) are accepted and stored verbatim.
    # email/password are not validated here: bad input gets a 200 error body from the route.
    model_config = ConfigDict(extra="allow")

    email: str = ""
    password: str = ""


class LoginIn(BaseModel):
    email: str = ""
    password: str = ""


class LoginOut(BaseModel):
    message: str
    token: str | None = None


class SuccessOut(BaseModel):
    success: bool


class AuthenticateOut(BaseModel):
    success: bool
    user: dict[str, Any]
