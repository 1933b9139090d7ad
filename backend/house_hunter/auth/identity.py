# house_hunter/auth/identity.py
"""
Canonical authenticated identity.

Built from the claims of a verified session token so downstream code can
ask "who is this?" without touching the raw JWT.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Identity:
    """
    Attributes:
        user_id: ``userId``/``sub`` claim, if the token names a stored user.
        email: ``email`` claim, normalized.
        is_authenticated: True once a token has been verified.
        claims: Decoded token claims, returned as-is by /authenticate.
    """

    user_id: str | None = None
    email: str | None = None
    is_authenticated: bool = False
    claims: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def unauthenticated(cls) -> Identity:
        return cls()

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> Identity:
        user_id = claims.get("userId") or claims.get("sub")
        email = claims.get("email")
        return cls(
            user_id=str(user_id) if user_id else None,
            email=email.strip().lower() if isinstance(email, str) and email.strip() else None,
            is_authenticated=True,
            claims=dict(claims),
        )
