# house_hunter/core/security.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt, JWTError
from passlib.context import CryptContext

from house_hunter.core.config import settings

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

# Time claims are always minted here, never taken from a caller.
RESERVED_CLAIMS = frozenset({"exp", "iat", "nbf"})

# jose rejects non-string values for these on decode.
STRING_CLAIMS = ("sub", "jti")


# -------------------------
# Password hashing
# -------------------------
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)


# -------------------------
# JWT helpers
# -------------------------
def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _require_jwt_secret() -> None:
    if not settings.JWT_SECRET or not settings.JWT_SECRET.strip():
        raise RuntimeError("JWT_SECRET must be set (auth is required).")


def token_lifetime_seconds() -> int:
    return int(settings.ACCESS_TOKEN_EXPIRE_MINUTES) * 60


def create_access_token(claims: dict[str, Any]) -> str:
    """
    Sign a session token carrying `claims` plus fresh iat/exp.

    Non-string `sub`/`jti` values are stringified so the token decodes cleanly.
    """
    _require_jwt_secret()

    now = _now_utc()
    exp = now + timedelta(seconds=token_lifetime_seconds())

    payload = {k: v for k, v in claims.items() if k not in RESERVED_CLAIMS}
    for key in STRING_CLAIMS:
        if payload.get(key) is not None:
            payload[key] = str(payload[key])
    payload["iat"] = int(now.timestamp())
    payload["exp"] = int(exp.timestamp())

    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def create_user_token(user_id: str, email: str | None = None) -> str:
    """
    Session token for a stored user: sub/userId = user id.
    """
    claims: dict[str, Any] = {"sub": user_id, "userId": user_id}
    if email:
        claims["email"] = email
    return create_access_token(claims)


def decode_token(token: str) -> dict[str, Any]:
    _require_jwt_secret()
    # Let callers decide how to handle JWTError.
    # `aud` set by /jwt callers is carried, not enforced.
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options={"verify_aud": False},
    )


def verify_session_token(token: str) -> dict[str, Any]:
    try:
        return decode_token(token)
    except JWTError:
        raise ValueError("Invalid or expired token")
