# house_hunter/services/users.py
"""
User storage helpers.

Responsibilities:
- Email normalization and lookup
- Creating users with a hashed password and a free-form profile
- Turning a stored user into the document shape clients expect
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from house_hunter.core.security import hash_password, verify_password
from house_hunter.models.user import User

logger = logging.getLogger(__name__)

# Keys that belong to the user row itself and never go into the profile.
RESERVED_PROFILE_KEYS = frozenset({"id", "email", "password", "password_hash", "createdAt", "created_at"})


class UserExistsError(Exception):
    pass


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def clean_profile(extra: dict[str, Any] | None) -> dict[str, Any]:
    """Drop reserved and underscore-prefixed keys from client-supplied profile fields."""
    if not extra:
        return {}
    return {
        k: v
        for k, v in extra.items()
        if k not in RESERVED_PROFILE_KEYS and not str(k).startswith("_")
    }


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Look up a user by email address."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def _is_email_conflict(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    pgcode = getattr(orig, "pgcode", None)
    if pgcode == "23505":
        return True
    message = str(orig or exc)
    return "users.email" in message or "ix_users_email" in message or "users_email" in message


def create_user(
    db: Session,
    *,
    email: str,
    password: str,
    profile: dict[str, Any] | None = None,
) -> User:
    """
    Insert a new user.

    Raises:
        UserExistsError: the email is already taken (checked up front, and
            again by the unique constraint when two registrations race).
    """
    normalized_email = normalize_email(email)
    if not normalized_email:
        raise ValueError("email is required")
    if not password:
        raise ValueError("password is required")

    if get_user_by_email(db, normalized_email) is not None:
        raise UserExistsError(normalized_email)

    user = User(
        email=normalized_email,
        password_hash=hash_password(password),
        profile=clean_profile(profile),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if _is_email_conflict(exc):
            logger.info("Registration lost insert race for email=%s", normalized_email)
            raise UserExistsError(normalized_email) from exc
        raise
    db.refresh(user)

    logger.info("Registered user: id=%s, email=%s", user.id, normalized_email)
    return user


def authenticate_user(db: Session, *, email: str, password: str) -> tuple[Optional[User], str]:
    """
    Returns (user, message). user is None when the email is unknown or the
    password does not match; message says which.
    """
    user = get_user_by_email(db, email)
    if not user:
        return None, "User not found"
    if not verify_password(password, user.password_hash):
        return None, "Invalid password"
    return user, "Login successful"


def user_document(user: User) -> dict[str, Any]:
    doc: dict[str, Any] = dict(user.profile or {})
    doc["_id"] = user.id
    doc["email"] = user.email
    doc["createdAt"] = user.created_at
    return doc
