from __future__ import annotations

from fastapi import Request, Response

from house_hunter.core.config import settings
from house_hunter.core.security import token_lifetime_seconds

COOKIE_PATH = "/"


def cookie_name() -> str:
    return settings.SESSION_COOKIE_NAME.strip() or "token"


def cookie_secure() -> bool:
    # Prod => HTTPS => Secure cookies. Dev http://localhost => must be False.
    return settings.is_prod


def cookie_samesite() -> str:
    """
    "none" in prod so the SPA on another origin receives the cookie
    (browsers only accept that together with Secure). "strict" otherwise.
    """
    return "none" if settings.is_prod else "strict"


def set_session_cookie(resp: Response, token: str) -> None:
    resp.set_cookie(
        key=cookie_name(),
        value=token,
        httponly=True,
        secure=cookie_secure(),
        samesite=cookie_samesite(),
        max_age=token_lifetime_seconds(),
        path=COOKIE_PATH,
    )


def clear_session_cookie(resp: Response) -> None:
    resp.delete_cookie(
        key=cookie_name(),
        path=COOKIE_PATH,
        httponly=True,
        secure=cookie_secure(),
        samesite=cookie_samesite(),
    )


def read_session_cookie(req: Request) -> str | None:
    val = req.cookies.get(cookie_name())
    if not val:
        return None
    val = val.strip()
    return val or None
