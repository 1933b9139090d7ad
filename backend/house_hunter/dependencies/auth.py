# house_hunter/dependencies/auth.py
from __future__ import annotations

import hmac
import logging

from fastapi import Header, HTTPException, Request, status

from house_hunter.auth.identity import Identity
from house_hunter.core.config import settings
from house_hunter.core.security import verify_session_token
from house_hunter.core.session_cookie import read_session_cookie

logger = logging.getLogger(__name__)


def _unauthorized(detail: str = "not authorized") -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def get_current_identity(request: Request) -> Identity:
    """
    Validates:
      - `token` cookie present
      - token signature + exp
    Returns the Identity and stores it on request.state. Any failure raises
    401 before the route body runs.
    """
    request.state.identity = Identity.unauthenticated()
    request.state.user = None

    token = read_session_cookie(request)
    if not token:
        raise _unauthorized()

    try:
        claims = verify_session_token(token)
    except ValueError:
        logger.info("Rejected session token on %s", request.url.path)
        raise _unauthorized()

    identity = Identity.from_claims(claims)
    request.state.identity = identity
    request.state.user = identity.claims
    return identity


def require_token_issuer(x_token_issuer_secret: str | None = Header(None)) -> None:
    """
    Shared-secret guard for POST /jwt. Signing arbitrary claims is only
    allowed for trusted callers that know TOKEN_ISSUER_SECRET.
    """
    if not settings.TOKEN_ISSUER_SECRET:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Token issuance is disabled")

    supplied = (x_token_issuer_secret or "").encode("utf-8")
    if not hmac.compare_digest(supplied, settings.TOKEN_ISSUER_SECRET.encode("utf-8")):
        raise _unauthorized()
