# house_hunter/routes/auth.py
from __future__ import annotations

import logging
from typing import Any, Union

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.orm import Session

from house_hunter.auth.identity import Identity
from house_hunter.core.database import get_db
from house_hunter.core.security import create_access_token, create_user_token
from house_hunter.core.session_cookie import clear_session_cookie, set_session_cookie
from house_hunter.dependencies.auth import get_current_identity, require_token_issuer
from house_hunter.schemas.auth import (
    AuthenticateOut,
    LoginIn,
    LoginOut,
    RegisterIn,
    SuccessOut,
)
from house_hunter.schemas.documents import InsertFailedOut, InsertOneOut
from house_hunter.services.users import UserExistsError, authenticate_user, create_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# -----------------------------
# Routes
# -----------------------------
@router.post("/register", response_model=Union[InsertOneOut, InsertFailedOut])
def register(payload: RegisterIn, response: Response, db: Session = Depends(get_db)):
    """
    Failures are reported in the body with HTTP 200; clients check insertedId.
    """
    try:
        user = create_user(
            db,
            email=payload.email,
            password=payload.password,
            profile=payload.model_extra,
        )
        token = create_user_token(user.id, user.email)
    except UserExistsError:
        return {"message": "user exists", "insertedId": None}
    except ValueError as exc:
        logger.info("Registration rejected: %s", exc)
        return {"message": "error", "insertedId": None}
    except Exception:
        logger.exception("Registration failed")
        db.rollback()
        return {"message": "error", "insertedId": None}

    set_session_cookie(response, token)
    return {"acknowledged": True, "insertedId": user.id}


@router.post("/userLogin", response_model=LoginOut)
def login(payload: LoginIn, response: Response, db: Session = Depends(get_db)):
    try:
        user, message = authenticate_user(db, email=payload.email, password=payload.password)
        if not user:
            return {"message": message, "token": None}
        token = create_user_token(user.id, user.email)
    except Exception:
        logger.exception("Login failed")
        return {"message": "Error", "token": None}

    # Token goes out in the body as well as the cookie.
    set_session_cookie(response, token)
    return {"message": message, "token": token}


@router.get("/authenticate", response_model=AuthenticateOut)
def authenticate(identity: Identity = Depends(get_current_identity)):
    logger.info("Session check ok for user_id=%s", identity.user_id)
    return {"success": True, "user": identity.claims}


@router.post("/jwt", response_model=SuccessOut, dependencies=[Depends(require_token_issuer)])
def issue_token(response: Response, claims: dict[str, Any] = Body(...)):
    token = create_access_token(claims)
    set_session_cookie(response, token)
    return {"success": True}


@router.post("/logout", response_model=SuccessOut)
def logout(response: Response):
    clear_session_cookie(response)
    return {"success": True}
