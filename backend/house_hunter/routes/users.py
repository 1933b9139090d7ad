from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from house_hunter.core.database import get_db
from house_hunter.schemas.user import UserDocumentOut
from house_hunter.services.users import get_user_by_email, user_document

router = APIRouter(tags=["users"])


@router.get("/userByEmail/{email}", response_model=UserDocumentOut)
def get_user_by_email_route(email: str, db: Session = Depends(get_db)):
    user = get_user_by_email(db, email)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user_document(user)
