from __future__ import annotations

import logging
from typing import Any, Union

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from house_hunter.core.database import get_db
from house_hunter.schemas.documents import InsertFailedOut, InsertOneOut
from house_hunter.services.houses import insert_house

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/houses", tags=["houses"])


@router.post("", response_model=Union[InsertOneOut, InsertFailedOut])
def create_house(data: dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    try:
        house = insert_house(db, data)
    except Exception:
        logger.exception("House insert failed")
        db.rollback()
        return {"message": "error", "insertedId": None}
    return {"acknowledged": True, "insertedId": house.id}
