from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from house_hunter.models.house import House

logger = logging.getLogger(__name__)


def insert_house(db: Session, data: dict[str, Any]) -> House:
    """Store a listing exactly as submitted."""
    house = House(data=data)
    db.add(house)
    db.commit()
    db.refresh(house)
    logger.info("Stored house listing id=%s", house.id)
    return house
