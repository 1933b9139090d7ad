# house_hunter/models/house.py
from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func
from sqlalchemy.types import JSON

from house_hunter.core.base import Base
from house_hunter.models.user import new_document_id


class House(Base):
    __tablename__ = "houses"

    id = Column(String(32), primary_key=True, default=new_document_id)

    # Listing fields exactly as the client sent them.
    data = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
