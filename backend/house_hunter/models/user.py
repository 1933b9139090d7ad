# house_hunter/models/user.py
import uuid

from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.types import JSON

from house_hunter.core.base import Base


def new_document_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_document_id)

    # Unique at the storage layer; the pre-insert lookup is only a fast path.
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    # Any extra registration fields, kept verbatim.
    profile = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
