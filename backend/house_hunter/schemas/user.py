from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserDocumentOut(BaseModel):
    """
    A stored user as the client sees it: id, email and the free-form
    profile fields flattened next to them. Never carries the password hash.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(alias="_id")
    email: str
    createdAt: datetime | None = None
