from pydantic import BaseModel


class InsertOneOut(BaseModel):
    """Result of storing one document: the generated id under `insertedId`."""

    acknowledged: bool
    insertedId: str


class InsertFailedOut(BaseModel):
    message: str
    insertedId: None = None
