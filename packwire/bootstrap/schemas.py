import uuid

from pydantic import BaseModel, Field


class Item(BaseModel):
    name: str
    quantity: int = Field(ge=0)
    tags: list[str] = Field(default_factory=list)
    blob: bytes | None = None


class StoredItem(Item):
    id: uuid.UUID
