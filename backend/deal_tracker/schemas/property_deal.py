from typing import ClassVar
from pydantic import BaseModel
from datetime import datetime
from deal_tracker.schemas.common import PartialUpdate


class PropertyDealBase(BaseModel):
    name: str
    address: str
    status: str
    description: str


class PropertyDealCreate(PropertyDealBase):
    pass


class PropertyDealUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "address", "status", "description"})

    name: str | None = None
    address: str | None = None
    status: str | None = None
    description: str | None = None


class PropertyDealResponse(PropertyDealBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
