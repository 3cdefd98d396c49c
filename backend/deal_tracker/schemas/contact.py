from typing import ClassVar
from pydantic import BaseModel
from datetime import datetime
from deal_tracker.schemas.common import PartialUpdate


class ContactBase(BaseModel):
    name: str
    role: str
    organization: str | None = None
    email: str | None = None
    phone: str | None = None
    notes: str | None = None


class ContactCreate(ContactBase):
    property_deal_id: int


class ContactUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "role"})

    name: str | None = None
    role: str | None = None
    # Эти поля nullable: явный null очищает значение
    organization: str | None = None
    email: str | None = None
    phone: str | None = None
    notes: str | None = None


class ContactResponse(ContactBase):
    id: int
    property_deal_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
