import datetime
from typing import ClassVar
from pydantic import BaseModel
from deal_tracker.schemas.common import PartialUpdate


# Поле называется date, поэтому тип указываем через модуль
class CommunicationBase(BaseModel):
    date: datetime.date
    type: str
    subject: str
    notes: str


class CommunicationCreate(CommunicationBase):
    property_deal_id: int


class CommunicationUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"date", "type", "subject", "notes"})

    date: datetime.date | None = None
    type: str | None = None
    subject: str | None = None
    notes: str | None = None


class CommunicationResponse(CommunicationBase):
    id: int
    property_deal_id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
