from typing import ClassVar
from pydantic import BaseModel
from datetime import date, datetime
from deal_tracker.schemas.common import PartialUpdate


class DocumentBase(BaseModel):
    name: str
    type: str
    file_path: str | None = None


class DocumentCreate(DocumentBase):
    # upload_date не принимается: проставляется датой создания
    property_deal_id: int


class DocumentUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "type", "upload_date"})

    name: str | None = None
    type: str | None = None
    upload_date: date | None = None
    file_path: str | None = None


class DocumentResponse(DocumentBase):
    id: int
    property_deal_id: int
    upload_date: date
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
