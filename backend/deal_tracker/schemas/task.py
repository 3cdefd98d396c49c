from typing import ClassVar
from pydantic import BaseModel
from datetime import date, datetime
from deal_tracker.schemas.common import PartialUpdate
from deal_tracker.schemas.contact import ContactResponse


class TaskBase(BaseModel):
    name: str
    description: str
    due_date: date
    status: str


class TaskCreate(TaskBase):
    property_deal_id: int
    contact_id: int | None = None


class TaskUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "description", "due_date", "status"})

    # null снимает назначение контакта
    contact_id: int | None = None
    name: str | None = None
    description: str | None = None
    due_date: date | None = None
    status: str | None = None


class TaskResponse(TaskBase):
    id: int
    property_deal_id: int
    contact_id: int | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TaskWithContactResponse(TaskResponse):
    contact: ContactResponse | None = None
    is_overdue: bool = False
