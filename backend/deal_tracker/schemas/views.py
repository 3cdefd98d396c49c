from pydantic import BaseModel
from typing import Dict, List
from deal_tracker.schemas.property_deal import PropertyDealResponse
from deal_tracker.schemas.task import TaskWithContactResponse
from deal_tracker.schemas.document import DocumentResponse
from deal_tracker.schemas.communication import CommunicationResponse
from deal_tracker.schemas.contact import ContactResponse


class TaskCounts(BaseModel):
    total: int
    completed: int
    overdue: int


class PropertyDealOverview(BaseModel):
    """Карточка сделки: все дочерние записи в порядке отображения"""
    property_deal: PropertyDealResponse
    tasks: List[TaskWithContactResponse]
    documents: List[DocumentResponse]
    communications: List[CommunicationResponse]
    contacts: List[ContactResponse]
    task_counts: TaskCounts
    documents_count: int
    communications_count: int
    contacts_count: int


class DashboardStatistics(BaseModel):
    total_deals: int
    active_deals: int
    closed_deals: int
    created_this_month: int
    status_breakdown: Dict[str, int]
