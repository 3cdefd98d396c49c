from deal_tracker.schemas.property_deal import PropertyDealCreate, PropertyDealUpdate, PropertyDealResponse
from deal_tracker.schemas.task import TaskCreate, TaskUpdate, TaskResponse, TaskWithContactResponse
from deal_tracker.schemas.document import DocumentCreate, DocumentUpdate, DocumentResponse
from deal_tracker.schemas.communication import CommunicationCreate, CommunicationUpdate, CommunicationResponse
from deal_tracker.schemas.contact import ContactCreate, ContactUpdate, ContactResponse
from deal_tracker.schemas.views import TaskCounts, PropertyDealOverview, DashboardStatistics

__all__ = [
    "PropertyDealCreate",
    "PropertyDealUpdate",
    "PropertyDealResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "TaskWithContactResponse",
    "DocumentCreate",
    "DocumentUpdate",
    "DocumentResponse",
    "CommunicationCreate",
    "CommunicationUpdate",
    "CommunicationResponse",
    "ContactCreate",
    "ContactUpdate",
    "ContactResponse",
    "TaskCounts",
    "PropertyDealOverview",
    "DashboardStatistics",
]
