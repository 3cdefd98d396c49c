from deal_tracker.models.property_deal import PropertyDeal, DEAL_STATUSES
from deal_tracker.models.task import Task, TASK_STATUSES, COMPLETED_STATUS
from deal_tracker.models.document import Document, DOCUMENT_TYPES
from deal_tracker.models.communication import Communication, COMMUNICATION_TYPES
from deal_tracker.models.contact import Contact, CONTACT_ROLES

__all__ = [
    "PropertyDeal",
    "DEAL_STATUSES",
    "Task",
    "TASK_STATUSES",
    "COMPLETED_STATUS",
    "Document",
    "DOCUMENT_TYPES",
    "Communication",
    "COMMUNICATION_TYPES",
    "Contact",
    "CONTACT_ROLES",
]
