from datetime import date, datetime
from typing import Optional

from sqlalchemy.orm import Session

from deal_tracker.schemas.communication import CommunicationResponse
from deal_tracker.schemas.contact import ContactResponse
from deal_tracker.schemas.document import DocumentResponse
from deal_tracker.schemas.property_deal import PropertyDealResponse
from deal_tracker.schemas.task import TaskWithContactResponse
from deal_tracker.schemas.views import DashboardStatistics, PropertyDealOverview, TaskCounts
from deal_tracker.services import derived_views
from deal_tracker.services.communication_store import CommunicationStore
from deal_tracker.services.contact_store import ContactStore
from deal_tracker.services.deal_store import DealStore
from deal_tracker.services.document_store import DocumentStore
from deal_tracker.services.task_store import TaskStore


def build_deal_overview(db: Session, property_deal_id: int, today: Optional[date] = None) -> Optional[PropertyDealOverview]:
    """Карточка сделки. None, если сделки нет."""
    deal = DealStore(db).get_by_id(property_deal_id)
    if deal is None:
        return None

    tasks = TaskStore(db).list_by_deal(property_deal_id)
    documents = DocumentStore(db).list_by_deal(property_deal_id)
    communications = CommunicationStore(db).list_by_deal(property_deal_id)
    contacts = ContactStore(db).list_by_deal(property_deal_id)
    contacts_by_id = {c.id: c for c in contacts}

    task_views = []
    for task in derived_views.sort_tasks(tasks):
        view = TaskWithContactResponse.model_validate(task)
        contact = contacts_by_id.get(task.contact_id)
        view.contact = ContactResponse.model_validate(contact) if contact else None
        view.is_overdue = derived_views.is_overdue(task, today)
        task_views.append(view)

    return PropertyDealOverview(
        property_deal=PropertyDealResponse.model_validate(deal),
        tasks=task_views,
        documents=[DocumentResponse.model_validate(d) for d in derived_views.sort_documents(documents)],
        communications=[
            CommunicationResponse.model_validate(c) for c in derived_views.sort_communications(communications)
        ],
        contacts=[ContactResponse.model_validate(c) for c in contacts],
        task_counts=TaskCounts(
            total=len(tasks),
            completed=derived_views.count_completed(tasks),
            overdue=derived_views.count_overdue(tasks, today),
        ),
        documents_count=len(documents),
        communications_count=len(communications),
        contacts_count=len(contacts),
    )


def build_dashboard(db: Session, now: Optional[datetime] = None) -> DashboardStatistics:
    deals = DealStore(db).get_all()
    breakdown = derived_views.status_breakdown(deals)
    return DashboardStatistics(
        total_deals=len(deals),
        active_deals=breakdown.get("active", 0),
        closed_deals=breakdown.get("closed", 0),
        created_this_month=derived_views.count_created_this_month(deals, now),
        status_breakdown=breakdown,
    )
