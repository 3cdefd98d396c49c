"""
Скрипт для заполнения БД демонстрационной сделкой
"""
from datetime import timedelta

from deal_tracker.core.clock import today as current_date
from deal_tracker.core.config import settings
from deal_tracker.core.database import Database
from deal_tracker.models.property_deal import PropertyDeal
from deal_tracker.schemas.communication import CommunicationCreate
from deal_tracker.schemas.contact import ContactCreate
from deal_tracker.schemas.document import DocumentCreate
from deal_tracker.schemas.property_deal import PropertyDealCreate
from deal_tracker.schemas.task import TaskCreate
from deal_tracker.services.communication_store import CommunicationStore
from deal_tracker.services.contact_store import ContactStore
from deal_tracker.services.deal_store import DealStore
from deal_tracker.services.document_store import DocumentStore
from deal_tracker.services.task_store import TaskStore

DEMO_DEAL_NAME = "Sunset Villa"


def seed_data(database: Database) -> None:
    database.create_all()

    with database.session() as db:
        existing = db.query(PropertyDeal).filter(PropertyDeal.name == DEMO_DEAL_NAME).first()
        if existing:
            print(f"Deal '{DEMO_DEAL_NAME}' already exists (id={existing.id}), nothing to do")
            return

        deal = DealStore(db).create(PropertyDealCreate(
            name=DEMO_DEAL_NAME,
            address="123 Main St",
            status="Active",
            description="Three-bedroom villa, offer accepted, closing next month",
        ))

        contacts = ContactStore(db)
        lawyer = contacts.create(ContactCreate(
            property_deal_id=deal.id,
            name="Jane Doe",
            role="Lawyer",
            organization="Doe & Partners",
            email="jane@doe-partners.example",
        ))
        contacts.create(ContactCreate(
            property_deal_id=deal.id,
            name="Bob Smith",
            role="Inspector",
            phone="+1 555 0100",
        ))

        today = current_date()
        tasks = TaskStore(db)
        tasks.create(TaskCreate(
            property_deal_id=deal.id,
            contact_id=lawyer.id,
            name="Review purchase agreement",
            description="Go through the draft with the lawyer",
            due_date=today - timedelta(days=2),
            status="In Progress",
        ))
        tasks.create(TaskCreate(
            property_deal_id=deal.id,
            name="Schedule inspection",
            description="Book the home inspection",
            due_date=today + timedelta(days=5),
            status="To Do",
        ))

        DocumentStore(db).create(DocumentCreate(
            property_deal_id=deal.id,
            name="Purchase agreement draft",
            type="Contract",
            file_path="https://files.example/sunset-villa/agreement.pdf",
        ))

        CommunicationStore(db).create(CommunicationCreate(
            property_deal_id=deal.id,
            date=today,
            type="Phone Call",
            subject="Offer accepted",
            notes="Seller accepted the offer, waiting for signed agreement",
        ))

        print(f"✅ Seed data created successfully! (deal id={deal.id})")


if __name__ == "__main__":
    database = Database(settings.DATABASE_URL)
    try:
        seed_data(database)
    finally:
        database.dispose()
