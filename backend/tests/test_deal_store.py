from datetime import date, datetime

from deal_tracker.models import Communication, Contact, Document, PropertyDeal, Task
from deal_tracker.schemas.communication import CommunicationCreate
from deal_tracker.schemas.contact import ContactCreate
from deal_tracker.schemas.document import DocumentCreate
from deal_tracker.schemas.property_deal import PropertyDealCreate, PropertyDealUpdate
from deal_tracker.schemas.task import TaskCreate
from deal_tracker.services.communication_store import CommunicationStore
from deal_tracker.services.contact_store import ContactStore
from deal_tracker.services.deal_store import DealStore
from deal_tracker.services.derived_views import filter_by_status
from deal_tracker.services.document_store import DocumentStore
from deal_tracker.services.task_store import TaskStore


def _deal_input(**overrides):
    data = dict(name="Sunset Villa", address="123 Main St", status="active", description="...")
    data.update(overrides)
    return PropertyDealCreate(**data)


def test_create_assigns_id_and_timestamps(session):
    deal = DealStore(session).create(_deal_input())

    assert deal.id is not None
    assert deal.name == "Sunset Villa"
    assert deal.address == "123 Main St"
    assert deal.status == "active"
    assert deal.created_at is not None
    assert deal.created_at == deal.updated_at


def test_create_accepts_empty_strings(session):
    deal = DealStore(session).create(_deal_input(name="", address="", status="", description=""))

    assert deal.id is not None
    assert deal.name == ""


def test_ids_are_unique_even_after_delete(session):
    store = DealStore(session)
    first = store.create(_deal_input(name="A")).id
    second = store.create(_deal_input(name="B")).id
    store.delete(second)
    third = store.create(_deal_input(name="C")).id

    assert len({first, second, third}) == 3


def test_get_all_and_filter_by_status(session):
    store = DealStore(session)
    store.create(_deal_input())

    deals = store.get_all()
    assert len(deals) == 1
    assert deals[0].name == "Sunset Villa"
    assert deals[0].status == "active"

    store.create(_deal_input(name="Harbor Loft", status="pending"))
    active = filter_by_status(store.get_all(), "ACTIVE")
    assert [d.name for d in active] == ["Sunset Villa"]


def test_get_all_keeps_insertion_order(session):
    store = DealStore(session)
    for name in ("A", "B", "C"):
        store.create(_deal_input(name=name))

    assert [d.name for d in store.get_all()] == ["A", "B", "C"]


def test_get_by_id_round_trip(session):
    store = DealStore(session)
    created = store.create(_deal_input())

    expected = {
        "id": created.id,
        "name": "Sunset Villa",
        "address": "123 Main St",
        "status": "active",
        "description": "...",
        "created_at": created.created_at,
        "updated_at": created.updated_at,
    }
    session.expire_all()

    fetched = store.get_by_id(created.id)
    assert {field: getattr(fetched, field) for field in expected} == expected
    assert isinstance(fetched.created_at, datetime)
    assert isinstance(fetched.updated_at, datetime)


def test_get_by_id_missing_returns_none(session):
    assert DealStore(session).get_by_id(999) is None


def test_update_changes_only_supplied_fields(session):
    store = DealStore(session)
    deal = store.create(_deal_input())
    created_at, original_updated_at = deal.created_at, deal.updated_at

    updated = store.update(deal.id, PropertyDealUpdate(status="closed"))

    assert updated.status == "closed"
    assert updated.name == "Sunset Villa"
    assert updated.address == "123 Main St"
    assert updated.created_at == created_at
    assert updated.updated_at >= original_updated_at


def test_update_without_fields_is_noop(session):
    store = DealStore(session)
    deal = store.create(_deal_input())
    deal_id, original_updated_at = deal.id, deal.updated_at

    assert store.update(deal_id, PropertyDealUpdate()) is None
    assert store.get_by_id(deal_id).updated_at == original_updated_at


def test_update_missing_returns_none(session):
    assert DealStore(session).update(999, PropertyDealUpdate(name="x")) is None


def test_delete_missing_returns_false(session, deal):
    assert DealStore(session).delete(999) is False
    assert session.query(PropertyDeal).count() == 1


def test_delete_cascades_to_children(session, deal, other_deal):
    deal_id, other_id = deal.id, other_deal.id

    contact = ContactStore(session).create(ContactCreate(property_deal_id=deal_id, name="Jane", role="Lawyer"))
    tasks = TaskStore(session)
    for i in range(3):
        tasks.create(TaskCreate(
            property_deal_id=deal_id,
            contact_id=contact.id if i == 0 else None,
            name=f"Task {i}",
            description="",
            due_date=date(2025, 1, i + 1),
            status="To Do",
        ))
    for i in range(2):
        DocumentStore(session).create(DocumentCreate(property_deal_id=deal_id, name=f"Doc {i}", type="Contract"))
    CommunicationStore(session).create(CommunicationCreate(
        property_deal_id=deal_id, date=date(2025, 1, 1), type="Email", subject="Hi", notes="",
    ))
    # Запись другой сделки не должна пострадать
    tasks.create(TaskCreate(
        property_deal_id=other_id, name="Keep", description="", due_date=date(2025, 1, 1), status="To Do",
    ))

    assert DealStore(session).delete(deal_id) is True

    for model in (Task, Document, Communication, Contact):
        assert session.query(model).filter(model.property_deal_id == deal_id).count() == 0
    assert session.query(PropertyDeal).filter(PropertyDeal.id == deal_id).count() == 0
    assert session.query(Task).filter(Task.property_deal_id == other_id).count() == 1
    assert DealStore(session).get_by_id(other_id) is not None
