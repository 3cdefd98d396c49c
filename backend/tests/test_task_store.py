from datetime import date, datetime

import pytest

from deal_tracker.core.exceptions import ContactMismatch, ContactNotFound, ParentNotFound
from deal_tracker.models import Task
from deal_tracker.schemas.contact import ContactCreate
from deal_tracker.schemas.task import TaskCreate, TaskUpdate
from deal_tracker.services.contact_store import ContactStore
from deal_tracker.services.derived_views import is_overdue
from deal_tracker.services.task_store import TaskStore


def _task_input(property_deal_id, **overrides):
    data = dict(
        property_deal_id=property_deal_id,
        name="Review contract",
        description="Check the purchase agreement",
        due_date=date(2025, 1, 15),
        status="To Do",
    )
    data.update(overrides)
    return TaskCreate(**data)


def test_create_task(session, deal):
    task = TaskStore(session).create(_task_input(deal.id))

    assert task.id is not None
    assert task.property_deal_id == deal.id
    assert task.contact_id is None
    assert task.due_date == date(2025, 1, 15)
    assert task.created_at is not None
    assert task.updated_at is not None


def test_create_task_with_contact(session, deal, contact):
    task = TaskStore(session).create(_task_input(deal.id, contact_id=contact.id))

    assert task.contact_id == contact.id


def test_create_task_for_missing_deal(session):
    with pytest.raises(ParentNotFound):
        TaskStore(session).create(_task_input(999))

    assert session.query(Task).count() == 0


def test_create_task_with_missing_contact(session, deal):
    with pytest.raises(ContactNotFound):
        TaskStore(session).create(_task_input(deal.id, contact_id=999))

    assert session.query(Task).count() == 0


def test_create_task_with_contact_from_other_deal(session, deal, other_deal):
    # Контакт A в сделке 1, задача в сделке 2
    contact_a = ContactStore(session).create(
        ContactCreate(property_deal_id=deal.id, name="A", role="Banker")
    )

    with pytest.raises(ContactMismatch):
        TaskStore(session).create(_task_input(other_deal.id, contact_id=contact_a.id))

    assert session.query(Task).count() == 0


def test_list_by_deal(session, deal, other_deal):
    store = TaskStore(session)
    store.create(_task_input(deal.id, name="one"))
    store.create(_task_input(deal.id, name="two"))
    store.create(_task_input(other_deal.id, name="three"))

    assert [t.name for t in store.list_by_deal(deal.id)] == ["one", "two"]
    assert store.list_by_deal(999) == []


def test_get_by_id(session, deal):
    store = TaskStore(session)
    created = store.create(_task_input(deal.id))

    assert store.get_by_id(created.id).name == "Review contract"
    assert store.get_by_id(999) is None


def test_get_by_id_round_trip_with_contact(session, deal, contact):
    store = TaskStore(session)
    created = store.create(_task_input(deal.id, contact_id=contact.id))
    expected = {
        "id": created.id,
        "property_deal_id": deal.id,
        "contact_id": contact.id,
        "name": "Review contract",
        "description": "Check the purchase agreement",
        "due_date": date(2025, 1, 15),
        "status": "To Do",
        "created_at": created.created_at,
        "updated_at": created.updated_at,
    }
    session.expire_all()

    fetched = store.get_by_id(created.id)
    assert {field: getattr(fetched, field) for field in expected} == expected
    assert isinstance(fetched.created_at, datetime)
    assert fetched.created_at == fetched.updated_at


def test_update_only_supplied_fields(session, deal):
    store = TaskStore(session)
    task = store.create(_task_input(deal.id))

    updated = store.update(task.id, TaskUpdate(name="Only Name Updated", status="completed"))

    assert updated.name == "Only Name Updated"
    assert updated.status == "completed"
    assert updated.description == "Check the purchase agreement"
    assert updated.due_date == date(2025, 1, 15)


def test_update_assigns_and_clears_contact(session, deal, contact):
    store = TaskStore(session)
    task = store.create(_task_input(deal.id))

    assert store.update(task.id, TaskUpdate(contact_id=contact.id)).contact_id == contact.id
    assert store.update(task.id, TaskUpdate(contact_id=None)).contact_id is None


def test_update_with_contact_from_other_deal(session, deal, other_deal):
    store = TaskStore(session)
    task = store.create(_task_input(deal.id))
    foreign = ContactStore(session).create(
        ContactCreate(property_deal_id=other_deal.id, name="B", role="Architect")
    )

    with pytest.raises(ContactMismatch):
        store.update(task.id, TaskUpdate(contact_id=foreign.id, name="changed"))

    unchanged = store.get_by_id(task.id)
    assert unchanged.contact_id is None
    assert unchanged.name == "Review contract"


def test_update_same_contact_refreshes_timestamp(session, deal, contact):
    store = TaskStore(session)
    task = store.create(_task_input(deal.id, contact_id=contact.id))
    before = task.updated_at

    updated = store.update(task.id, TaskUpdate(contact_id=contact.id))

    assert updated.contact_id == contact.id
    assert updated.updated_at >= before


def test_update_without_fields_is_noop(session, deal):
    store = TaskStore(session)
    task = store.create(_task_input(deal.id))
    task_id, before = task.id, task.updated_at

    assert store.update(task_id, TaskUpdate()) is None
    assert store.get_by_id(task_id).updated_at == before


def test_update_missing_task(session):
    assert TaskStore(session).update(999, TaskUpdate(name="x")) is None


def test_completing_overdue_task(session, deal, yesterday):
    store = TaskStore(session)
    task = store.create(_task_input(deal.id, due_date=yesterday, status="To Do"))
    assert is_overdue(task) is True

    updated = store.update(task.id, TaskUpdate(status="Completed"))

    assert is_overdue(updated) is False
    assert updated.due_date == yesterday


def test_delete_task(session, deal):
    store = TaskStore(session)
    task = store.create(_task_input(deal.id))
    task_id = task.id

    assert store.delete(task_id) is True
    assert store.get_by_id(task_id) is None
    assert store.delete(task_id) is False
