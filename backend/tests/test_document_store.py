from datetime import date

import pytest

from deal_tracker.core.clock import today
from deal_tracker.core.exceptions import ParentNotFound
from deal_tracker.models import Document
from deal_tracker.schemas.document import DocumentCreate, DocumentUpdate
from deal_tracker.services.document_store import DocumentStore


def test_create_stamps_upload_date(session, deal):
    document = DocumentStore(session).create(DocumentCreate(
        property_deal_id=deal.id,
        name="Purchase agreement",
        type="Contract",
        file_path="/files/agreement.pdf",
    ))

    assert document.id is not None
    assert document.upload_date == today()
    assert document.file_path == "/files/agreement.pdf"


def test_create_ignores_supplied_upload_date(session, deal):
    data = DocumentCreate.model_validate({
        "property_deal_id": deal.id,
        "name": "Old scan",
        "type": "Other",
        "upload_date": "2001-01-01",
    })

    document = DocumentStore(session).create(data)

    assert document.upload_date == today()
    assert document.file_path is None


def test_create_for_missing_deal(session):
    with pytest.raises(ParentNotFound):
        DocumentStore(session).create(DocumentCreate(property_deal_id=42, name="x", type="Other"))
    assert session.query(Document).count() == 0


def test_update_upload_date_and_clear_file_path(session, deal):
    store = DocumentStore(session)
    document = store.create(DocumentCreate(
        property_deal_id=deal.id, name="Report", type="Report", file_path="https://files.example/r.pdf",
    ))

    updated = store.update(document.id, DocumentUpdate(upload_date=date(2024, 3, 1), file_path=None))

    assert updated.upload_date == date(2024, 3, 1)
    assert updated.file_path is None
    assert updated.name == "Report"


def test_update_without_fields_is_noop(session, deal):
    store = DocumentStore(session)
    document = store.create(DocumentCreate(property_deal_id=deal.id, name="Report", type="Report"))

    assert store.update(document.id, DocumentUpdate()) is None


def test_list_and_delete(session, deal):
    store = DocumentStore(session)
    first = store.create(DocumentCreate(property_deal_id=deal.id, name="A", type="Legal"))
    store.create(DocumentCreate(property_deal_id=deal.id, name="B", type="Permit"))

    assert [d.name for d in store.list_by_deal(deal.id)] == ["A", "B"]
    assert store.delete(first.id) is True
    assert [d.name for d in store.list_by_deal(deal.id)] == ["B"]
    assert store.delete(999) is False
