from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from deal_tracker.core.clock import today
from deal_tracker.core.config import Settings
from deal_tracker.core.database import Database
from deal_tracker.main import create_app
from deal_tracker.schemas.contact import ContactCreate
from deal_tracker.schemas.property_deal import PropertyDealCreate
from deal_tracker.services.contact_store import ContactStore
from deal_tracker.services.deal_store import DealStore


@pytest.fixture
def database():
    db = Database("sqlite:///:memory:")
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture
def session(database):
    with database.session() as db:
        yield db


@pytest.fixture
def client(database):
    app = create_app(Settings(DATABASE_URL="sqlite:///:memory:"), database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def yesterday():
    return today() - timedelta(days=1)


@pytest.fixture
def deal(session):
    return DealStore(session).create(PropertyDealCreate(
        name="Sunset Villa",
        address="123 Main St",
        status="active",
        description="Test property",
    ))


@pytest.fixture
def other_deal(session):
    return DealStore(session).create(PropertyDealCreate(
        name="Harbor Loft",
        address="9 Pier Rd",
        status="pending",
        description="Second property",
    ))


@pytest.fixture
def contact(session, deal):
    return ContactStore(session).create(ContactCreate(
        property_deal_id=deal.id,
        name="Jane Doe",
        role="Lawyer",
        email="jane@example.com",
    ))
