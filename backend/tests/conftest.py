import os

# Point the app at a throwaway database before anything imports settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ["SEED_DEMO_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from eventdesk.core.config import settings
from eventdesk.db.base import Base
from eventdesk.db.session import SessionLocal, engine
from eventdesk.main import app
from eventdesk.services.registration_writer import REGISTRATION_HEADER
from eventdesk.services.table_store import SqlTableStore

REGISTRY_HEADER = ["ID", "CompanyName", "Email", "Phone", "CreatedAt", "Status"]
EVENT_HEADER = REGISTRATION_HEADER + ["EventStatus", "EventDescription", "EventDate", "EventImage"]

EXISTING = ["Existing Person", "01011111111", "a@b.com", "female", "Cairo University",
            "student", "29001011234567", "2024-01-01T10:00:00.000Z", ""]


class MemoryTableStore:
    """List-backed store with the same contract as SqlTableStore"""

    def __init__(self):
        self.sheets = {}
        self.appends = []

    def read_table(self, tenant, table_name=None):
        rows = self.sheets.get(tenant, [])
        if table_name is None:
            return [list(cells) for _, _, cells in rows]
        return [list(cells) for name, marker, cells in rows if name == table_name and not marker]

    def append_row(self, tenant, table_name, row):
        self.appends.append((tenant, table_name, list(row)))
        self.sheets.setdefault(tenant, []).append((table_name, False, list(row)))

    def create_table(self, tenant, table_name, header):
        sheet = self.sheets.setdefault(tenant, [])
        sheet.append((table_name, True, [table_name]))
        sheet.append((table_name, False, list(header)))


@pytest.fixture(autouse=True)
def fresh_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def store(db_session) -> SqlTableStore:
    return SqlTableStore(db_session)


def populate(store):
    """Registry with one enabled and one disabled company, plus their events"""
    registry = settings.COMPANIES_SHEET
    store.append_row(registry, None, REGISTRY_HEADER)
    store.append_row(registry, None, ["1", "Acme", "hello@acme.io", "01000000001", "2024-01-01", "enabled"])
    store.append_row(registry, None, ["2", "Closed Co", "hi@closed.io", "01000000002", "2024-01-01", "disabled"])
    store.append_row(registry, None, ["3", "Quiet Co", "hi@quiet.io", "01000000003", "2024-01-01"])

    # Stored with a trailing space and lower case on purpose
    store.create_table("Acme", "summer fest ", EVENT_HEADER)
    store.append_row("Acme", "summer fest ", EXISTING)

    store.create_table("Acme", "Closed Event", EVENT_HEADER)
    store.append_row("Acme", "Closed Event", [""] * len(REGISTRATION_HEADER) + ["disabled", "Members only", "2024-09-01", ""])

    store.create_table("Closed Co", "Launch", EVENT_HEADER)
    store.create_table("Quiet Co", "Meetup", EVENT_HEADER)
    return store


@pytest.fixture
def seeded_store(store) -> SqlTableStore:
    return populate(store)


@pytest.fixture
def memory_store() -> MemoryTableStore:
    store = populate(MemoryTableStore())
    # Seed rows are fixture setup, not writes under test
    store.appends.clear()
    return store


@pytest.fixture
def client():
    """
    A fixture that provides a test client for the FastAPI application.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def payload():
    return {
        "companyName": "Acme",
        "eventName": "Summer%20Fest",
        "name": "Mona Ali",
        "phone": "01012345678",
        "email": "mona@example.com",
        "gender": "female",
        "college": "Engineering",
        "status": "student",
        "nationalId": "29501011234567",
    }
