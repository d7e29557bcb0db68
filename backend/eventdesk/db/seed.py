import logging

from eventdesk.core.config import settings
from eventdesk.db.base import Base
from eventdesk.db.session import SessionLocal, engine
from eventdesk.services.registration_writer import REGISTRATION_HEADER
from eventdesk.services.table_store import SqlTableStore

logger = logging.getLogger(__name__)

REGISTRY_HEADER = ["ID", "CompanyName", "Email", "Phone", "CreatedAt", "Status"]

DEMO_COMPANY = "Demo Company"
DEMO_EVENT = "Summer Fest"


def seed_demo_data():
    """Create a registry, one company and one event when the store is empty"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        store = SqlTableStore(db)
        if store.read_table(settings.COMPANIES_SHEET):
            logger.info("Store already seeded.")
            return

        logger.info("Seeding demo data...")
        store.append_row(settings.COMPANIES_SHEET, None, REGISTRY_HEADER)
        store.append_row(settings.COMPANIES_SHEET, None, [
            "1", DEMO_COMPANY, "events@demo.example", "01000000000", "2024-01-01T00:00:00.000Z", "enabled",
        ])

        header = REGISTRATION_HEADER + [
            settings.EVENT_STATUS_COLUMN,
            settings.EVENT_DESCRIPTION_COLUMN,
            settings.EVENT_DATE_COLUMN,
        ]
        store.create_table(DEMO_COMPANY, DEMO_EVENT, header)
        # Details row: carries the event metadata under its header columns
        store.append_row(DEMO_COMPANY, DEMO_EVENT, [""] * len(REGISTRATION_HEADER) + [
            "enabled", "Open-air talks and workshops", "2024-07-15",
        ])
        logger.info("✅ Demo data seeded.")
    finally:
        db.close()


if __name__ == "__main__":
    seed_demo_data()
