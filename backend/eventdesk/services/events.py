import logging
from typing import List

from eventdesk.core.config import settings
from eventdesk.core.exceptions import CompanyDisabled, CompanyNotFound
from eventdesk.schemas import EventSummary
from eventdesk.services.duplicates import EMAIL_INDEX
from eventdesk.services.event_resolver import list_table_markers
from eventdesk.services.gates import DISABLED, company_status, event_status, header_value
from eventdesk.services.table_store import TableStore

logger = logging.getLogger(__name__)


def _count_registrations(table_rows) -> int:
    return sum(1 for row in table_rows[1:] if len(row) > EMAIL_INDEX and row[EMAIL_INDEX])


def list_events(store: TableStore, company_name: str) -> List[EventSummary]:
    """Summaries of every event table in a company sheet"""
    sheet_rows = store.read_table(company_name)
    if not sheet_rows:
        raise CompanyNotFound(company_name)

    status = company_status(store, company_name)
    if status == DISABLED:
        raise CompanyDisabled(company_name, message="Company is disabled")

    events = []
    for event_name in list_table_markers(sheet_rows):
        table_rows = store.read_table(company_name, event_name)
        events.append(EventSummary(
            id=event_name,
            name=event_name,
            image=header_value(table_rows, settings.EVENT_IMAGE_COLUMN) or None,
            description=header_value(table_rows, settings.EVENT_DESCRIPTION_COLUMN) or "",
            date=header_value(table_rows, settings.EVENT_DATE_COLUMN) or "",
            registrations=_count_registrations(table_rows),
            status=event_status(table_rows),
            companyStatus=status,
        ))

    logger.info(f"Listed {len(events)} event(s) for company {company_name}")
    return events
