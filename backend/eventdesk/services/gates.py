import logging
from typing import Optional, Sequence

from eventdesk.core.config import settings
from eventdesk.services.table_store import TableStore

logger = logging.getLogger(__name__)

ENABLED = "enabled"
DISABLED = "disabled"


def _cell(row: Sequence[str], index: int) -> str:
    return row[index] if 0 <= index < len(row) else ""


def company_status(store: TableStore, company_name: str) -> str:
    """Status of a company in the registry; enabled unless a row says otherwise"""
    registry = store.read_table(settings.COMPANIES_SHEET)

    for row in registry[1:]:
        if _cell(row, settings.COMPANY_NAME_COLUMN) == company_name:
            return _cell(row, settings.COMPANY_STATUS_COLUMN) or ENABLED

    return ENABLED


def check_company_enabled(store: TableStore, company_name: str) -> bool:
    status = company_status(store, company_name)
    if status == DISABLED:
        logger.warning(f"Company {company_name} is disabled")
        return False
    return True


def header_value(table_rows: Sequence[Sequence[str]], column: str) -> Optional[str]:
    """Value under a named header column in the first data row, if both exist"""
    if len(table_rows) < 2:
        return None

    headers = table_rows[0]
    if column not in headers:
        return None

    return _cell(table_rows[1], list(headers).index(column))


def event_status(table_rows: Sequence[Sequence[str]]) -> str:
    return header_value(table_rows, settings.EVENT_STATUS_COLUMN) or ENABLED


def check_event_enabled(table_rows: Sequence[Sequence[str]], event_name: str) -> bool:
    if event_status(table_rows) == DISABLED:
        logger.warning(f"Event {event_name} is disabled")
        return False
    return True
