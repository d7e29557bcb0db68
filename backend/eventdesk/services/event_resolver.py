import logging
from typing import List, Sequence

from eventdesk.core.exceptions import EventNotFound

logger = logging.getLogger(__name__)


def _normalize(name: str) -> str:
    return name.strip().lower()


def list_table_markers(sheet_rows: Sequence[Sequence[str]]) -> List[str]:
    """Names of every table in a company sheet, in sheet order"""
    return [row[0] for row in sheet_rows if len(row) == 1 and row[0]]


def resolve_event(company_name: str, sheet_rows: Sequence[Sequence[str]], requested: str) -> str:
    """
    Find the stored event name for a requested event id.

    Tries an exact match first, then a trimmed, case-insensitive one.
    The first matching marker row wins in both passes.
    """
    for i, row in enumerate(sheet_rows):
        if len(row) == 1 and row[0] == requested:
            logger.info(f"Found exact match for event: {row[0]} at row {i}")
            return row[0]

    wanted = _normalize(requested)
    for i, row in enumerate(sheet_rows):
        if len(row) == 1 and row[0] and _normalize(row[0]) == wanted:
            logger.info(f"Found case-insensitive match for event: {row[0]} at row {i}")
            return row[0]

    logger.warning(f"Event {requested} not found in company {company_name}")
    logger.info(f"Available tables in sheet: {list_table_markers(sheet_rows)}")
    raise EventNotFound(company_name, requested)
