import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from eventdesk.api.deps import get_table_store
from eventdesk.core.exceptions import RegistrationError
from eventdesk.schemas import ErrorResponse, EventListResponse
from eventdesk.services.events import list_events
from eventdesk.services.table_store import SqlTableStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/events",
    response_model=EventListResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_events(company: Optional[str] = None, store: SqlTableStore = Depends(get_table_store)):
    """
    List the events of a company.
    Example: /api/events?company=Acme
    """
    if not company:
        return JSONResponse(status_code=400, content={"error": "Company name is required"})

    try:
        events = list_events(store, company)
    except RegistrationError as rej:
        logger.warning(f"Event listing rejected for {company}: {rej.message}")
        return JSONResponse(status_code=rej.status_code, content={"error": rej.message})
    except Exception as e:
        logger.error(f"Error fetching events for {company}: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch events"})

    return EventListResponse(events=events)
