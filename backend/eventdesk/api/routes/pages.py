import logging
from pathlib import Path
from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from eventdesk.api.deps import get_table_store
from eventdesk.core.config import settings
from eventdesk.core.exceptions import CompanyDisabled, CompanyNotFound
from eventdesk.schemas import EventSummary
from eventdesk.services.events import list_events
from eventdesk.services.gates import DISABLED
from eventdesk.services.table_store import TableStore

router = APIRouter()
logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Skins for the single registration page. Each has a light and a dark palette;
# the toggle on the page switches between them without persisting anything.
THEMES = {
    "classic": {
        "light": {"bg": "#f3f4f6", "card": "#ffffff", "text": "#111827", "muted": "#6b7280", "accent": "#2563eb", "input": "#ffffff"},
        "dark": {"bg": "#111827", "card": "#1f2937", "text": "#f9fafb", "muted": "#9ca3af", "accent": "#3b82f6", "input": "#374151"},
    },
    "midnight": {
        "light": {"bg": "#e0e7ff", "card": "#ffffff", "text": "#1e1b4b", "muted": "#4c1d95", "accent": "#6366f1", "input": "#eef2ff"},
        "dark": {"bg": "#0a0a0f", "card": "rgba(255,255,255,0.05)", "text": "#ffffff", "muted": "#a5b4fc", "accent": "#6366f1", "input": "rgba(255,255,255,0.1)"},
    },
    "ocean": {
        "light": {"bg": "#ecfeff", "card": "#ffffff", "text": "#164e63", "muted": "#0e7490", "accent": "#0891b2", "input": "#f0fdfa"},
        "dark": {"bg": "#082f49", "card": "#0c4a6e", "text": "#e0f2fe", "muted": "#7dd3fc", "accent": "#22d3ee", "input": "#075985"},
    },
    "sunset": {
        "light": {"bg": "#fff7ed", "card": "#ffffff", "text": "#7c2d12", "muted": "#c2410c", "accent": "#ea580c", "input": "#fffbeb"},
        "dark": {"bg": "#431407", "card": "#7c2d12", "text": "#ffedd5", "muted": "#fdba74", "accent": "#fb923c", "input": "#9a3412"},
    },
    "forest": {
        "light": {"bg": "#f0fdf4", "card": "#ffffff", "text": "#14532d", "muted": "#15803d", "accent": "#16a34a", "input": "#f7fee7"},
        "dark": {"bg": "#052e16", "card": "#14532d", "text": "#dcfce7", "muted": "#86efac", "accent": "#22c55e", "input": "#166534"},
    },
}

MESSAGES = {
    "not_found": "Event not found or no longer available",
    "event_disabled": "Registration for this event is currently disabled. "
                      "Please contact the organizer for more information.",
    "company_disabled": "This company's events are currently not available. "
                        "Please contact the administrator for more information.",
}

OPEN = "open"
NOT_FOUND = "not_found"
EVENT_DISABLED = "event_disabled"
COMPANY_DISABLED = "company_disabled"


def find_event(events: List[EventSummary], requested: str) -> Optional[EventSummary]:
    """Exact id first, then trimmed case-insensitive, like the register endpoint"""
    for event in events:
        if event.id == requested:
            return event

    wanted = requested.strip().lower()
    for event in events:
        if event.id.strip().lower() == wanted:
            return event
    return None


def lookup_event(store: TableStore, company_name: str, requested: str) -> Tuple[Optional[EventSummary], str]:
    """The event shown on the page and whether it accepts registrations"""
    try:
        events = list_events(store, company_name)
    except CompanyDisabled:
        return None, COMPANY_DISABLED
    except CompanyNotFound:
        return None, NOT_FOUND
    except Exception as e:
        logger.error(f"Error fetching event details for {company_name}: {e}", exc_info=True)
        return None, NOT_FOUND

    event = find_event(events, requested)
    if event is None:
        logger.warning(f"Event not found: {requested}, available: {[e.id for e in events]}")
        return None, NOT_FOUND
    if event.companyStatus == DISABLED:
        return event, COMPANY_DISABLED
    if event.status == DISABLED:
        return event, EVENT_DISABLED
    return event, OPEN


def page_context(company_name: str, event_id: str, event: Optional[EventSummary], state: str,
                 theme: Optional[str] = None) -> dict:
    theme_name = theme if theme in THEMES else settings.DEFAULT_THEME
    return {
        "company_name": company_name,
        "requested_event": event_id,
        "event_title": event.name if event else event_id,
        "event": event,
        "state": state,
        "messages": MESSAGES,
        "palettes": THEMES.get(theme_name, THEMES["classic"]),
    }


def render_registration_page(company_name: str, event_id: str, event: Optional[EventSummary] = None,
                             state: str = OPEN, theme: Optional[str] = None) -> str:
    template = templates.get_template("register.html")
    return template.render(page_context(company_name, event_id, event, state, theme))


@router.get("/{company_name}/{event_id}/register", response_class=HTMLResponse)
def registration_page(
    request: Request,
    company_name: str,
    event_id: str,
    theme: Optional[str] = None,
    store: TableStore = Depends(get_table_store),
):
    """Serve the registration form for one company event"""
    event, state = lookup_event(store, company_name, event_id)
    return templates.TemplateResponse(
        request,
        "register.html",
        page_context(company_name, event_id, event, state, theme),
    )
