import logging
import re
import threading
from contextlib import nullcontext
from typing import Dict, Tuple
from urllib.parse import unquote

from eventdesk.core.config import settings
from eventdesk.core.exceptions import (
    AlreadyRegistered,
    CompanyDisabled,
    CompanyNotFound,
    EventDataNotFound,
    EventDisabled,
    ProcessingError,
    RegistrationError,
    ValidationError,
)
from eventdesk.schemas import RegistrationConfirmation, RegistrationRequest
from eventdesk.services.duplicates import is_duplicate
from eventdesk.services.event_resolver import resolve_event
from eventdesk.services.gates import check_company_enabled, check_event_enabled
from eventdesk.services.registration_writer import append_registration
from eventdesk.services.table_store import TableStore

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\d{10,15}$")

REQUIRED_FIELDS = (
    "companyName",
    "eventName",
    "name",
    "phone",
    "email",
    "gender",
    "college",
    "status",
    "nationalId",
)


class EventWriteLocks:
    """One lock per (company, event), held across the duplicate check and the append"""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Tuple[str, str], threading.Lock] = {}

    def for_event(self, company_name: str, event_name: str) -> threading.Lock:
        key = (company_name, event_name)
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock


event_write_locks = EventWriteLocks()


def decode_request(request: RegistrationRequest) -> RegistrationRequest:
    """Return a copy with companyName and eventName URL-decoded"""
    return request.model_copy(update={
        "companyName": unquote(request.companyName or ""),
        "eventName": unquote(request.eventName or ""),
    })


def validate_request(request: RegistrationRequest) -> None:
    missing = [f for f in REQUIRED_FIELDS if not getattr(request, f)]
    if missing:
        logger.warning(f"Validation failed - missing fields: {missing}")
        raise ValidationError("All fields are required")

    if not EMAIL_RE.match(request.email):
        raise ValidationError("Invalid email format")

    if not PHONE_RE.match(request.phone):
        raise ValidationError("Invalid phone number format")


class RegistrationService:
    def __init__(self, store: TableStore, locks: EventWriteLocks = event_write_locks):
        self.store = store
        self.locks = locks

    def register(self, request: RegistrationRequest) -> RegistrationConfirmation:
        """
        Run the intake pipeline for one submission.

        Steps run strictly in order and the first failure stops the rest.
        Known outcomes are raised as RegistrationError subclasses; unexpected
        faults become a ProcessingError with a fixed per-stage message.
        """
        request = decode_request(request)
        company_name, requested_event = request.companyName, request.eventName

        logger.info(f"Registration request received: company={company_name}, "
                    f"event={requested_event}, name={request.name}, email={request.email}")

        validate_request(request)

        try:
            event_name = self._check_company(company_name, requested_event)
        except RegistrationError:
            raise
        except Exception as e:
            logger.error(f"Error checking company {company_name}: {e}", exc_info=True)
            raise ProcessingError("Failed to check company")

        try:
            return self._process(company_name, event_name, request)
        except RegistrationError:
            raise
        except Exception as e:
            logger.error(f"Error processing registration for {event_name}: {e}", exc_info=True)
            raise ProcessingError("Failed to process registration")

    def _check_company(self, company_name: str, requested_event: str) -> str:
        sheet_rows = self.store.read_table(company_name)
        if not sheet_rows:
            logger.warning(f"Company sheet {company_name} is empty or does not exist")
            raise CompanyNotFound(company_name)

        if not check_company_enabled(self.store, company_name):
            raise CompanyDisabled(company_name)

        return resolve_event(company_name, sheet_rows, requested_event)

    def _process(self, company_name: str, event_name: str, request: RegistrationRequest) -> RegistrationConfirmation:
        table_rows = self.store.read_table(company_name, event_name)
        if not table_rows:
            logger.warning(f"Table data empty for event {event_name} in company {company_name}")
            raise EventDataNotFound(company_name, event_name)

        if not check_event_enabled(table_rows, event_name):
            raise EventDisabled(company_name, event_name)

        lock = (
            self.locks.for_event(company_name, event_name)
            if settings.SERIALIZE_EVENT_WRITES
            else nullcontext()
        )
        with lock:
            # Re-read under the lock so a write that finished while we waited is seen
            if settings.SERIALIZE_EVENT_WRITES:
                table_rows = self.store.read_table(company_name, event_name)

            if is_duplicate(table_rows, request.email, request.phone):
                logger.warning(f"Duplicate registration for {event_name}: {request.email} / {request.phone}")
                raise AlreadyRegistered(event_name)

            registration_date = append_registration(self.store, company_name, event_name, request)

        logger.info(f"✅ Registration successful: {request.name} ({request.email}) for {event_name}")

        return RegistrationConfirmation(
            name=request.name,
            email=request.email,
            eventName=event_name,
            registrationDate=registration_date,
        )
