import logging
from datetime import datetime, timezone
from typing import Callable, List

from eventdesk.schemas import RegistrationRequest
from eventdesk.services.table_store import TableStore

logger = logging.getLogger(__name__)

REGISTRATION_HEADER = [
    "Name",
    "Phone",
    "Email",
    "Gender",
    "College",
    "Status",
    "NationalID",
    "RegistrationDate",
    "Image",
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix"""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_row(fields: RegistrationRequest, registration_date: str) -> List[str]:
    return [
        fields.name,
        fields.phone,
        fields.email,
        fields.gender,
        fields.college,
        fields.status,
        fields.nationalId,
        registration_date,
        "",  # image reference, not collected yet
    ]


def append_registration(
    store: TableStore,
    company_name: str,
    event_name: str,
    fields: RegistrationRequest,
    clock: Callable[[], datetime] = _utcnow,
) -> str:
    """Append one registration row and return its server-side timestamp"""
    registration_date = iso_timestamp(clock())

    logger.info(f"Adding registration to table: company={company_name}, "
                f"event={event_name}, name={fields.name}, email={fields.email}")

    store.append_row(company_name, event_name, build_row(fields, registration_date))
    return registration_date
