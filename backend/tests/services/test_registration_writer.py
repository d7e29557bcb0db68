# tests/services/test_registration_writer.py

from datetime import datetime, timedelta, timezone

import pytest

from eventdesk.schemas import RegistrationRequest
from eventdesk.services.registration_writer import append_registration, iso_timestamp

FIELDS = RegistrationRequest(
    companyName="Acme",
    eventName="summer fest ",
    name="Mona Ali",
    phone="01012345678",
    email="mona@example.com",
    gender="female",
    college="Engineering",
    status="graduate",
    nationalId="29501011234567",
    age=24,
    university="Cairo University",
)


def test_appends_fixed_order_row_with_server_timestamp(mocker):
    store = mocker.Mock()
    fixed = datetime(2024, 7, 1, 9, 30, 15, 123456, tzinfo=timezone.utc)

    registration_date = append_registration(store, "Acme", "summer fest ", FIELDS, clock=lambda: fixed)

    assert registration_date == "2024-07-01T09:30:15.123Z"
    store.append_row.assert_called_once_with("Acme", "summer fest ", [
        "Mona Ali",
        "01012345678",
        "mona@example.com",
        "female",
        "Engineering",
        "graduate",
        "29501011234567",
        "2024-07-01T09:30:15.123Z",
        "",
    ])


def test_default_clock_is_current_utc_time(mocker):
    store = mocker.Mock()
    before = datetime.now(timezone.utc) - timedelta(milliseconds=1)

    registration_date = append_registration(store, "Acme", "summer fest ", FIELDS)

    after = datetime.now(timezone.utc)
    stamped = datetime.fromisoformat(registration_date.replace("Z", "+00:00"))
    assert before <= stamped <= after


def test_store_failure_propagates(mocker):
    store = mocker.Mock()
    store.append_row.side_effect = RuntimeError("sheet unavailable")

    with pytest.raises(RuntimeError, match="sheet unavailable"):
        append_registration(store, "Acme", "summer fest ", FIELDS)


def test_iso_timestamp_converts_to_utc():
    cairo = timezone(timedelta(hours=2))
    assert iso_timestamp(datetime(2024, 7, 1, 11, 0, 0, tzinfo=cairo)) == "2024-07-01T09:00:00.000Z"
