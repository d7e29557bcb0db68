# tests/services/test_table_store.py

import pytest

from eventdesk.core.exceptions import TableNotFoundError
from eventdesk.models.sheet_row import SheetRow


def test_whole_sheet_read_includes_markers_in_order(store):
    store.create_table("Acme", "Gala", ["Name", "Phone"])
    store.append_row("Acme", "Gala", ["Mona", "01012345678"])
    store.create_table("Acme", "Expo", ["Name"])

    assert store.read_table("Acme") == [
        ["Gala"],
        ["Name", "Phone"],
        ["Mona", "01012345678"],
        ["Expo"],
        ["Name"],
    ]


def test_named_table_read_excludes_marker_and_other_tables(store):
    store.create_table("Acme", "Gala", ["Name", "Phone"])
    store.create_table("Acme", "Expo", ["Name"])
    store.append_row("Acme", "Gala", ["Mona", "01012345678"])
    store.append_row("Acme", "Expo", ["Ali"])

    assert store.read_table("Acme", "Gala") == [["Name", "Phone"], ["Mona", "01012345678"]]
    assert store.read_table("Acme", "Expo") == [["Name"], ["Ali"]]


def test_tenants_are_partitioned(store):
    store.create_table("Acme", "Gala", ["Name"])
    store.create_table("Globex", "Gala", ["Name", "Email"])

    assert store.read_table("Acme", "Gala") == [["Name"]]
    assert store.read_table("Globex", "Gala") == [["Name", "Email"]]
    assert store.read_table("Initech") == []


def test_append_to_missing_table_raises(store):
    with pytest.raises(TableNotFoundError):
        store.append_row("Acme", "Nowhere", ["Mona"])


def test_append_to_sheet_without_table(store):
    store.append_row("companies", None, ["ID", "CompanyName"])
    store.append_row("companies", None, ["1", "Acme"])

    assert store.read_table("companies") == [["ID", "CompanyName"], ["1", "Acme"]]


def test_create_table_is_idempotent(store, db_session):
    store.create_table("Acme", "Gala", ["Name"])
    store.create_table("Acme", "Gala", ["Other"])

    assert db_session.query(SheetRow).filter(SheetRow.sheet == "Acme").count() == 2
    assert store.read_table("Acme", "Gala") == [["Name"]]


def test_cells_are_stored_as_strings(store):
    store.create_table("Acme", "Gala", ["Name", "Age"])
    store.append_row("Acme", "Gala", ["Mona", 24])

    assert store.read_table("Acme", "Gala")[1] == ["Mona", "24"]


def test_failed_commit_rolls_back(store, db_session, mocker):
    store.create_table("Acme", "Gala", ["Name"])
    mocker.patch.object(db_session, "commit", side_effect=RuntimeError("disk full"))
    rollback = mocker.spy(db_session, "rollback")

    with pytest.raises(RuntimeError):
        store.append_row("Acme", "Gala", ["Mona"])

    rollback.assert_called_once()
