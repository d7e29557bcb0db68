# tests/services/test_duplicates.py

from eventdesk.services.duplicates import is_duplicate

TABLE = [
    ["Name", "Phone", "Email"],
    ["Mona", "01011111111", "a@b.com"],
    ["Ali", "01022222222", "ali@example.com"],
]


def test_same_email_is_duplicate():
    assert is_duplicate(TABLE, "a@b.com", "01099999999") is True


def test_same_phone_is_duplicate():
    assert is_duplicate(TABLE, "new@example.com", "01022222222") is True


def test_unseen_contact_is_not_duplicate():
    assert is_duplicate(TABLE, "new@example.com", "01099999999") is False


def test_header_row_is_ignored():
    assert is_duplicate(TABLE, "Email", "Phone") is False


def test_comparison_is_exact():
    assert is_duplicate(TABLE, "A@B.com", "01099999999") is False
    assert is_duplicate(TABLE, " a@b.com", "01099999999") is False


def test_short_rows_do_not_break_the_scan():
    table = [["Name", "Phone", "Email"], ["Only name"], ["Mona", "01011111111"]]
    assert is_duplicate(table, "x@y.com", "01011111111") is True
