from typing import Sequence

# Positions inside a registration row
PHONE_INDEX = 1
EMAIL_INDEX = 2


def is_duplicate(table_rows: Sequence[Sequence[str]], email: str, phone: str) -> bool:
    """True when any data row already holds this email or this phone (exact match)"""
    for row in table_rows[1:]:
        if len(row) > EMAIL_INDEX and row[EMAIL_INDEX] == email:
            return True
        if len(row) > PHONE_INDEX and row[PHONE_INDEX] == phone:
            return True
    return False
