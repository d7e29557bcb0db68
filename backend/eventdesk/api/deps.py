from fastapi import Depends
from sqlalchemy.orm import Session

from eventdesk.db.session import get_db
from eventdesk.services.registration import RegistrationService
from eventdesk.services.table_store import SqlTableStore


def get_table_store(db: Session = Depends(get_db)) -> SqlTableStore:
    """Dependency for the table store bound to the request's session"""
    return SqlTableStore(db)


def get_registration_service(store: SqlTableStore = Depends(get_table_store)) -> RegistrationService:
    return RegistrationService(store)
