import logging
from typing import List, Optional, Protocol, Sequence

from sqlalchemy.orm import Session

from eventdesk.core.exceptions import TableNotFoundError
from eventdesk.models.sheet_row import SheetRow

logger = logging.getLogger(__name__)

Row = List[str]


class TableStore(Protocol):
    """Two-operation view of a tenant-partitioned spreadsheet."""

    def read_table(self, tenant: str, table_name: Optional[str] = None) -> List[Row]:
        ...

    def append_row(self, tenant: str, table_name: Optional[str], row: Sequence[str]) -> None:
        ...


class SqlTableStore:
    """
    Table store backed by a single SQL table of JSON rows.

    Reading with table_name=None returns the whole sheet in insertion order,
    marker rows included. Reading a named table returns its header and data
    rows without the marker.
    """

    def __init__(self, db: Session):
        self.db = db

    def read_table(self, tenant: str, table_name: Optional[str] = None) -> List[Row]:
        query = self.db.query(SheetRow).filter(SheetRow.sheet == tenant)
        if table_name is not None:
            query = query.filter(
                SheetRow.table_name == table_name,
                SheetRow.is_marker.is_(False),
            )
        return [list(r.cells or []) for r in query.order_by(SheetRow.id).all()]

    def append_row(self, tenant: str, table_name: Optional[str], row: Sequence[str]) -> None:
        if table_name is not None and not self._has_marker(tenant, table_name):
            raise TableNotFoundError(tenant, table_name)

        self._add(SheetRow(
            sheet=tenant,
            table_name=table_name,
            is_marker=False,
            cells=[str(c) for c in row],
        ))

    def create_table(self, tenant: str, table_name: str, header: Sequence[str]) -> None:
        """Write the marker row and the header row of a new table"""
        if self._has_marker(tenant, table_name):
            logger.info(f"Table '{table_name}' already exists in sheet '{tenant}'")
            return

        self.db.add(SheetRow(sheet=tenant, table_name=table_name, is_marker=True, cells=[table_name]))
        self._add(SheetRow(
            sheet=tenant,
            table_name=table_name,
            is_marker=False,
            cells=[str(c) for c in header],
        ))
        logger.info(f"✅ Created table '{table_name}' in sheet '{tenant}'")

    def _has_marker(self, tenant: str, table_name: str) -> bool:
        marker = (
            self.db.query(SheetRow.id)
            .filter(
                SheetRow.sheet == tenant,
                SheetRow.table_name == table_name,
                SheetRow.is_marker.is_(True),
            )
            .first()
        )
        return marker is not None

    def _add(self, row: SheetRow) -> None:
        try:
            self.db.add(row)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
