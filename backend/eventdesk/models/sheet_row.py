from sqlalchemy import Boolean, Column, JSON, String

from eventdesk.db.base import Base, BaseModel


class SheetRow(Base, BaseModel):
    __tablename__ = "sheet_rows"

    # Tenant partition: a company name, or the companies registry
    sheet = Column(String, index=True, nullable=False)

    # Named table inside the sheet; NULL for rows written to the sheet itself
    table_name = Column(String, index=True, nullable=True)

    # Single-cell row naming the table that follows it
    is_marker = Column(Boolean, default=False, nullable=False)

    cells = Column(JSON, nullable=False, default=list)

    def __repr__(self):
        return f"<SheetRow {self.sheet}/{self.table_name} {self.cells}>"
