"""
Location Model

Represents a location in the database.

The table and column names ("Locations", "ID", "Name", "Code", "Active")
are part of the persisted schema and are kept exactly; Python code uses
the lowercase attribute names.
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Location(Base):
    """
    Location model.

    Table: Locations

    Rows are created outside the API (migrations, seed scripts, other
    systems). The API only reads them.

    Example:
        location = Location(name="Denver", code="DEN", active=True)
    """

    __tablename__ = "Locations"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # Identity is generated by the database on insert
    id: Mapped[int] = mapped_column(
        "ID",
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    name: Mapped[str] = mapped_column(
        "Name",
        String(50),
        nullable=False,
        comment="Display name (e.g., 'Denver')"
    )

    code: Mapped[str] = mapped_column(
        "Code",
        String(5),
        nullable=False,
        comment="Short location code (e.g., 'DEN')"
    )

    active: Mapped[bool] = mapped_column(
        "Active",
        Boolean,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Location(id={self.id}, code='{self.code}', name='{self.name}')"
