"""Customer ORM — the single persisted record type.

Invariants:
    - id is an auto-incrementing integer primary key, never reassigned
    - first_name, last_name, city are non-null text columns; constraints enforced by
      core.validate_customer before every write
    - No timestamp columns

Design Decisions:
    - Validation lives in core, not in @validates hooks: one pure rule set shared
      by insert and update, testable without a session
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from customer_api.db.base import Base


class Customer(Base):
    """A customer row."""
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(Text, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "city": self.city,
        }

    def __repr__(self) -> str:
        return f"<Customer id={self.id} {self.first_name} {self.last_name}>"
