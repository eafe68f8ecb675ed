# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""PasswordEntry ORM model and its ordered tag rows."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from database import Base


class PasswordEntry(Base):
    __tablename__ = "password_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    website_name = Column(String(255), nullable=False, index=True)
    client_name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    # Stored as entered.  Encryption at rest is an open question, not a
    # feature of this schema.
    password = Column(Text, nullable=False)
    notes = Column(Text, nullable=False)
    # Name of the admin who created the entry (not a foreign key)
    created_by = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Cascade delete: removing an entry removes its tags in the same flush.
    tag_rows = relationship(
        "PasswordEntryTag",
        order_by="PasswordEntryTag.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    @property
    def tags(self) -> list[str]:
        return [row.tag for row in self.tag_rows]

    @tags.setter
    def tags(self, labels: list[str]) -> None:
        unique = list(dict.fromkeys(labels))   # first occurrence wins
        self.tag_rows = [
            PasswordEntryTag(position=pos, tag=label)
            for pos, label in enumerate(unique)
        ]


class PasswordEntryTag(Base):
    __tablename__ = "password_entry_tags"
    # No (entry_id, tag) constraint: PasswordEntry.tags keeps labels unique.

    id = Column(Integer, primary_key=True, autoincrement=True)
    entry_id = Column(
        Integer,
        ForeignKey("password_entries.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(Integer, nullable=False)   # order as entered
    tag = Column(String(64), nullable=False, index=True)
