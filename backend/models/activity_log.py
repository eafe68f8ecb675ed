# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""ActivityLog ORM model – one immutable row per vault operation."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from sqlalchemy.sql import func

from database import Base

ACTIONS = ("add", "edit", "delete", "view")


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Acting admin's display name, copied at write time
    admin_name = Column(String(255), nullable=False, index=True)
    action = Column(Enum(*ACTIONS, name="activity_action"), nullable=False, index=True)
    # Website name of the subject when the action happened.  Deliberately not
    # a foreign key: renames and deletes must not rewrite history.
    entry_name = Column(String(255), nullable=False)
    details = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
