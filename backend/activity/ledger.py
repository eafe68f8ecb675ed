# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Activity ledger – the append-only audit trail of vault operations.

Writes
------
``record`` is the second half of every vault operation's dual write.  It runs
*after* the entry mutation has been committed, in its own commit, and is
best-effort: a failure is rolled back and logged, never raised.  A crash
between the two commits therefore leaves a mutation unaudited.

Reads
-----
``page`` and ``stats`` back the /activity endpoints.  Rows are never updated
or deleted.
"""

import math
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.logger import logger
from models.activity_log import ACTIONS, ActivityLog
from activity.schemas import (
    ActionCount,
    ActivityLogPage,
    ActivityLogRow,
    ActivityStats,
    Pagination,
)

RECENT_LIMIT = 10


class ActivityLedger:
    def __init__(self, db: Session):
        self._db = db

    # -- writes ------------------------------------------------------------

    def record(self, admin_name: str, action: str, entry_name: str, details: str) -> bool:
        """
        Append one audit row.  Returns False (after logging the traceback)
        if the row could not be stored.
        """
        if action not in ACTIONS:
            raise ValueError(f"Unknown activity action: {action!r}")

        try:
            self._db.add(ActivityLog(
                admin_name=admin_name,
                action=action,
                entry_name=entry_name,
                details=details,
            ))
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            logger.exception(
                "Activity log write failed | admin=%s action=%s entry=%s",
                admin_name, action, entry_name,
            )
            return False
        return True

    # -- reads -------------------------------------------------------------

    def _newest_first(self, admin_name: Optional[str] = None):
        q = self._db.query(ActivityLog)
        if admin_name is not None:
            q = q.filter(ActivityLog.admin_name == admin_name)
        return q.order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())

    def page(self, page: int, limit: int, admin_name: Optional[str] = None) -> ActivityLogPage:
        """One page of logs, newest-first, optionally for a single admin."""
        q = self._newest_first(admin_name)
        total = q.order_by(None).count()
        rows = q.offset((page - 1) * limit).limit(limit).all()
        total_pages = math.ceil(total / limit)

        return ActivityLogPage(
            logs=[ActivityLogRow.model_validate(r) for r in rows],
            pagination=Pagination(
                current_page=page,
                total_pages=total_pages,
                total_logs=total,
                has_next_page=page < total_pages,
                has_prev_page=page > 1,
            ),
        )

    def stats(self) -> ActivityStats:
        """Per-action counts plus the most recent entries."""
        counts = (
            self._db.query(ActivityLog.action, func.count(ActivityLog.id))
            .group_by(ActivityLog.action)
            .order_by(ActivityLog.action)
            .all()
        )
        recent = self._newest_first().limit(RECENT_LIMIT).all()

        return ActivityStats(
            stats=[ActionCount(action=action, count=n) for action, n in counts],
            total_activities=sum(n for _, n in counts),
            recent_activities=[ActivityLogRow.model_validate(r) for r in recent],
        )
