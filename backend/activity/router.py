# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Activity endpoints – read-only views of the audit trail.

Every endpoint requires a valid JWT.  There is no write endpoint:
rows are only ever created by the vault service.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from core.security import get_current_admin
from models.user import User
from activity.ledger import ActivityLedger
from activity.schemas import ActivityLogPage, ActivityStats

router = APIRouter(prefix="/activity", tags=["activity"])


# ---------------------------------------------------------------------------
# GET /activity  – every admin, paginated
# ---------------------------------------------------------------------------


@router.get("", response_model=ActivityLogPage)
def list_activity(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=1000),
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """Audit rows newest-first, ``limit`` per page (default 50, cap 1000)."""
    return ActivityLedger(db).page(page, limit)


# ---------------------------------------------------------------------------
# GET /activity/stats  – counts per action + latest rows
# ---------------------------------------------------------------------------


@router.get("/stats", response_model=ActivityStats)
def activity_stats(
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    return ActivityLedger(db).stats()


# ---------------------------------------------------------------------------
# GET /activity/user/{admin_name}  – one admin, paginated
# ---------------------------------------------------------------------------


@router.get("/user/{admin_name}", response_model=ActivityLogPage)
def list_activity_for_admin(
    admin_name: str,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=1000),
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """Same shape as GET /activity, restricted to rows by *admin_name*."""
    return ActivityLedger(db).page(page, limit, admin_name=admin_name)
