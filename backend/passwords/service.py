# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Vault service – the one place where password entries are read or changed.

Every operation is a two-step sequence:

1. the primary read / mutation against ``password_entries``, committed on
   its own;
2. one ``activity_logs`` row describing it, written through
   :class:`ActivityLedger` (best-effort, see ``activity/ledger.py``).

Validation and not-found checks run before step 1, so a rejected request
leaves no trace in either table.  A failure inside step 1 propagates and
nothing is audited.  Results are snapshotted into response models between
the two steps; whatever happens to the audit write, the caller gets them.

A service instance is built per request (``get_vault_service``) around that
request's session and the acting admin.  Nothing is shared across requests.
"""

import re
from typing import List

from fastapi import Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from activity.ledger import ActivityLedger
from core.errors import NotFound, ValidationError
from core.logger import logger
from core.security import get_current_admin
from database import get_db
from models.password_entry import PasswordEntry, PasswordEntryTag
from models.user import User
from passwords.query import EntryFilter, apply_filter
from passwords.schemas import (
    REQUIRED_FIELDS,
    PasswordEntryCreate,
    PasswordEntryResponse,
    PasswordEntryUpdate,
)

_EMAIL_RE = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}$")
EMAIL_MAX_LENGTH = 254

# Fields trimmed before storage.  The password is kept exactly as typed.
_TRIMMED = {"website_name", "client_name", "email", "notes"}

_LABELS = {
    "website_name": "websiteName",
    "client_name": "clientName",
    "email": "email",
    "password": "password",
}

LIST_SUBJECT = "Password entries"


def _clean(fields: dict) -> dict:
    return {
        k: (v.strip() if k in _TRIMMED and isinstance(v, str) else v)
        for k, v in fields.items()
    }


def _check_email(email: str) -> None:
    if len(email) > EMAIL_MAX_LENGTH or not _EMAIL_RE.match(email):
        raise ValidationError("Please enter a valid email")


class VaultService:
    def __init__(self, db: Session, admin: User):
        self._db = db
        self._admin = admin
        self._ledger = ActivityLedger(db)

    # -- helpers -------------------------------------------------------------

    def _load(self, entry_id) -> PasswordEntry:
        """Resolve *entry_id* (path segment) or raise NotFound."""
        try:
            pk = int(entry_id)
        except (TypeError, ValueError):
            raise NotFound("Password entry not found")

        entry = self._db.query(PasswordEntry).filter(PasswordEntry.id == pk).first()
        if not entry:
            raise NotFound("Password entry not found")
        return entry

    def _audit(self, action: str, entry_name: str, details: str) -> None:
        self._ledger.record(self._admin.name, action, entry_name, details)

    # -- reads ---------------------------------------------------------------

    def list_entries(self, flt: EntryFilter = EntryFilter()) -> List[PasswordEntryResponse]:
        """Matching entries, newest-first.  Audited even when nothing matches."""
        rows = apply_filter(self._db.query(PasswordEntry), flt).all()
        result = [PasswordEntryResponse.model_validate(r) for r in rows]

        self._audit("view", LIST_SUBJECT, "Viewed password entries list")
        return result

    def get_entry(self, entry_id) -> PasswordEntryResponse:
        entry = self._load(entry_id)
        result = PasswordEntryResponse.model_validate(entry)

        self._audit(
            "view", result.website_name,
            f"Viewed password entry for {result.website_name}",
        )
        return result

    def list_tags(self) -> List[str]:
        """Sorted union of every entry's tags.  Not audited."""
        labels = self._db.query(PasswordEntryTag.tag).distinct().all()
        return sorted({label for (label,) in labels})

    # -- writes --------------------------------------------------------------

    def create_entry(self, body: PasswordEntryCreate) -> PasswordEntryResponse:
        fields = _clean(body.model_dump())

        missing = [_LABELS[f] for f in REQUIRED_FIELDS if not fields.get(f)]
        if missing:
            raise ValidationError(
                "Missing required fields: " + ", ".join(missing)
            )
        _check_email(fields["email"])

        entry = PasswordEntry(
            website_name=fields["website_name"],
            client_name=fields["client_name"],
            email=fields["email"],
            password=fields["password"],
            notes=fields["notes"] or "",
            tags=fields["tags"] or [],
            created_by=self._admin.name,
        )
        self._db.add(entry)
        self._db.commit()
        self._db.refresh(entry)
        result = PasswordEntryResponse.model_validate(entry)
        logger.info("Entry %d created by %s", result.id, self._admin.name)

        self._audit(
            "add", result.website_name,
            f"Added new password entry for {result.website_name}",
        )
        return result

    def update_entry(self, entry_id, body: PasswordEntryUpdate) -> PasswordEntryResponse:
        """
        Apply only the fields present in *body*.  The audit row names the
        entry as it was *before* the update, so a rename is logged under the
        old name.
        """
        entry = self._load(entry_id)
        original_name = entry.website_name

        changes = _clean(body.model_dump(exclude_unset=True))
        blank = [_LABELS[f] for f in REQUIRED_FIELDS if f in changes and not changes[f]]
        if blank:
            raise ValidationError("Fields cannot be empty: " + ", ".join(blank))
        if "email" in changes:
            _check_email(changes["email"])

        for field in REQUIRED_FIELDS:
            if field in changes:
                setattr(entry, field, changes[field])
        if "notes" in changes:
            entry.notes = changes["notes"] or ""
        if "tags" in changes:
            entry.tags = changes["tags"] or []
        # onupdate only fires for column changes, not tag-only edits
        entry.updated_at = func.now()

        self._db.commit()
        self._db.refresh(entry)
        result = PasswordEntryResponse.model_validate(entry)
        logger.info("Entry %d updated by %s", result.id, self._admin.name)

        self._audit(
            "edit", original_name,
            f"Updated password entry for {original_name}",
        )
        return result

    def delete_entry(self, entry_id) -> None:
        entry = self._load(entry_id)
        pk, name = entry.id, entry.website_name

        self._db.delete(entry)
        self._db.commit()
        logger.info("Entry %d deleted by %s", pk, self._admin.name)

        self._audit("delete", name, f"Deleted password entry for {name}")


def get_vault_service(
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
) -> VaultService:
    """FastAPI dependency: a VaultService bound to this request."""
    return VaultService(db, admin)
