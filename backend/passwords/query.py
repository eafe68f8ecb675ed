# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Search / tag filtering for password entries.

Matching rules
--------------
* ``search``  – case-insensitive substring over website name, client name,
                email and every tag.  An entry matches if ANY of them does.
* ``tags``    – an entry matches if it carries at least ONE selected tag.
* Both present → an entry must satisfy both.  Neither → every entry.

Results are always newest-first (``created_at`` desc, ``id`` desc for rows
created within the same clock tick); filters never change the order.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Query

from models.password_entry import PasswordEntry, PasswordEntryTag

_LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class EntryFilter:
    search: Optional[str] = None
    tags: tuple[str, ...] = ()

    @classmethod
    def from_query(cls, search: Optional[str], tags: Optional[str]) -> "EntryFilter":
        """Build from raw query-string values, e.g. ``tags=Marketing,B2B``."""
        term = search.strip() if search else ""
        labels = tuple(
            dict.fromkeys(t.strip() for t in (tags or "").split(",") if t.strip())
        )
        return cls(search=term or None, tags=labels)

    @property
    def is_empty(self) -> bool:
        return not self.search and not self.tags


def _contains_pattern(term: str) -> str:
    """LIKE pattern for a literal substring (``%`` and ``_`` escaped)."""
    escaped = (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def apply_filter(q: Query, flt: EntryFilter) -> Query:
    """Narrow a ``db.query(PasswordEntry)`` by *flt* and apply the ordering."""
    if flt.search:
        pattern = _contains_pattern(flt.search)
        tagged = select(PasswordEntryTag.entry_id).where(
            PasswordEntryTag.tag.ilike(pattern, escape=_LIKE_ESCAPE)
        )
        q = q.filter(
            or_(
                PasswordEntry.website_name.ilike(pattern, escape=_LIKE_ESCAPE),
                PasswordEntry.client_name.ilike(pattern, escape=_LIKE_ESCAPE),
                PasswordEntry.email.ilike(pattern, escape=_LIKE_ESCAPE),
                PasswordEntry.id.in_(tagged),
            )
        )

    if flt.tags:
        selected = select(PasswordEntryTag.entry_id).where(
            PasswordEntryTag.tag.in_(flt.tags)
        )
        q = q.filter(PasswordEntry.id.in_(selected))

    return q.order_by(PasswordEntry.created_at.desc(), PasswordEntry.id.desc())
