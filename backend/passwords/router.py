# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Password-entry endpoints – search, CRUD and the tag list.

Invariants enforced by every handler
------------------------------------
* JWT is required on every endpoint.  ``get_vault_service`` depends on
  ``get_current_admin``, so an unauthenticated request is rejected before a
  service exists.
* Handlers contain no business logic: each one calls exactly one
  VaultService method, which owns validation, persistence and the audit row.
* Entries are shared by the whole team; there is no per-admin ownership.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from passwords.query import EntryFilter
from passwords.service import VaultService, get_vault_service
from passwords.schemas import (
    DeleteResponse,
    PasswordEntryCreate,
    PasswordEntryResponse,
    PasswordEntryUpdate,
)

router = APIRouter(prefix="/passwords", tags=["passwords"])


# ---------------------------------------------------------------------------
# GET /passwords  – search / filter
# ---------------------------------------------------------------------------


@router.get("", response_model=List[PasswordEntryResponse])
def list_entries(
    search: Optional[str] = Query(None, description="Case-insensitive substring"),
    tags: Optional[str] = Query(None, description="Comma-separated, matches any"),
    vault: VaultService = Depends(get_vault_service),
):
    """Return matching entries newest-first.  Records a ``view`` activity."""
    return vault.list_entries(EntryFilter.from_query(search, tags))


# ---------------------------------------------------------------------------
# GET /passwords/tags  – every tag in use
# ---------------------------------------------------------------------------
# Declared before /{entry_id} so "tags" is not taken for an id.


@router.get("/tags", response_model=List[str])
def list_tags(vault: VaultService = Depends(get_vault_service)):
    """Sorted, de-duplicated union of all entries' tags."""
    return vault.list_tags()


# ---------------------------------------------------------------------------
# GET /passwords/{id}
# ---------------------------------------------------------------------------


@router.get("/{entry_id}", response_model=PasswordEntryResponse)
def get_entry(entry_id: str, vault: VaultService = Depends(get_vault_service)):
    return vault.get_entry(entry_id)


# ---------------------------------------------------------------------------
# POST /passwords
# ---------------------------------------------------------------------------


@router.post("", response_model=PasswordEntryResponse, status_code=status.HTTP_201_CREATED)
def create_entry(
    body: PasswordEntryCreate,
    vault: VaultService = Depends(get_vault_service),
):
    """
    Persist a new entry.  websiteName, clientName, email and password are
    required; a 400 lists every one that is missing.
    """
    return vault.create_entry(body)


# ---------------------------------------------------------------------------
# PUT /passwords/{id}  – partial update
# ---------------------------------------------------------------------------


@router.put("/{entry_id}", response_model=PasswordEntryResponse)
def update_entry(
    entry_id: str,
    body: PasswordEntryUpdate,
    vault: VaultService = Depends(get_vault_service),
):
    """Only the fields present in the body are changed."""
    return vault.update_entry(entry_id, body)


# ---------------------------------------------------------------------------
# DELETE /passwords/{id}
# ---------------------------------------------------------------------------


@router.delete("/{entry_id}", response_model=DeleteResponse)
def delete_entry(entry_id: str, vault: VaultService = Depends(get_vault_service)):
    """Permanently delete an entry.  Its past activity rows are kept."""
    vault.delete_entry(entry_id)
    return DeleteResponse(message="Password entry deleted successfully")
