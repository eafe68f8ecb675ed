# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Bootstrap script – creates the first admin and, optionally, demo entries.

Run once after the initial migration:
    python bin/seed_admin.py
    python bin/seed_admin.py --with-samples

The script reads FIRST_ADMIN_NAME, FIRST_ADMIN_EMAIL and FIRST_ADMIN_PASSWORD
from etc/app.conf.  After the row is inserted those values are no longer used
by the application.

Sample entries are created through VaultService, so each one gets its ``add``
row in the activity ledger like any entry created over the API.
"""

import sys
import os

# ---------------------------------------------------------------------------
# Path setup so backend modules are importable
# ---------------------------------------------------------------------------
# bin/seed_admin.py  →  ../  →  project root
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_BACKEND_DIR  = os.path.join(_PROJECT_ROOT, "backend")
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

from core.config import settings                      # noqa: E402
from core.security import hash_password               # noqa: E402
from database import SessionLocal                     # noqa: E402
from models.password_entry import PasswordEntry       # noqa: E402
from models.user import User                          # noqa: E402
from passwords.schemas import PasswordEntryCreate     # noqa: E402
from passwords.service import VaultService            # noqa: E402

SAMPLE_ENTRIES = [
    {
        "websiteName": "Google Ads Manager",
        "clientName": "TechCorp Solutions",
        "email": "agency@trimarketing.com",
        "password": "SecurePass123!",
        "notes": "Main account for all client campaigns",
        "tags": ["Marketing", "Advertising"],
    },
    {
        "websiteName": "Facebook Business Manager",
        "clientName": "FreshBrand Co.",
        "email": "social@trimarketing.com",
        "password": "FBManager2024$",
        "notes": "Access to all client Facebook pages and ad accounts",
        "tags": ["Social Media", "Marketing"],
    },
    {
        "websiteName": "Mailchimp",
        "clientName": "Local Restaurant Group",
        "email": "email@trimarketing.com",
        "password": "EmailCamp2024!",
        "notes": "Email marketing campaigns for all clients",
        "tags": ["Email Marketing", "Marketing"],
    },
    {
        "websiteName": "LinkedIn Ads",
        "clientName": "B2B Solutions Inc",
        "email": "linkedin@trimarketing.com",
        "password": "LinkedInAds2024!",
        "notes": "B2B advertising campaigns",
        "tags": ["B2B", "LinkedIn", "Marketing"],
    },
    {
        "websiteName": "Instagram Business",
        "clientName": "Fashion Boutique",
        "email": "instagram@trimarketing.com",
        "password": "InstaFashion2024$",
        "notes": "Instagram business account for fashion client",
        "tags": ["Social Media", "Instagram", "Fashion"],
    },
]


def seed_admin(db) -> User | None:
    if not settings.first_admin_email or not settings.first_admin_password:
        print("[seed_admin] FIRST_ADMIN_EMAIL or FIRST_ADMIN_PASSWORD not set in etc/app.conf – nothing to do.")
        return None

    email = settings.first_admin_email.strip().lower()
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        print(f"[seed_admin] Admin '{email}' already exists – skipping.")
        return existing

    admin = User(
        name=settings.first_admin_name or email.split("@")[0],
        email=email,
        password_hash=hash_password(settings.first_admin_password),
        role="admin",
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    print(f"[seed_admin] Admin '{email}' created successfully.")
    return admin


def seed_samples(db, admin: User) -> int:
    """Create the demo entries that are not already present (by website name)."""
    vault = VaultService(db, admin)
    existing = {name for (name,) in db.query(PasswordEntry.website_name).all()}

    created = 0
    for sample in SAMPLE_ENTRIES:
        if sample["websiteName"] in existing:
            continue
        vault.create_entry(PasswordEntryCreate.model_validate(sample))
        created += 1
    return created


def main(argv: list[str]) -> None:
    db = SessionLocal()
    try:
        admin = seed_admin(db)
        if admin is not None and "--with-samples" in argv:
            n = seed_samples(db, admin)
            print(f"[seed_admin] {n} sample entr{'y' if n == 1 else 'ies'} created.")
    finally:
        db.close()


if __name__ == "__main__":
    main(sys.argv[1:])
