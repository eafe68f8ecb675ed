# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Central security module.  Admin password hashing, access tokens and the
auth guard live here.  No other module should touch raw crypto directly.

Responsibilities
----------------
1. Admin login password hashing / verification   (passlib pbkdf2_sha256)
2. JWT creation / decoding                        (PyJWT / HS256)
3. FastAPI dependency guard                       (get_current_admin)

Vault entry passwords are NOT handled here: they are stored as entered (see
DESIGN.md, open questions).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt as _jwt        # PyJWT
from passlib.hash import pbkdf2_sha256 as _pbkdf2  # pure Python, no binary deps
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from core.config import settings
from core.errors import Unauthenticated
from database import get_db

# ---------------------------------------------------------------------------
# 1.  pbkdf2_sha256 – admin password hashing
# ---------------------------------------------------------------------------
# The salt is embedded inside the passlib hash string, so a single column is
# enough.  600 000 rounds matches the passlib 2024 default.
# ---------------------------------------------------------------------------

_HASHER = _pbkdf2.using(rounds=600_000)


def hash_password(plain: str) -> str:
    """Return a full passlib hash string, e.g. ``$pbkdf2-sha256$...``."""
    return _HASHER.hash(plain)


def verify_password(plain: str, stored_hash: str) -> bool:
    """
    Constant-time verification of a plaintext password against a
    pbkdf2_sha256 hash produced by :func:`hash_password`.
    """
    return _pbkdf2.verify(plain, stored_hash)


# ---------------------------------------------------------------------------
# 2.  JWT – access tokens
# ---------------------------------------------------------------------------


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a JWT with HS256.

    *data* should contain at minimum: sub (email), user_id, name.
    An ``exp`` claim is added automatically.
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode["exp"] = expire
    return _jwt.encode(to_encode, settings.secret_key, algorithm="HS256")


def decode_access_token(token: str) -> dict:
    """
    Decode and verify a JWT.  Raises :class:`Unauthenticated` on any failure
    (expired, bad signature, malformed, missing ``user_id`` claim).
    """
    try:
        payload = _jwt.decode(token, settings.secret_key, algorithms=["HS256"])
    except _jwt.ExpiredSignatureError:
        raise Unauthenticated("Token expired")
    except _jwt.InvalidTokenError:
        raise Unauthenticated("Invalid token")

    if not isinstance(payload.get("user_id"), int):
        raise Unauthenticated("Invalid token")
    return payload


def issue_token_for(user) -> str:
    """Access token for a freshly authenticated :class:`models.user.User`."""
    return create_access_token(
        {"sub": user.email, "user_id": user.id, "name": user.name}
    )


# ---------------------------------------------------------------------------
# 3.  FastAPI dependency guard
# ---------------------------------------------------------------------------

# The tokenUrl here is only used by the auto-generated OpenAPI docs;
# the actual login endpoint is POST /auth/login (JSON body).
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_current_admin(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
):
    """
    Dependency: decode the JWT, load the User row, verify the account is
    active.  Returns the User ORM instance – the acting admin identity.

    Runs before any handler body, so a rejected request never reaches the
    vault service or the activity ledger.
    """
    payload = decode_access_token(token)

    # Lazy import to avoid circular dependency at module load time
    from models.user import User  # noqa: E402

    user = db.query(User).filter(User.id == payload["user_id"]).first()
    if not user or not user.is_active:
        raise Unauthenticated("User not found or inactive")
    return user
