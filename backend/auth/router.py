# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Auth endpoints – login, registration, current-admin profile.

Security notes
--------------
* Login returns the *same* error message whether the email doesn't exist or
  the password is wrong.  This prevents user-enumeration attacks.
* Registration enforces the minimum password policy below; the stored value
  is a pbkdf2_sha256 hash, never the password itself.
"""

import re
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from core.errors import Conflict, InvalidCredentials, ValidationError
from core.logger import logger
from core.security import (
    verify_password,
    hash_password,
    issue_token_for,
    get_current_admin,
)
from models.user import User
from auth.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserInfoResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"])

# Generic message used for both "no such email" and "wrong password"
_LOGIN_FAIL = "Invalid email or password"


def _validate_new_password(pw: str) -> str | None:
    """
    Return an error string if the password does not meet the minimum policy,
    or None if it is acceptable.

    Policy: >= 8 chars, at least one uppercase, one lowercase, one digit.
    """
    if len(pw) < 8:
        return "Password must be at least 8 characters"
    if not re.search(r"[A-Z]", pw):
        return "Password must contain at least one uppercase letter"
    if not re.search(r"[a-z]", pw):
        return "Password must contain at least one lowercase letter"
    if not re.search(r"[0-9]", pw):
        return "Password must contain at least one digit"
    return None


# ---------------------------------------------------------------------------
# POST /auth/login
# ---------------------------------------------------------------------------


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    """Authenticate and return the admin profile plus a signed JWT."""
    user = db.query(User).filter(User.email == body.email.strip().lower()).first()

    # Unified failure path – no information leaks about whether the email exists
    if not user or not verify_password(body.password, user.password_hash):
        logger.warning("Failed login for %s", body.email)
        raise InvalidCredentials(_LOGIN_FAIL)

    if not user.is_active:
        raise InvalidCredentials("Account disabled")

    user.last_login = datetime.now(timezone.utc)
    db.commit()
    db.refresh(user)

    return AuthResponse(user=UserInfoResponse.model_validate(user), token=issue_token_for(user))


# ---------------------------------------------------------------------------
# POST /auth/register
# ---------------------------------------------------------------------------


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    """Create an admin account and sign it in straight away."""
    name = body.name.strip()
    email = body.email.strip().lower()
    if not name or not email:
        raise ValidationError("Name and email are required")

    err = _validate_new_password(body.password)
    if err:
        raise ValidationError(err)

    # Uniqueness check
    if db.query(User).filter(User.email == email).first():
        raise Conflict("Email already exists")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(body.password),
        role="admin",
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Admin %s registered (id=%d)", user.email, user.id)

    return AuthResponse(user=UserInfoResponse.model_validate(user), token=issue_token_for(user))


# ---------------------------------------------------------------------------
# GET /auth/profile
# ---------------------------------------------------------------------------


@router.get("/profile", response_model=UserInfoResponse)
def profile(current_admin: User = Depends(get_current_admin)):
    """Return the authenticated admin's public profile (no secrets)."""
    return current_admin
