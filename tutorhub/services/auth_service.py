# tutorhub/services/auth_service.py
"""
Registration and login.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tutorhub import models
from tutorhub.crud import user as user_crud
from tutorhub.errors import AuthError, ValidationError
from tutorhub.utils.security import (
    create_user_token,
    dummy_verify,
    get_password_hash,
    verify_password,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(
    db: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: models.Role,
    subjects: Optional[List[str]] = None,
    bio: Optional[str] = None,
) -> Tuple[models.User, str]:
    """
    Create an account and issue its first token.

    Returns:
        (user, token)

    Raises:
        ValidationError: missing fields or email already registered
    """
    if not name or not name.strip() or not email or not password:
        raise ValidationError("Name, email and password are required")
    try:
        role = models.Role(role)
    except ValueError:
        raise ValidationError("Role must be one of: student, tutor")

    normalized_email = normalize_email(email)
    if user_crud.get_user_by_email(db, normalized_email):
        raise ValidationError("Email already registered")

    try:
        user = user_crud.create_user(
            db,
            name=name.strip(),
            email=normalized_email,
            password_hash=get_password_hash(password),
            role=role,
            subjects=subjects,
            bio=bio,
        )
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise ValidationError("Email already registered")
    except Exception:
        db.rollback()
        raise

    db.refresh(user)
    logger.info("Registered %s user %s", user.role.value, user.id)
    return user, create_user_token(user)


def login_user(db: Session, *, email: str, password: str) -> Tuple[models.User, str]:
    """
    Verify credentials and issue a token.

    Unknown email and wrong password raise the same AuthError.
    """
    user = user_crud.get_user_by_email(db, normalize_email(email or ""))
    if user is None:
        dummy_verify()
        logger.info("Login rejected: unknown email")
        raise AuthError(INVALID_CREDENTIALS)

    if not verify_password(password or "", user.password_hash):
        logger.info("Login rejected for user %s", user.id)
        raise AuthError(INVALID_CREDENTIALS)

    return user, create_user_token(user)
