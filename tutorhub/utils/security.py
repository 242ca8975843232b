from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from tutorhub import models, schemas
from tutorhub.config import settings
from tutorhub.database import get_db
from tutorhub.errors import AuthorizationError, unauthenticated


# ==========================
# AUTH CONFIG
# ==========================

# auto_error is off so a missing header goes through the same AuthError path
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_PREFIX}/login",
    auto_error=False,
)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


# ==========================
# PASSWORD UTILS
# ==========================

def _truncate(password: str) -> str:
    # Bcrypt max input length = 72 bytes
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > 72:
        password = password_bytes[:72].decode("utf-8", errors="ignore")
    return password


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_truncate(plain_password), hashed_password)


def dummy_verify() -> None:
    """Burn one hash comparison so unknown emails cost as much as bad passwords."""
    pwd_context.dummy_verify()


def get_password_hash(password: str) -> str:
    return pwd_context.hash(_truncate(password))


# ==========================
# JWT TOKEN
# ==========================

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()

    if expires_delta is None and settings.ACCESS_TOKEN_EXPIRE_MINUTES > 0:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    if expires_delta is not None:
        to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


def create_user_token(user: models.User) -> str:
    return create_access_token(data={"sub": user.id})


def decode_access_token(token: str) -> schemas.TokenData:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        raise unauthenticated()

    user_id = payload.get("sub")
    if not user_id:
        raise unauthenticated()
    return schemas.TokenData(user_id=user_id)


# ==========================
# AUTH DEPENDENCIES
# ==========================

def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> models.User:
    if not token:
        raise unauthenticated()

    token_data = decode_access_token(token)

    user = db.query(models.User).filter(
        models.User.id == token_data.user_id
    ).first()

    if user is None:
        raise unauthenticated()

    return user


def ensure_role(user: models.User, role: models.Role, message: str) -> None:
    if user.role != role:
        raise AuthorizationError(message)
