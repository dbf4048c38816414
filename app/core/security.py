import enum
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from app.core.config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALGORITHM = "HS256"


class Role(str, enum.Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"


# Stored role strings come in English and Spanish spellings
_ROLE_ALIASES = {
    "admin": Role.ADMIN,
    "administrador": Role.ADMIN,
    "customer": Role.CUSTOMER,
    "cliente": Role.CUSTOMER,
}


def normalize_role(raw: Optional[str]) -> Role:
    """Fold a stored role string to ``Role``; unknown or empty values are customers."""
    if not raw:
        return Role.CUSTOMER
    return _ROLE_ALIASES.get(raw.strip().lower(), Role.CUSTOMER)


def create_access_token(
    subject: str, settings: Settings, expires_delta: Optional[timedelta] = None
) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"exp": expire, "sub": str(subject)}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str, settings: Settings) -> Optional[str]:
    """Returns user ID (sub claim) or None if token is invalid/expired."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        return payload.get("sub")
    except JWTError:
        return None


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
