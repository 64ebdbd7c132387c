from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from app.core.config import settings
from app.core.errors import AuthenticationError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALGORITHM = "HS256"


def create_access_token(user_id, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a bearer token whose subject is the user's id."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {"exp": expire, "sub": str(user_id)}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)


def read_token_subject(token: str) -> str:
    """Return the user id carried by ``token``; expired or forged tokens raise."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise AuthenticationError()
    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError()
    return subject


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)
