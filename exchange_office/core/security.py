"""Credentials: bcrypt password hashes and JWT bearer tokens."""
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from exchange_office.core.config import get_settings
from exchange_office.core.exceptions import AuthenticationError
from exchange_office.schemas import TokenData

BCRYPT_ROUNDS = 12

settings = get_settings()


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    # a malformed stored hash counts as a mismatch
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(client_id: str, username: str, expires_delta: Optional[timedelta] = None) -> str:
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": client_id,
        "username": username,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    """Client id and username from a bearer token.

    Bad signatures, expired tokens and tokens without a subject all raise
    ``AuthenticationError`` with the same message.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise AuthenticationError("Invalid or expired token") from exc

    client_id = payload.get("sub")
    if not client_id:
        raise AuthenticationError("Invalid or expired token")
    return TokenData(client_id=client_id, username=payload.get("username"))
