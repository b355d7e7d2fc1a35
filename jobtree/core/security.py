"""Password hashing and access token generation."""

import secrets
from datetime import datetime, timezone

from passlib.context import CryptContext


def create_password_context(rounds: int = 12) -> CryptContext:
    """bcrypt context; the salt is generated per hash."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def generate_access_token(nbytes: int = 128) -> str:
    """Opaque bearer token, hex encoded (2 * nbytes characters)."""
    return secrets.token_hex(nbytes)


def utcnow() -> datetime:
    """Current UTC time truncated to milliseconds, the precision MongoDB keeps."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)
