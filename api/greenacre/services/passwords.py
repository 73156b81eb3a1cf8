"""Password hashing for user credentials."""

from __future__ import annotations

from passlib.context import CryptContext

from .. import settings

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password
        rounds: bcrypt work factor (defaults to SEED_BCRYPT_ROUNDS)

    Returns:
        Salted bcrypt hash string
    """
    if rounds is None:
        rounds = settings.seed_bcrypt_rounds()
    return pwd_context.copy(bcrypt__rounds=rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)
