"""Security utilities for EduTrack: password hashing and session token generation."""

import secrets

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

SESSION_TOKEN_BYTES = 32


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def generate_session_token() -> str:
    # Opaque to clients; the server maps it to a user row.
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)
