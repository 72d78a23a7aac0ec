"""Credential and session-token utilities.

This module provides the core authentication primitives:
- Password hashing with bcrypt
- Opaque session identifier generation
- Token hashing for storage
"""

import hashlib
import secrets

from passlib.context import CryptContext

from foodstall.config import settings
from foodstall.core.constants import SESSION_ID_BYTES


# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Salted bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# ============================================================
# Session Token Utilities
# ============================================================


def generate_session_id() -> str:
    """Generate a random opaque session identifier for the session cookie."""
    return secrets.token_urlsafe(SESSION_ID_BYTES)


def hash_token(token: str) -> str:
    """Hash a token for secure storage.

    Session identifiers are stored hashed so a dump of the session store
    cannot be replayed as cookies.

    Args:
        token: The token to hash

    Returns:
        SHA-256 hash of the token
    """
    return hashlib.sha256(token.encode()).hexdigest()
