"""Authentication: credential hashing, session gate and login routes."""

from foodstall.core.auth.backend import (
    generate_session_id,
    hash_password,
    hash_token,
    verify_password,
)


__all__ = [
    "generate_session_id",
    "hash_password",
    "hash_token",
    "verify_password",
]
