"""Factories for registration payloads."""

from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from foodstall.core.auth.schemas import RegisterRequest


TEST_PASSWORD = "SecurePass123!"


class RegisterRequestFactory(ModelFactory[RegisterRequest]):
    """Factory for generating registration payloads."""

    __model__ = RegisterRequest

    @classmethod
    def email(cls) -> str:
        """Generate a unique email."""
        return f"user-{uuid4().hex[:8]}@example.com"

    @classmethod
    def password(cls) -> str:
        return TEST_PASSWORD

    @classmethod
    def role_name(cls) -> str:
        return "cashier"
