"""Factories for employee and invoice payloads."""

from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from foodstall.modules.employees.schemas import EmployeeCreate
from foodstall.modules.invoices.schemas import InvoiceCreate, InvoiceItem


class EmployeeCreateFactory(ModelFactory[EmployeeCreate]):
    """Factory for generating employee payloads."""

    __model__ = EmployeeCreate

    @classmethod
    def name(cls) -> str:
        return cls.__faker__.name()

    @classmethod
    def address(cls) -> str:
        return cls.__faker__.address()

    @classmethod
    def phone_number(cls) -> str:
        return cls.__faker__.numerify("09########")

    @classmethod
    def role_id(cls):
        """Any identifier; employee roles are not checked."""
        return uuid4()

    @classmethod
    def date_of_birth(cls) -> str:
        return cls.__faker__.date()

    @classmethod
    def created_date(cls) -> str:
        return cls.__faker__.date()


class InvoiceItemFactory(ModelFactory[InvoiceItem]):
    """Factory for generating invoice lines with a consistent sum."""

    __model__ = InvoiceItem

    @classmethod
    def food(cls):
        return uuid4()

    @classmethod
    def quantity(cls) -> int:
        return 2

    @classmethod
    def price(cls) -> float:
        return 25_000.0

    @classmethod
    def sum(cls) -> float:
        return 50_000.0


class InvoiceCreateFactory(ModelFactory[InvoiceCreate]):
    """Factory for generating invoice payloads."""

    __model__ = InvoiceCreate

    @classmethod
    def items(cls) -> list[InvoiceItem]:
        return InvoiceItemFactory.batch(size=2)

    @classmethod
    def date(cls) -> str:
        return cls.__faker__.date()

    @classmethod
    def time(cls) -> str:
        return cls.__faker__.time(pattern="%H:%M")

    @classmethod
    def subtotal(cls) -> float:
        return 100_000.0

    @classmethod
    def discount(cls) -> float:
        return 10_000.0

    @classmethod
    def total(cls) -> float:
        return 90_000.0
