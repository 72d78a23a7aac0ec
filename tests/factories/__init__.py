"""Test factories for generating request payloads."""

from tests.factories.catalogue import (
    CategoryCreateFactory,
    FoodCreateFactory,
    MenuCreateFactory,
)
from tests.factories.staff import (
    EmployeeCreateFactory,
    InvoiceCreateFactory,
    InvoiceItemFactory,
)
from tests.factories.users import RegisterRequestFactory


__all__ = [
    "CategoryCreateFactory",
    "EmployeeCreateFactory",
    "FoodCreateFactory",
    "InvoiceCreateFactory",
    "InvoiceItemFactory",
    "MenuCreateFactory",
    "RegisterRequestFactory",
]
