"""Employee service."""

from typing import Annotated

from fastapi import Depends

from foodstall.core.services import CrudService
from foodstall.modules.employees.models import Employee
from foodstall.modules.employees.repos import EmployeeRepo


class EmployeeService(CrudService[Employee]):
    """Service for employee records.

    The role reference is stored without an existence check.
    """

    resource = "employee"
    label = "Employee"

    def __init__(self, repo: EmployeeRepo) -> None:
        super().__init__(repo)


EmployeeSvc = Annotated[EmployeeService, Depends(EmployeeService)]
