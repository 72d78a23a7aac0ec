"""Employee repository."""

from typing import Annotated

from fastapi import Depends

from foodstall.core.database import Repository
from foodstall.modules.employees.models import Employee


class EmployeeRepository(Repository[Employee]):
    """Repository for Employee database operations."""

    model = Employee


EmployeeRepo = Annotated[EmployeeRepository, Depends(EmployeeRepository)]
