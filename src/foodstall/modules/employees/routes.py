"""Employee API routes."""

from fastapi import APIRouter, status

from foodstall.core.permissions import require_permission
from foodstall.modules.employees.schemas import (
    EmployeeCreate,
    EmployeeEnvelope,
    EmployeeListEnvelope,
    EmployeeResponse,
    EmployeeUpdate,
)
from foodstall.modules.employees.services import EmployeeSvc


router = APIRouter(prefix="/employee", tags=["employees"])


@router.get(
    "/getAllEmployees",
    response_model=EmployeeListEnvelope,
    summary="List employees",
    dependencies=[require_permission("employee", "read")],
)
async def get_all_employees(service: EmployeeSvc) -> EmployeeListEnvelope:
    employees = await service.list()
    return EmployeeListEnvelope(
        message="Employees retrieved successfully",
        employees=[EmployeeResponse.model_validate(employee) for employee in employees],
    )


@router.get(
    "/getEmployeeById/{employee_id}",
    response_model=EmployeeEnvelope,
    summary="Get an employee",
    dependencies=[require_permission("employee", "read")],
)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeSvc,
) -> EmployeeEnvelope:
    employee = await service.get(employee_id)
    return EmployeeEnvelope(
        message="Employee retrieved successfully",
        employee=EmployeeResponse.model_validate(employee),
    )


@router.post(
    "/createEmployee",
    response_model=EmployeeEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee",
    dependencies=[require_permission("employee", "create")],
)
async def create_employee(
    data: EmployeeCreate,
    service: EmployeeSvc,
) -> EmployeeEnvelope:
    employee = await service.create(data)
    return EmployeeEnvelope(
        message="Employee created successfully",
        employee=EmployeeResponse.model_validate(employee),
    )


@router.put(
    "/updateEmployee/{employee_id}",
    response_model=EmployeeEnvelope,
    summary="Update an employee",
    description="Partial update: only the supplied fields change.",
    dependencies=[require_permission("employee", "update")],
)
async def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    service: EmployeeSvc,
) -> EmployeeEnvelope:
    employee = await service.update(employee_id, data)
    return EmployeeEnvelope(
        message="Employee updated successfully",
        employee=EmployeeResponse.model_validate(employee),
    )


@router.delete(
    "/deleteEmployee/{employee_id}",
    response_model=EmployeeEnvelope,
    summary="Delete an employee",
    dependencies=[require_permission("employee", "delete")],
)
async def delete_employee(
    employee_id: str,
    service: EmployeeSvc,
) -> EmployeeEnvelope:
    employee = await service.delete(employee_id)
    return EmployeeEnvelope(
        message="Employee deleted successfully",
        employee=EmployeeResponse.model_validate(employee),
    )
