"""Integration tests for the session and permission gates on routes."""

from uuid import uuid4

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from foodstall.config import settings
from foodstall.core.auth.dependencies import NOT_LOGGED_IN


pytestmark = pytest.mark.integration

PLACEHOLDER_ID = str(uuid4())

UNPROTECTED = {
    ("POST", "/api/register-dev"),
    ("POST", "/api/login"),
    ("GET", "/api/logout"),
    ("GET", "/health/live"),
    ("GET", "/health/ready"),
    ("GET", "/info"),
}

# (method, path, resource, action) for every permission-protected route
PROTECTED = [
    ("GET", "/api/food/getAllFoods", "food", "read"),
    ("GET", "/api/food/getFoodById/{id}", "food", "read"),
    ("POST", "/api/food/createFood", "food", "create"),
    ("PUT", "/api/food/updateFood/{id}", "food", "update"),
    ("DELETE", "/api/food/deleteFood/{id}", "food", "delete"),
    ("GET", "/api/category/getAllCategories", "foodCategory", "read"),
    ("GET", "/api/category/getCategoryById/{id}", "foodCategory", "read"),
    ("POST", "/api/category/createCategory", "foodCategory", "create"),
    ("PUT", "/api/category/updateCategory/{id}", "foodCategory", "update"),
    ("DELETE", "/api/category/deleteCategory/{id}", "foodCategory", "delete"),
    ("GET", "/api/menu/getAllMenus", "foodMenu", "read"),
    ("GET", "/api/menu/getMenuById/{id}", "foodMenu", "read"),
    ("POST", "/api/menu/createMenu", "foodMenu", "create"),
    ("PUT", "/api/menu/updateMenu/{id}", "foodMenu", "update"),
    ("DELETE", "/api/menu/deleteMenu/{id}", "foodMenu", "delete"),
    ("GET", "/api/employee/getAllEmployees", "employee", "read"),
    ("GET", "/api/employee/getEmployeeById/{id}", "employee", "read"),
    ("POST", "/api/employee/createEmployee", "employee", "create"),
    ("PUT", "/api/employee/updateEmployee/{id}", "employee", "update"),
    ("DELETE", "/api/employee/deleteEmployee/{id}", "employee", "delete"),
    ("GET", "/api/invoice/getAllInvoices", "invoice", "read"),
    ("GET", "/api/invoice/getInvoiceById/{id}", "invoice", "read"),
    ("POST", "/api/invoice/createInvoice", "invoice", "create"),
    ("PUT", "/api/invoice/updateInvoiceDateTime/{id}", "invoice", "update"),
    ("DELETE", "/api/invoice/deleteInvoiceById/{id}", "invoice", "delete"),
    ("GET", "/api/role/getAllRoles", "role", "read"),
    ("GET", "/api/role/getRoleById/{id}", "role", "read"),
    ("POST", "/api/role/createRole", "role", "create"),
    ("PUT", "/api/role/updateRole/{id}", "role", "update"),
    ("DELETE", "/api/role/deleteRole/{id}", "role", "delete"),
    ("POST", "/api/register", "user", "create"),
    ("GET", "/api/user/getAllUsers", "user", "read"),
    ("GET", "/api/user/getUserById/{id}", "user", "read"),
    ("PUT", "/api/user/updateUser/{id}", "user", "update"),
    ("DELETE", "/api/user/deleteUser/{id}", "user", "delete"),
]

SESSION_ONLY = [("POST", "/api/upload")]

CASHIER_GRANTS = {
    ("invoice", "create"),
    ("invoice", "read"),
    ("invoice", "update"),
    ("food", "read"),
    ("foodCategory", "read"),
    ("foodMenu", "read"),
}


def _url(path: str) -> str:
    return path.replace("{id}", PLACEHOLDER_ID)


async def _call(client: AsyncClient, method: str, path: str):
    if method in ("POST", "PUT"):
        return await client.request(method, _url(path), json={})
    return await client.request(method, _url(path))


def _normalized(path: str) -> str:
    """Collapse the path parameter to ``{id}`` so routes compare by shape."""
    start = path.find("{")
    return path if start == -1 else path[:start] + "{id}"


def test_every_api_route_is_classified(app: FastAPI):
    """No route may be added without deciding how it is guarded."""
    classified = (
        UNPROTECTED
        | {(method, path) for method, path, _, _ in PROTECTED}
        | set(SESSION_ONLY)
    )
    routes = {
        (method.upper(), _normalized(path))
        for path, operations in app.openapi()["paths"].items()
        for method in operations
    }

    assert routes == classified


@pytest.mark.parametrize(
    ("method", "path"),
    [(m, p) for m, p, _, _ in PROTECTED] + SESSION_ONLY,
)
async def test_unauthenticated_requests_rejected(
    client: AsyncClient, method: str, path: str
):
    """Without a session every protected route answers 401."""
    response = await _call(client, method, path)

    assert response.status_code == 401
    assert response.json()["message"] == NOT_LOGGED_IN


@pytest.mark.parametrize(("method", "path"), [(m, p) for m, p, _, _ in PROTECTED])
async def test_unknown_session_rejected(client: AsyncClient, method: str, path: str):
    """A cookie that does not resolve is the same as no cookie."""
    client.cookies.set(settings.session_cookie_name, "forged-session-id")

    response = await _call(client, method, path)

    assert response.status_code == 401


@pytest.mark.parametrize(("method", "path", "resource", "action"), PROTECTED)
async def test_permission_gate(
    cashier_client: AsyncClient, method: str, path: str, resource: str, action: str
):
    """The cashier passes the gate exactly where its role grants the action."""
    response = await _call(cashier_client, method, path)

    if (resource, action) in CASHIER_GRANTS:
        # Past the gate: the handler answers with its own outcome
        assert response.status_code not in (401, 403)
    else:
        assert response.status_code == 403
        assert response.json()["message"] == "Access denied. Insufficient permissions."
        assert response.json()["required_permission"] == f"{action}-{resource}"


async def test_deleted_user_session_rejected(
    admin_client: AsyncClient, cashier_client: AsyncClient, cashier_user
):
    """A session whose user no longer exists is not authenticated."""
    await admin_client.delete(f"/api/user/deleteUser/{cashier_user.id}")

    response = await cashier_client.get("/api/food/getAllFoods")

    assert response.status_code == 401
