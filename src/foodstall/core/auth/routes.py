"""Authentication API routes.

Provides endpoints for:
- User registration (permission protected, plus a bootstrap variant)
- Login/logout with a server-side session
"""

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from foodstall.config import settings
from foodstall.core.auth.schemas import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
    UserDetails,
)
from foodstall.core.auth.service import AuthSvc
from foodstall.core.errors import ForbiddenError, ValidationError
from foodstall.core.permissions import require_permission
from foodstall.core.sessions import SessionStoreError


router = APIRouter(tags=["auth"])


@router.post(
    "/register-dev",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Bootstrap registration",
    description=(
        "Registers a user without a session. The role defaults to the configured "
        "bootstrap role. Disabled in production."
    ),
)
async def register_dev(data: RegisterRequest, service: AuthSvc) -> RegisterResponse:
    if not settings.dev_registration_enabled or settings.is_production:
        raise ForbiddenError(
            "Development registration is disabled.",
            error_code="dev_registration_disabled",
        )

    user, role = await service.register(
        email=data.email,
        password=data.password,
        role_name=data.role_name or settings.dev_registration_role,
    )
    return RegisterResponse(
        message="User registered successfully",
        user_details=UserDetails(email=user.email, role=role.name),
    )


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    description="Creates a user attached to an existing role. Requires user:create.",
    dependencies=[require_permission("user", "create")],
)
async def register(
    data: RegisterRequest,
    service: AuthSvc,
) -> RegisterResponse:
    if data.role_name is None:
        raise ValidationError(
            "All fields are required.",
            errors=[{"field": "roleName", "message": "Field required"}],
        )

    user, role = await service.register(
        email=data.email,
        password=data.password,
        role_name=data.role_name,
    )
    return RegisterResponse(
        message="User registered successfully",
        user_details=UserDetails(email=user.email, role=role.name),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login with email and password",
    description="Establishes a session and sets the session cookie.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
    response: Response,
) -> LoginResponse:
    user, identity = await service.login(email=data.email, password=data.password)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=identity.session_id,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=settings.secure_cookies,
        samesite=settings.session_cookie_samesite,
    )

    return LoginResponse(
        message="Login successful",
        user=UserDetails(email=user.email, role=await service.role_name(user)),
    )


@router.get(
    "/logout",
    response_model=LogoutResponse,
    summary="Logout",
    description="Destroys the current session and clears the session cookie.",
)
async def logout(request: Request, service: AuthSvc) -> Response:
    try:
        await service.logout(request.cookies.get(settings.session_cookie_name))
    except SessionStoreError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=LogoutResponse(
                status=False,
                message="Failed to log out due to an internal error.",
            ).model_dump(),
        )

    response = JSONResponse(
        content=LogoutResponse(status=True, message="Logged out successfully.").model_dump()
    )
    response.delete_cookie(settings.session_cookie_name)
    return response
