"""
Admin authentication endpoints.

These two routes are the only ``/api/admin`` paths reachable without a
bearer token.  Login returns a signed token that the other admin routes
expect in the ``Authorization: Bearer <token>`` header.
"""

from fastapi import APIRouter, Depends, status

from ...core.config import Settings
from ...core.errors import AuthenticationError, ForbiddenError
from ...core.security import create_access_token
from ...schemas.user import LoginResponse, UserCreate, UserLogin, UserRead
from ...services.user_service import UserService
from ..deps import get_settings, get_user_service

router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register(
    user_in: UserCreate,
    settings: Settings = Depends(get_settings),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create an admin account.

    Open by default so a fresh install can bootstrap itself; set
    ``ALLOW_ADMIN_REGISTRATION=false`` once the first admin exists.
    """
    if not settings.allow_registration:
        raise ForbiddenError("Registration is disabled")
    return await service.create_user(user_in)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    settings: Settings = Depends(get_settings),
    service: UserService = Depends(get_user_service),
) -> LoginResponse:
    """Exchange a username and password for a bearer token."""
    user = await service.authenticate(credentials.username, credentials.password)
    if user is None:
        raise AuthenticationError("Invalid credentials")
    token = create_access_token(
        {"sub": user.id, "username": user.username},
        settings.secret_key,
        expires_in=settings.access_token_expire_minutes * 60,
    )
    return LoginResponse(token=token, user=user)
