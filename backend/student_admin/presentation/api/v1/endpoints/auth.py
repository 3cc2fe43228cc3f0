"""Login/registration demo endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from student_admin.application.schemas import (
    AuthMessageResponse,
    AuthStatusResponse,
    CredentialsRequest,
)
from student_admin.application.services import AuthService
from student_admin.domain.exceptions import InvalidCredentialsError, RegistrationError
from student_admin.infrastructure.dependencies import (
    get_auth_service,
    get_session_id,
    get_view_registry,
)
from student_admin.infrastructure.session import ViewStateRegistry

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=AuthMessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: CredentialsRequest,
    auth: AuthService = Depends(get_auth_service),
) -> AuthMessageResponse:
    """Store the demo user in the caller's session."""
    try:
        auth.register(data.username, data.password)
    except RegistrationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return AuthMessageResponse(message="Registration successful!")


@router.post("/login", response_model=AuthMessageResponse)
async def login(
    data: CredentialsRequest,
    auth: AuthService = Depends(get_auth_service),
) -> AuthMessageResponse:
    """Check the credentials against the registered demo user and grant access."""
    try:
        auth.login(data.username, data.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    return AuthMessageResponse(message="Login successful!")


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    session_id: str = Depends(get_session_id),
    auth: AuthService = Depends(get_auth_service),
    views: ViewStateRegistry = Depends(get_view_registry),
) -> None:
    """Revoke access and drop the session's student view state."""
    auth.logout()
    views.discard(session_id)


@router.get("/status", response_model=AuthStatusResponse)
async def auth_status(auth: AuthService = Depends(get_auth_service)) -> AuthStatusResponse:
    return AuthStatusResponse(is_allowed=auth.is_allowed())
