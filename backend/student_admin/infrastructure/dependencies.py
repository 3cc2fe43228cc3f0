"""FastAPI dependency injection — wires infrastructure to application layer."""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, Request, Response, status

from student_admin.config import get_settings
from student_admin.application.interfaces import SessionStore, StudentStore
from student_admin.application.services import AuthService, EditSessionController
from student_admin.infrastructure.session import SessionRegistry, ViewStateRegistry
from student_admin.infrastructure.student_api import HttpStudentStore

logger = logging.getLogger(__name__)


def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.session_registry


def get_view_registry(request: Request) -> ViewStateRegistry:
    return request.app.state.view_registry


def get_session_id(request: Request, response: Response) -> str:
    """Read the session cookie, issuing a fresh session id on first contact."""
    settings = get_settings()
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id:
        session_id = SessionRegistry.new_session_id()
        response.set_cookie(
            settings.session_cookie_name,
            session_id,
            httponly=True,
            samesite="lax",
        )
    return session_id


def get_session_store(
    session_id: str = Depends(get_session_id),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionStore:
    """The caller's session store; an unknown session is only kept once written to."""
    return registry.get(session_id)


async def get_auth_service(
    session_store: SessionStore = Depends(get_session_store),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService bound to the caller's session store."""
    yield AuthService(session_store)


async def get_student_store() -> AsyncGenerator[StudentStore, None]:
    """Provides the HTTP adapter for the remote student store."""
    settings = get_settings()
    yield HttpStudentStore(
        base_url=settings.student_api_base_url,
        timeout=settings.student_api_timeout,
    )


def require_access(auth: AuthService = Depends(get_auth_service)) -> None:
    """Routing guard — turns away sessions without the demo access flag."""
    if not auth.is_allowed():
        logger.info("Not authorized. Redirecting to login.")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized",
            headers={"Location": "/login"},
        )


async def get_edit_session_controller(
    session_id: str = Depends(get_session_id),
    views: ViewStateRegistry = Depends(get_view_registry),
    store: StudentStore = Depends(get_student_store),
) -> AsyncGenerator[EditSessionController, None]:
    """Provides the session's EditSessionController, created on first use."""
    yield views.get_or_create(session_id, lambda: EditSessionController(store))
