"""Request dependencies shared by routers."""

from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, Request

from auth.models import AuthSession
from auth.rbac import is_admin
from media_api.services import Services

LOGIN_PATH = "/admin/login"


def get_services(request: Request) -> Services:
    """Dependency to get the app's service container."""
    return request.app.state.services


def bearer_token(authorization: Annotated[Optional[str], Header()] = None) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_current_session(
    services: Annotated[Services, Depends(get_services)],
    token: Annotated[Optional[str], Depends(bearer_token)],
) -> Optional[AuthSession]:
    return services.auth.current_session(token)


def require_session(session: Annotated[Optional[AuthSession], Depends(get_current_session)]) -> AuthSession:
    if session is None:
        raise HTTPException(
            status_code=401,
            detail={"error": "Authentication required", "redirect": LOGIN_PATH},
        )
    return session


def require_admin(session: Annotated[AuthSession, Depends(require_session)]) -> AuthSession:
    """Admin gate, checked on every request so revoked roles take effect at once."""
    if not is_admin(session.role):
        raise HTTPException(status_code=403, detail="Admin access required")
    return session


ServicesDep = Annotated[Services, Depends(get_services)]
AdminDep = Annotated[AuthSession, Depends(require_admin)]
