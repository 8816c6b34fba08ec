"""Sign-in endpoints."""

import logging
from typing import Annotated, Callable, Optional

from fastapi import APIRouter, Depends, HTTPException

from auth.errors import (
    AuthError,
    EmailAlreadyInUseError,
    InvalidEmailError,
    NetworkError,
    TooManyAttemptsError,
    WeakPasswordError,
    user_message,
)
from auth.models import AuthSession
from auth.rbac import is_admin
from media_api.dependencies import ServicesDep, bearer_token, require_session
from media_api.models.auth import Credentials, GoogleSignIn, SessionResponse, UserResponse
from media_api.models.base import SuccessResponse
from media_api.models.community import UserRoleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

ERROR_STATUS = {
    EmailAlreadyInUseError: 409,
    WeakPasswordError: 400,
    InvalidEmailError: 400,
    TooManyAttemptsError: 429,
    NetworkError: 503,
}


def _session_response(session: AuthSession) -> SessionResponse:
    return SessionResponse(
        user=UserResponse(
            uid=session.user.uid,
            email=session.user.email,
            display_name=session.user.display_name,
        ),
        role=UserRoleResponse.model_validate(session.role),
        id_token=session.id_token,
        is_admin=is_admin(session.role),
    )


def _attempt(operation: str, sign_in: Callable[[], AuthSession]) -> SessionResponse:
    try:
        return _session_response(sign_in())
    except AuthError as e:
        logger.info("%s failed: %s", operation, e.code)
        raise HTTPException(
            status_code=ERROR_STATUS.get(type(e), 401),
            detail={"error": user_message(e, operation), "code": e.code},
        )


@router.post("/sign-in", response_model=SessionResponse)
def sign_in(body: Credentials, services: ServicesDep):
    return _attempt("sign-in", lambda: services.auth.sign_in(body.email, body.password))


@router.post("/sign-up", response_model=SessionResponse, status_code=201)
def sign_up(body: Credentials, services: ServicesDep):
    return _attempt("sign-up", lambda: services.auth.sign_up(body.email, body.password))


@router.post("/google", response_model=SessionResponse)
def google(body: GoogleSignIn, services: ServicesDep):
    return _attempt("google", lambda: services.auth.sign_in_with_google(body.id_token))


@router.post("/sign-out", response_model=SuccessResponse)
def sign_out(services: ServicesDep, token: Annotated[Optional[str], Depends(bearer_token)]):
    if token:
        services.auth.sign_out(token)
    return SuccessResponse()


@router.get("/me", response_model=SessionResponse)
def me(session: Annotated[AuthSession, Depends(require_session)]):
    return _session_response(session)
