"""
Authentication endpoints.

Password registration and login, Google sign-in, status check and
password setup.
"""

import logging
import secrets
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from fastapi.security import HTTPAuthorizationCredentials

from api.dependencies import get_auth_service
from api.middleware.auth import bearer_scheme, get_current_user
from shared.config import get_settings
from shared.exceptions import CampuzwayError
from shared.models import AuthenticatedUser

from .models import (
    AuthResult,
    AuthStatus,
    LoginRequest,
    PasswordChangeResponse,
    RegisterRequest,
    SetPasswordRequest,
)
from .service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()

# Error Google sends back when the user dismisses the consent screen
ACCESS_DENIED = "access_denied"

# Login CSRF guard: the state sent to Google must come back with the
# browser that started the flow
OAUTH_STATE_COOKIE = "campuzway_oauth_state"
OAUTH_STATE_PATH = "/api/auth/google"
OAUTH_STATE_MAX_AGE = 600


@router.post("/register", response_model=AuthResult, status_code=201)
async def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResult:
    """Create an account with email and password and sign it in."""
    return await service.register(request.name, request.email, request.password)


@router.post("/login", response_model=AuthResult)
async def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResult:
    """Sign in with email and password."""
    return await service.login(request.email, request.password)


@router.get("/status", response_model=AuthStatus)
async def auth_status(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    service: AuthService = Depends(get_auth_service),
) -> AuthStatus:
    """
    Report whether the bearer token identifies an existing user.

    Always 200; a deleted account yields authenticated=false.
    """
    token = credentials.credentials if credentials else None
    return await service.get_status(token)


@router.get("/google")
async def google_sign_in(
    request: Request,
    code: Optional[str] = Query(default=None, description="Authorization code from Google"),
    state: Optional[str] = Query(default=None, description="State echoed back by Google"),
    error: Optional[str] = Query(default=None, description="Error reported by Google"),
    service: AuthService = Depends(get_auth_service),
) -> RedirectResponse:
    """
    Start or complete Google sign-in.

    Without a code, redirects to the Google consent screen with a fresh
    state value that is also set in an HttpOnly cookie. With a code, the
    echoed state must match that cookie; the user is then signed in and
    redirected to the frontend with the session token. Failures redirect
    to the login page with an error message.
    """
    settings = get_settings()
    frontend = settings.frontend_url.rstrip("/")

    if error:
        logger.info(f"Google sign-in aborted: {error}")
        message = (
            "Google authentication was cancelled"
            if error == ACCESS_DENIED
            else "Google authentication failed"
        )
        return _clear_state(_redirect(f"{frontend}/login.html", error=message))

    if not code:
        new_state = secrets.token_urlsafe(32)
        response = RedirectResponse(service.google_authorization_url(new_state))
        response.set_cookie(
            key=OAUTH_STATE_COOKIE,
            value=new_state,
            max_age=OAUTH_STATE_MAX_AGE,
            path=OAUTH_STATE_PATH,
            httponly=True,
            samesite="lax",
            secure=settings.google_redirect_uri.startswith("https://"),
        )
        return response

    expected = request.cookies.get(OAUTH_STATE_COOKIE)
    if not state or not expected or not secrets.compare_digest(state, expected):
        logger.warning("Google sign-in callback with missing or mismatched state")
        return _clear_state(_redirect(f"{frontend}/login.html", error="Google authentication failed"))

    try:
        result = await service.complete_google_sign_in(code)
    except CampuzwayError as e:
        logger.warning(f"Google sign-in failed: {e.code} {e.message}")
        return _clear_state(_redirect(f"{frontend}/login.html", error=e.message))

    return _clear_state(_redirect(
        f"{frontend}/index.html",
        token=result.token,
        needs_password_setup=str(result.needs_password_setup).lower(),
    ))


@router.post("/password", response_model=PasswordChangeResponse)
async def set_password(
    request: SetPasswordRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
) -> PasswordChangeResponse:
    """
    Set a first password or change the existing one.

    Accounts created through Google sign-in have no password and may set
    one without `current_password`.
    """
    await service.set_password(user.id, request.new_password, request.current_password)
    message = "Password updated successfully" if user.has_password else "Password set successfully"
    return PasswordChangeResponse(message=message)


def _redirect(url: str, **params: str) -> RedirectResponse:
    return RedirectResponse(f"{url}?{urlencode(params)}")


def _clear_state(response: RedirectResponse) -> RedirectResponse:
    response.delete_cookie(OAUTH_STATE_COOKIE, path=OAUTH_STATE_PATH)
    return response
