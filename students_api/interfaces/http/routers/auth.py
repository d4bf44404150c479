from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from ....application.use_cases.authenticate_user import AuthenticateUser
from ....domain.entities import Identity
from ....domain.errors import AuthError
from ....infrastructure.credentials import DemoCredentialStore, get_credential_store
from ....infrastructure.metrics import auth_failures_total
from ....infrastructure.security import create_access_token
from ..authz import require_cookie_login, require_jwt
from ..ratelimit import LOGIN_LIMIT, limiter
from ..schemas import MessageResp, TokenResp, UserResp

router = APIRouter(prefix="/auth", tags=["auth"])


def _authenticate(credentials: DemoCredentialStore, payload: Any, example_body: bool = False) -> Identity:
    try:
        return AuthenticateUser(credentials).execute(payload, example_body=example_body)
    except AuthError as e:
        auth_failures_total.labels(guard="login", reason=e.reason).inc()
        raise


@router.post("/login-jwt", response_model=TokenResp)
@limiter.limit(LOGIN_LIMIT)
def login_jwt(
    request: Request,
    payload: Any = Body(default=None),
    credentials: DemoCredentialStore = Depends(get_credential_store),
):
    identity = _authenticate(credentials, payload, example_body=True)
    # в токене только username и role
    token = create_access_token(identity)
    return TokenResp(
        message="Login successful. Use this token in Authorization header.",
        token=token,
        howToUse="Add header: Authorization: Bearer <token> to protected routes such as /students/protected/jwt-only",
    )


@router.get("/me", response_model=UserResp)
def me(user: Identity = Depends(require_jwt)):
    return {"message": "You are authenticated with JWT!", "user": user.to_dict()}


@router.post("/login-cookie", response_model=MessageResp, response_model_exclude_none=True)
@limiter.limit(LOGIN_LIMIT)
def login_cookie(
    request: Request,
    response: Response,
    payload: Any = Body(default=None),
    credentials: DemoCredentialStore = Depends(get_credential_store),
):
    _authenticate(credentials, payload)
    response.set_cookie(
        credentials.session_cookie_name,
        credentials.session_token,
        httponly=True,
        samesite="lax",
    )
    return MessageResp(
        message=f"Cookie login successful. '{credentials.session_cookie_name}' cookie set. "
                "Use it for cookie-protected routes.",
        note="Check 'Cookies' tab in Postman.",
    )


@router.get("/me-cookie", response_model=UserResp)
def me_cookie(user: Identity = Depends(require_cookie_login)):
    return {"message": "You are authenticated with a cookie!", "user": user.to_dict()}


@router.post("/logout-cookie", response_model=MessageResp, response_model_exclude_none=True)
def logout_cookie(
    response: Response,
    credentials: DemoCredentialStore = Depends(get_credential_store),
):
    response.delete_cookie(credentials.session_cookie_name)
    return MessageResp(message="Logged out cookie session.")
