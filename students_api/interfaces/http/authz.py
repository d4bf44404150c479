from fastapi import Depends, Header, Request
from ...application.guards import check_bearer, check_session_cookie
from ...domain.entities import Identity
from ...domain.errors import AuthError
from ...infrastructure.credentials import DemoCredentialStore, get_credential_store
from ...infrastructure.metrics import auth_failures_total
from ...infrastructure.security import decode_token


def require_jwt(authorization: str | None = Header(default=None)) -> Identity:
    try:
        return check_bearer(authorization, decode_token)
    except AuthError as e:
        auth_failures_total.labels(guard="jwt", reason=e.reason).inc()
        raise


def require_cookie_login(
    request: Request,
    credentials: DemoCredentialStore = Depends(get_credential_store),
) -> Identity:
    try:
        return check_session_cookie(request.cookies, credentials)
    except AuthError as e:
        auth_failures_total.labels(guard="cookie", reason=e.reason).inc()
        raise
