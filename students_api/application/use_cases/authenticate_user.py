from typing import Any

from ...domain.entities import Identity
from ...domain.errors import BadRequest, InvalidCredentials

LOGIN_HINT = "Try username: testuser, password: password123"


class ICredentialStore:
    session_cookie_name: str
    session_token: str
    cookie_identity: Identity

    def verify(self, username: str, password: str) -> Identity | None: ...


class AuthenticateUser:
    def __init__(self, credentials: ICredentialStore):
        self.credentials = credentials

    def execute(self, payload: Any, example_body: bool = False) -> Identity:
        body = payload if isinstance(payload, dict) else {}
        username = body.get("username")
        password = body.get("password")

        if not username or not password:
            extra = {}
            if example_body:
                extra["exampleBody"] = {"username": "testuser", "password": "password123"}
            raise BadRequest("username and password are required", **extra)

        identity = self.credentials.verify(username, password)
        if identity is None:
            raise InvalidCredentials(hint=LOGIN_HINT)
        return identity
