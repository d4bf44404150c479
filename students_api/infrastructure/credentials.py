from ..application.use_cases.authenticate_user import ICredentialStore
from ..config import Settings, settings
from ..domain.entities import Identity


class DemoCredentialStore(ICredentialStore):
    """Один демо-пользователь и одно фиксированное значение сессии."""

    def __init__(self, username: str, password: str, role: str,
                 session_cookie_name: str, session_token: str, cookie_identity: Identity):
        self._user = Identity(username=username, role=role)
        self._password = password
        self.session_cookie_name = session_cookie_name
        self.session_token = session_token
        self.cookie_identity = cookie_identity

    @classmethod
    def from_settings(cls, s: Settings) -> "DemoCredentialStore":
        return cls(
            username=s.DEMO_USERNAME,
            password=s.DEMO_PASSWORD,
            role=s.DEMO_ROLE,
            session_cookie_name=s.SESSION_COOKIE_NAME,
            session_token=s.SESSION_TOKEN,
            cookie_identity=Identity(username=s.COOKIE_USERNAME, role=s.COOKIE_ROLE),
        )

    def verify(self, username: str, password: str) -> Identity | None:
        if username != self._user.username or password != self._password:
            return None
        return self._user


_credentials: DemoCredentialStore | None = None


def get_credential_store() -> DemoCredentialStore:
    global _credentials
    if _credentials is None:
        _credentials = DemoCredentialStore.from_settings(settings)
    return _credentials
