from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from ..application.guards import TokenError
from ..config import settings
from ..domain.entities import Identity


def create_access_token(identity: Identity, minutes: int | None = None) -> str:
    if minutes is None:
        minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    now = datetime.now(timezone.utc)
    payload = {
        "username": identity.username,
        "role": identity.role,
        "iat": now,
        "exp": now + timedelta(minutes=minutes),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Identity:
    """Возвращает Identity из токена или кидает TokenError (подпись, срок, состав)."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise TokenError(str(e) or "Invalid token")
    username = payload.get("username")
    role = payload.get("role")
    if not username or not role:
        raise TokenError("Token payload is missing username or role")
    return Identity(username=username, role=role)
