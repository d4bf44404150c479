"""Проверки авторизации перед защищенными обработчиками.

Каждая проверка возвращает Identity вызывающего или кидает AuthError.
Состояние не меняют.
"""
from typing import Callable

from ..domain.entities import Identity
from ..domain.errors import (
    InvalidSession,
    InvalidToken,
    MalformedAuthHeader,
    MissingAuthHeader,
    MissingSessionCookie,
)
from .use_cases.authenticate_user import ICredentialStore


class TokenError(Exception):
    """Токен не прошел проверку (подпись, срок действия, состав)."""


def check_bearer(authorization: str | None, decode: Callable[[str], Identity]) -> Identity:
    if not authorization:
        raise MissingAuthHeader()

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise MalformedAuthHeader()

    try:
        return decode(parts[1])
    except TokenError as e:
        raise InvalidToken(str(e))


def check_session_cookie(cookies: dict, credentials: ICredentialStore) -> Identity:
    session_id = cookies.get(credentials.session_cookie_name)
    if not session_id:
        raise MissingSessionCookie(credentials.session_cookie_name)
    if session_id != credentials.session_token:
        raise InvalidSession()
    # одна и та же личность для любой валидной сессии
    return credentials.cookie_identity
