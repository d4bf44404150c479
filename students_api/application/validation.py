"""Валидация тел запросов для студентов.

``bool`` здесь не число, хотя в Python это подкласс ``int``.
"""
import math
import re
from typing import Any, Iterable

from ..domain.entities import Student
from ..domain.errors import InvalidField, InvalidStudentId, ValidationFailed

FIELDS = ("name", "age", "email", "isActive")

_DECIMAL_ID = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_PREFIXED_ID = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


# поле -> (проверка, сообщение для полной записи, требование для одного поля)
RULES = {
    "name": (is_text, "name is required and must be a string", "a non-empty string"),
    "age": (is_positive_number, "age is required and must be a positive number", "a positive number"),
    "email": (is_text, "email is required and must be a string", "a non-empty string"),
    "isActive": (is_boolean, "isActive is required and must be a boolean", "a boolean"),
}


def validate_full(payload: Any) -> dict:
    """Проверка тела POST/PUT.

    Собирает все ошибки сразу. Возвращает только четыре известных поля,
    остальное (включая ``id``) отбрасывается.
    """
    body = payload if isinstance(payload, dict) else {}
    errors = []
    for field in FIELDS:
        check, message, _ = RULES[field]
        if not check(body.get(field)):
            errors.append(message)
    if errors:
        raise ValidationFailed(errors)
    return {field: body[field] for field in FIELDS}


def validate_partial(payload: Any) -> dict:
    """Проверка тела PATCH: падаем на первом невалидном переданном поле."""
    body = payload if isinstance(payload, dict) else {}
    changes = {}
    for field in FIELDS:
        if field not in body:
            continue
        check, _, requirement = RULES[field]
        if not check(body[field]):
            raise InvalidField(field, requirement)
        changes[field] = body[field]
    return changes


def find_email_conflict(students: Iterable[Student], email: str, exclude_id=None) -> Student | None:
    """Первый студент с тем же email (без учета регистра), кроме ``exclude_id``."""
    wanted = email.lower()
    for student in students:
        if exclude_id is not None and student.id == exclude_id:
            continue
        if student.email.lower() == wanted:
            return student
    return None


def parse_student_id(raw: str) -> int | float:
    """id из пути -> число.

    Десятичная запись (со знаком, дробью, экспонентой), ``0x``/``0o``/``0b``
    и ``Infinity``. Подчеркивания, ``inf`` и прочее -> 400. Целые значения
    возвращаются как ``int``, дробные допустимы, но ни с кем не совпадут.
    """
    text = raw.strip() if isinstance(raw, str) else ""
    if _PREFIXED_ID.fullmatch(text):
        return int(text, 0)
    if not _DECIMAL_ID.fullmatch(text):
        raise InvalidStudentId()
    value = float(text)
    if value.is_integer():
        return int(value)
    return value
