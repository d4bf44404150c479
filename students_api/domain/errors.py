"""Ошибки, которые уходят клиенту API.

У каждой свой HTTP-статус, в ответе: ``{"error": message, **extra}``.
"""
import math


class ApiError(Exception):
    status_code = 500

    def __init__(self, error: str, **extra):
        super().__init__(error)
        self.message = error
        self.extra = extra

    def to_body(self) -> dict:
        return {"error": self.message, **self.extra}


# --- 401

class AuthError(ApiError):
    status_code = 401
    reason = "invalid"


class MissingAuthHeader(AuthError):
    reason = "missing_header"

    def __init__(self):
        super().__init__(
            "Missing Authorization header",
            hint="Send: Authorization: Bearer <token>",
        )


class MalformedAuthHeader(AuthError):
    reason = "malformed_header"

    def __init__(self):
        super().__init__(
            "Invalid Authorization header format",
            example="Authorization: Bearer <token>",
        )


class InvalidToken(AuthError):
    reason = "invalid_token"

    def __init__(self, details: str):
        super().__init__("Invalid or expired token", details=details)


class MissingSessionCookie(AuthError):
    reason = "missing_cookie"

    def __init__(self, cookie_name: str = "sessionId"):
        super().__init__(
            f"Missing {cookie_name} cookie. Please login via /auth/login-cookie."
        )


class InvalidSession(AuthError):
    reason = "invalid_session"

    def __init__(self):
        super().__init__("Invalid session cookie. Please login again.")


class InvalidCredentials(AuthError):
    reason = "invalid_credentials"

    def __init__(self, hint: str):
        super().__init__("Invalid credentials", hint=hint)


# --- 400

class BadRequest(ApiError):
    status_code = 400


class ValidationFailed(BadRequest):
    def __init__(self, details: list[str]):
        super().__init__("Validation failed", details=details)
        self.details = details


class InvalidField(BadRequest):
    def __init__(self, field: str, requirement: str):
        super().__init__(f"Invalid '{field}'. Must be {requirement}.")
        self.field = field


class InvalidStudentId(BadRequest):
    def __init__(self):
        super().__init__("Invalid ID. Must be a number.")


# --- 404 / 409

class StudentNotFound(ApiError):
    status_code = 404

    def __init__(self, student_id):
        super().__init__(f"Student with id {format_id(student_id)} not found")
        self.student_id = student_id


class DuplicateEmail(ApiError):
    status_code = 409

    def __init__(self, existing: dict, message: str = "A student with this email already exists"):
        super().__init__(message, student=existing)
        self.existing = existing


# --- 500

class PersistenceError(ApiError):
    status_code = 500

    def __init__(self, details: str):
        super().__init__(
            "Internal Server Error",
            message=f"Failed to persist students: {details}",
        )


def format_id(student_id) -> str:
    if isinstance(student_id, float) and math.isinf(student_id):
        return "Infinity" if student_id > 0 else "-Infinity"
    if isinstance(student_id, float) and student_id.is_integer():
        return str(int(student_id))
    return str(student_id)
