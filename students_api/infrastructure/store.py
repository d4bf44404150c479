"""Студенты в памяти, зеркалируются в JSON-файл.

Файл читается один раз в ``load`` и перезаписывается целиком после каждого
изменения. Изменения идут под блокировкой и видны только после успешной записи.
"""
import json
import threading
from pathlib import Path

import structlog
from fastapi import Request

from ..application.validation import find_email_conflict
from ..domain.entities import Student
from ..domain.errors import DuplicateEmail, PersistenceError, StudentNotFound
from .metrics import student_mutations_total

logger = structlog.get_logger()


class JsonStudentStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._students: list[Student] = []
        self._lock = threading.Lock()

    def load(self) -> None:
        try:
            raw = self.path.read_text(encoding="utf-8")
            students = [Student.from_dict(item) for item in json.loads(raw)]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error("students_load_failed", path=str(self.path), error=str(e))
            students = []
        with self._lock:
            self._students = students
        logger.info("students_loaded", path=str(self.path), count=len(students))

    def all(self) -> list[Student]:
        with self._lock:
            return list(self._students)

    def get(self, student_id) -> Student:
        with self._lock:
            return self._find(self._students, student_id)

    def create(self, fields: dict) -> Student:
        with self._lock:
            existing = find_email_conflict(self._students, fields["email"])
            if existing:
                raise DuplicateEmail(existing.to_dict())
            next_id = max((s.id for s in self._students), default=0) + 1
            student = Student(
                id=next_id,
                name=fields["name"],
                age=fields["age"],
                email=fields["email"],
                is_active=fields["isActive"],
            )
            self._commit(self._students + [student], "create")
            return student

    def replace(self, student_id, fields: dict) -> Student:
        with self._lock:
            current = self._find(self._students, student_id)
            self._check_email(fields["email"], current.id)
            updated = Student(
                id=current.id,
                name=fields["name"],
                age=fields["age"],
                email=fields["email"],
                is_active=fields["isActive"],
            )
            self._commit(self._swap(current, updated), "replace")
            return updated

    def patch(self, student_id, changes: dict) -> Student:
        with self._lock:
            current = self._find(self._students, student_id)
            if "email" in changes:
                self._check_email(changes["email"], current.id)
            data = current.to_dict()
            data.update(changes)
            updated = Student.from_dict(data)
            self._commit(self._swap(current, updated), "patch")
            return updated

    def delete(self, student_id) -> Student:
        with self._lock:
            current = self._find(self._students, student_id)
            self._commit([s for s in self._students if s is not current], "delete")
            return current

    # --- вызываются под блокировкой

    @staticmethod
    def _find(students: list[Student], student_id) -> Student:
        for student in students:
            if student.id == student_id:
                return student
        raise StudentNotFound(student_id)

    def _check_email(self, email: str, own_id) -> None:
        existing = find_email_conflict(self._students, email, exclude_id=own_id)
        if existing:
            raise DuplicateEmail(
                existing.to_dict(), "Another student with this email already exists"
            )

    def _swap(self, current: Student, updated: Student) -> list[Student]:
        return [updated if s is current else s for s in self._students]

    def _commit(self, students: list[Student], operation: str) -> None:
        self._write(students)
        self._students = students
        student_mutations_total.labels(operation=operation).inc()

    def _write(self, students: list[Student]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps([s.to_dict() for s in students], indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error("students_save_failed", path=str(self.path), error=str(e))
            raise PersistenceError(str(e))


def get_store(request: Request) -> JsonStudentStore:
    return request.app.state.store
