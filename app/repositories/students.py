from __future__ import annotations

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import UpstreamFailure
from app.core.logging import get_logger
from app.models.student import Student


class StudentStore(Protocol):
    def save(self, student: Student) -> Student: ...

    def find_all(self) -> list[Student]: ...


class SqlAlchemyStudentStore:
    """StudentStore sobre a Session do request (um INSERT por save)."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, student: Student) -> Student:
        try:
            self.db.add(student)
            self.db.commit()
            self.db.refresh(student)
        except SQLAlchemyError as exc:
            self.db.rollback()
            get_logger().error("student.save_failed", error=str(exc))
            raise UpstreamFailure("Student storage is unavailable.", 500) from exc
        return student

    def find_all(self) -> list[Student]:
        try:
            return list(self.db.scalars(select(Student).order_by(Student.id.asc())))
        except SQLAlchemyError as exc:
            self.db.rollback()
            get_logger().error("student.list_failed", error=str(exc))
            raise UpstreamFailure("Student storage is unavailable.", 500) from exc
