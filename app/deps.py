from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db import get_db
from app.integrations.subjects_client import HttpSubjectsClient, SubjectsSource
from app.repositories.students import SqlAlchemyStudentStore, StudentStore


def get_student_store(db: Session = Depends(get_db)) -> StudentStore:  # noqa: B008
    return SqlAlchemyStudentStore(db)


def get_subjects_source() -> SubjectsSource:
    return HttpSubjectsClient()
