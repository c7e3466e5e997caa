from __future__ import annotations

import datetime as dt
from collections.abc import Callable

from app.core.errors import (
    FUTURE_BIRTH_DATE,
    INVALID_BIRTH_DATE,
    MISSING_FIELDS,
    ValidationError,
)
from app.core.logging import get_logger
from app.models.student import Student
from app.repositories.students import StudentStore
from app.schemas.students import StudentCreateIn


def _present(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def parse_birth_date(raw: str, today: dt.date) -> dt.date:
    """
    Converte `raw` (YYYY-MM-DD) e garante que não está no futuro.
    Hoje é aceito; amanhã em diante não.
    """
    raw = raw.strip()
    try:
        if len(raw) != 10:
            raise ValueError(raw)
        birth_date = dt.datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(INVALID_BIRTH_DATE) from None
    if birth_date > today:
        raise ValidationError(FUTURE_BIRTH_DATE)
    return birth_date


def create_student(
    store: StudentStore,
    payload: StudentCreateIn,
    *,
    today: Callable[[], dt.date] = dt.date.today,
) -> Student:
    log = get_logger()

    if not (
        _present(payload.name)
        and _present(payload.birth_date)
        and _present(payload.dni)
    ):
        log.info("student.rejected", reason="missing_fields")
        raise ValidationError(MISSING_FIELDS)

    try:
        birth_date = parse_birth_date(payload.birth_date, today())
    except ValidationError as exc:
        log.info("student.rejected", reason=exc.message)
        raise

    # só os campos do cliente; id/created_at ficam com o banco
    st = store.save(
        Student(name=payload.name, birth_date=birth_date, dni=payload.dni)
    )
    log.info("student.created", student_id=st.id)
    return st


def list_students(store: StudentStore) -> list[Student]:
    return store.find_all()
