from __future__ import annotations

import datetime as dt

from sqlalchemy import Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base_class import Base


class Student(Base):
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    birth_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    dni: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(tz=dt.UTC),
        nullable=False,
    )

    def __str__(self) -> str:
        return (
            f"Student(id={self.id}, name={self.name!r}, "
            f"birthDate={self.birth_date.isoformat()}, dni={self.dni!r})"
        )
