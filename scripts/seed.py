# scripts/seed.py
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

# get_db é um generator do FastAPI; aqui usamos next(get_db()) pra obter uma Session
from app.core.errors import ValidationError
from app.db import get_db, init_db
from app.models.student import Student
from app.repositories.students import SqlAlchemyStudentStore
from app.schemas.students import StudentCreateIn
from app.services.student_intake import create_student

# ---------------- Dados de Exemplo ----------------
STUDENTS_DATA = [
    {"name": "Alice Lima", "birthDate": "2004-03-12", "dni": "12345678A"},
    {"name": "Bruno Alves", "birthDate": "2003-11-02", "dni": "23456789B"},
    {"name": "Clara Dias", "birthDate": "2005-07-21", "dni": "34567890C"},
    {"name": "Diego Nogueira", "birthDate": "2002-01-30", "dni": "45678901D"},
    {"name": "Eduarda Pires", "birthDate": "2004-09-15", "dni": "56789012E"},
]


def get_session() -> Session:
    gen = get_db()
    session: Session = next(gen)
    return session


def ensure_students(db: Session) -> list[Student]:
    store = SqlAlchemyStudentStore(db)
    existing = set(db.scalars(select(Student.dni)))
    created: list[Student] = []
    for data in STUDENTS_DATA:
        if data["dni"] in existing:
            print(f"[Seed] Aluno já existe: {data['name']}")
            continue
        try:
            st = create_student(store, StudentCreateIn.model_validate(data))
        except ValidationError as exc:
            print(f"[Seed] Aluno ignorado ({data['name']}): {exc.message}")
            continue
        print(f"[Seed] Aluno criado: {st}")
        created.append(st)
    return created


def main():
    print("[Seed] Iniciando seed do banco de dados...")
    init_db()
    db = get_session()
    try:
        created = ensure_students(db)
    finally:
        db.close()
    print(f"\n[Seed] Concluído! {len(created)} alunos criados.")


if __name__ == "__main__":
    main()
