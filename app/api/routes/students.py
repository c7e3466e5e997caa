# app/api/routes/students.py
from typing import Annotated

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import PlainTextResponse

from app.deps import get_student_store
from app.repositories.students import StudentStore
from app.schemas.students import StudentCreateIn, StudentOut
from app.services.student_intake import create_student, list_students

router = APIRouter(tags=["students"])


@router.post(
    "/students",
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Campos ausentes ou birthDate inválida/futura"}},
)
def create_student_endpoint(
    store: Annotated[StudentStore, Depends(get_student_store)],
    payload: Annotated[StudentCreateIn | None, Body()] = None,
):
    # sem corpo = nenhum campo; ValidationError -> 400 (handler em app.main)
    st = create_student(store, payload if payload is not None else StudentCreateIn())
    return PlainTextResponse(str(st), status_code=status.HTTP_201_CREATED)


@router.get("/students", response_model=list[StudentOut])
def list_students_endpoint(
    store: Annotated[StudentStore, Depends(get_student_store)],
):
    return [StudentOut.model_validate(s) for s in list_students(store)]


# rota legada (clientes antigos); mesma listagem de /students
@router.get("/subjects", response_model=list[StudentOut], deprecated=True)
def list_students_legacy(
    store: Annotated[StudentStore, Depends(get_student_store)],
):
    return [StudentOut.model_validate(s) for s in list_students(store)]
