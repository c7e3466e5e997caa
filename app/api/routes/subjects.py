# app/api/routes/subjects.py
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.deps import get_subjects_source
from app.integrations.subjects_client import SubjectsSource
from app.services.subject_summary import describe_availability

router = APIRouter(tags=["subjects"])


@router.get(
    "/subjectsForStudents",
    response_class=PlainTextResponse,
    responses={503: {"description": "subjects-service indisponível"}},
)
def subjects_for_students(
    source: Annotated[SubjectsSource, Depends(get_subjects_source)],
):
    return describe_availability(source)
