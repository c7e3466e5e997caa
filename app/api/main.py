"""API router setup."""
from fastapi import APIRouter

from app.api.routes import students, subjects

api_router = APIRouter()
api_router.include_router(students.router)
api_router.include_router(subjects.router)
