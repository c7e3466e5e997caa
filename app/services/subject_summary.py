from __future__ import annotations

from app.integrations.subjects_client import SubjectsSource


def describe_availability(source: SubjectsSource) -> str:
    subjects = source.get_all_subjects()
    return f"Students can enroll at {len(subjects)} subjects."
