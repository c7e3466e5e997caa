from __future__ import annotations

MISSING_FIELDS = "Fields name, birthDate and dni are required."
INVALID_BIRTH_DATE = "Field birthDate must be a valid date (YYYY-MM-DD)."
FUTURE_BIRTH_DATE = "Field birthDate must be a past date."


class ValidationError(Exception):
    """Rejected input; rendered as 400 with `message` as the body."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UpstreamFailure(Exception):
    """A collaborator (subjects-service, database) failed to answer."""

    def __init__(self, message: str, status_code: int = 503) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
