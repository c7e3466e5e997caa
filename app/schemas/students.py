import datetime as dt
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class StudentCreateIn(BaseModel):
    # tudo opcional: a obrigatoriedade é checada no intake (400, não 422)
    name: str | None = None
    birth_date: str | None = Field(
        None,
        validation_alias=AliasChoices("birthDate", "birth_date"),
        description="Data ISO (YYYY-MM-DD); não pode ser futura.",
    )
    dni: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _non_object_is_empty(cls, data: Any) -> Any:
        # corpo que não é objeto JSON = nenhum campo informado
        return data if isinstance(data, dict) else {}

    @field_validator("name", "birth_date", "dni", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class StudentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    birth_date: dt.date = Field(serialization_alias="birthDate")
    dni: str
