"""Pydantic DTOs for the visit forms.

Only the fields a form may bind are declared. Anything else the browser
submits (``id``, ``aborted``, ...) is dropped during validation, so those
fields can never be set from form input.
"""

import datetime

from pydantic import BaseModel, Field, ValidationError, field_validator

from petclinic.domain.identifiers import MAX_ID


class VisitCreateForm(BaseModel):
    """Schema for booking a new visit for a pet."""

    date: datetime.date = Field(default_factory=datetime.date.today)
    description: str = Field(..., min_length=1, max_length=255)

    model_config = {"extra": "ignore", "str_strip_whitespace": True}

    @field_validator("date", mode="before")
    @classmethod
    def _blank_date_is_today(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return datetime.date.today()
        return value


class VisitUpdateForm(BaseModel):
    """Schema for modifying an existing visit — date, pet and vet only."""

    date: datetime.date
    pet_id: int = Field(..., gt=0, le=MAX_ID)

    model_config = {"extra": "ignore"}

    @field_validator("date", "pet_id", mode="before")
    @classmethod
    def _blank_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


def form_errors(exc: ValidationError) -> dict[str, str]:
    """Flatten a ValidationError into ``{field: message}`` for re-rendering a form."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        errors.setdefault(field, error["msg"])
    return errors
