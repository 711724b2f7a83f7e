"""Pydantic DTOs for the vets JSON endpoint."""

from pydantic import BaseModel


class VetResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    first_name: str
    last_name: str
    specialties: list[str]

    model_config = {"from_attributes": True}


class VetListResponse(BaseModel):
    vets: list[VetResponse]
