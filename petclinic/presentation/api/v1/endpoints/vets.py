"""Vet list as JSON."""

from fastapi import APIRouter, Depends

from petclinic.application.schemas import VetListResponse, VetResponse
from petclinic.application.services import VetService
from petclinic.infrastructure.dependencies import get_vet_service

router = APIRouter(prefix="/vets", tags=["Vets"])


@router.get("", response_model=VetListResponse)
async def list_vets(
    service: VetService = Depends(get_vet_service),
) -> VetListResponse:
    """Retrieve every vet with their specialties."""
    vets = await service.list_vets()
    return VetListResponse(
        vets=[VetResponse.model_validate(v, from_attributes=True) for v in vets]
    )
