"""Owner details page — the landing point of every visit workflow."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, Response

from petclinic.application.services import OwnerService
from petclinic.domain.exceptions import EntityNotFoundError
from petclinic.infrastructure.dependencies import get_owner_service
from petclinic.presentation.web.templating import templates

router = APIRouter(prefix="/owners", tags=["Owners"])


@router.get("/{owner_id}", response_class=HTMLResponse)
async def show_owner(
    request: Request,
    owner_id: int,
    service: OwnerService = Depends(get_owner_service),
) -> Response:
    """Render an owner with their pets and each pet's visits."""
    try:
        owner = await service.get_owner(owner_id)
    except EntityNotFoundError as e:
        return templates.TemplateResponse(
            request,
            "error.html",
            {"message": str(e)},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return templates.TemplateResponse(request, "owners/ownerDetails.html", {"owner": owner})
