"""Vet list page."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from petclinic.application.services import VetService
from petclinic.infrastructure.dependencies import get_vet_service
from petclinic.presentation.web.templating import templates

router = APIRouter(tags=["Vets"])


@router.get("/vets", response_class=HTMLResponse)
async def show_vet_list(
    request: Request,
    service: VetService = Depends(get_vet_service),
) -> Response:
    vets = await service.list_vets()
    return templates.TemplateResponse(request, "vets/vetList.html", {"vets": vets})


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def welcome(request: Request) -> Response:
    return templates.TemplateResponse(request, "welcome.html", {})
