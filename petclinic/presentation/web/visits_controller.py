"""Visit pages — book, modify and cancel visits on behalf of an owner.

Every workflow that fails because the owner, pet or visit is missing, or
because the owner may not touch the visit, ends the same way: a redirect to
the owner page (or ``fail`` for the cancel call).
"""

import datetime
import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from pydantic import ValidationError

from petclinic.application.schemas.visit import VisitCreateForm, VisitUpdateForm, form_errors
from petclinic.application.services import VetService, VisitService
from petclinic.domain.entities import Owner, Pet, Visit
from petclinic.domain.exceptions import EntityNotFoundError, VisitAccessDeniedError
from petclinic.infrastructure.dependencies import get_vet_service, get_visit_service
from petclinic.presentation.web.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Visits"])

CANCEL_OK = "successfully aborted"
CANCEL_FAILED = "fail"


def _owner_redirect(owner_id: int) -> RedirectResponse:
    return RedirectResponse(f"/owners/{owner_id}", status_code=status.HTTP_303_SEE_OTHER)


def _denied(owner_id: int, visit_id: int | None, exc: Exception) -> RedirectResponse:
    logger.info("Visit request refused (owner=%s, visit=%s): %s", owner_id, visit_id, exc)
    return _owner_redirect(owner_id)


async def _render_new_visit_form(
    request: Request,
    owner: Owner,
    pet: Pet,
    vet_service: VetService,
    values: dict[str, str],
    errors: dict[str, str] | None = None,
) -> Response:
    return templates.TemplateResponse(
        request,
        "pets/createOrUpdateVisitForm.html",
        {
            "owner": owner,
            "pet": pet,
            "vets": await vet_service.list_vets(),
            "values": values,
            "errors": errors or {},
        },
    )


async def _render_modify_visit_form(
    request: Request,
    owner: Owner,
    visit: Visit,
    vet_service: VetService,
    values: dict[str, str],
    errors: dict[str, str] | None = None,
) -> Response:
    return templates.TemplateResponse(
        request,
        "pets/modifyVisitForm.html",
        {
            "owner": owner,
            "visit": visit,
            "vets": await vet_service.list_vets(),
            "values": values,
            "errors": errors or {},
        },
    )


# ── New visit ────────────────────────────────────────────────────────


@router.get("/owners/{owner_id}/pets/{pet_id}/visits/new", response_class=HTMLResponse)
async def init_new_visit_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    service: VisitService = Depends(get_visit_service),
    vet_service: VetService = Depends(get_vet_service),
) -> Response:
    """Show the form for booking a visit for one of the owner's pets."""
    try:
        owner, pet = await service.get_owned_pet(owner_id, pet_id)
    except (EntityNotFoundError, VisitAccessDeniedError) as exc:
        return _denied(owner_id, None, exc)
    return await _render_new_visit_form(
        request, owner, pet, vet_service,
        values={"date": datetime.date.today().isoformat(), "description": "", "vet_string": ""},
    )


@router.post("/owners/{owner_id}/pets/{pet_id}/visits/new", response_class=HTMLResponse)
async def process_new_visit_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    date: str = Form(""),
    description: str = Form(""),
    vet_string: str = Form(""),
    service: VisitService = Depends(get_visit_service),
    vet_service: VetService = Depends(get_vet_service),
) -> Response:
    """Validate the form and book the visit; invalid input re-shows the form."""
    try:
        owner, pet = await service.get_owned_pet(owner_id, pet_id)
    except (EntityNotFoundError, VisitAccessDeniedError) as exc:
        return _denied(owner_id, None, exc)

    try:
        form = VisitCreateForm.model_validate({"date": date, "description": description})
    except ValidationError as exc:
        return await _render_new_visit_form(
            request, owner, pet, vet_service,
            values={"date": date, "description": description, "vet_string": vet_string},
            errors=form_errors(exc),
        )

    try:
        await service.create_visit(owner_id, pet_id, form, vet_string)
    except (EntityNotFoundError, VisitAccessDeniedError) as exc:
        return _denied(owner_id, None, exc)
    return _owner_redirect(owner_id)


# ── Modify / cancel ──────────────────────────────────────────────────


@router.get("/owners/{owner_id}/visits/{visit_id}", response_class=HTMLResponse)
async def show_update_visit_form(
    request: Request,
    owner_id: int,
    visit_id: int,
    service: VisitService = Depends(get_visit_service),
    vet_service: VetService = Depends(get_vet_service),
) -> Response:
    """Show the modify form, or redirect when the owner may not touch the visit."""
    try:
        owner, visit = await service.get_visit_for_update(owner_id, visit_id)
    except (EntityNotFoundError, VisitAccessDeniedError) as exc:
        return _denied(owner_id, visit_id, exc)
    return await _render_modify_visit_form(
        request, owner, visit, vet_service,
        values={
            "date": visit.date.isoformat(),
            "pet_id": str(visit.pet_id),
            "vet_string": str(visit.vet.id) if visit.vet is not None else "",
        },
    )


@router.api_route(
    "/owners/{owner_id}/visits/{visit_id}",
    methods=["PUT", "POST"],
    response_class=HTMLResponse,
)
async def process_update_visit_form(
    request: Request,
    owner_id: int,
    visit_id: int,
    date: str = Form(""),
    pet_id: str = Form(""),
    vet_string: str = Form(""),
    service: VisitService = Depends(get_visit_service),
    vet_service: VetService = Depends(get_vet_service),
) -> Response:
    """Apply a date/pet/vet change. ``id`` and ``aborted`` are never read from the form."""
    try:
        form = VisitUpdateForm.model_validate({"date": date, "pet_id": pet_id})
    except ValidationError as exc:
        try:
            owner, visit = await service.get_visit_for_update(owner_id, visit_id)
        except (EntityNotFoundError, VisitAccessDeniedError) as denied:
            return _denied(owner_id, visit_id, denied)
        return await _render_modify_visit_form(
            request, owner, visit, vet_service,
            values={"date": date, "pet_id": pet_id, "vet_string": vet_string},
            errors=form_errors(exc),
        )

    try:
        await service.update_visit(owner_id, visit_id, form, vet_string)
    except (EntityNotFoundError, VisitAccessDeniedError) as exc:
        return _denied(owner_id, visit_id, exc)
    return _owner_redirect(owner_id)


@router.put("/owners/{owner_id}/visits/{visit_id}/cancel", response_class=PlainTextResponse)
async def process_cancel_visit(
    owner_id: int,
    visit_id: int,
    service: VisitService = Depends(get_visit_service),
) -> PlainTextResponse:
    """Abort the visit. Answers ``successfully aborted`` or ``fail`` as plain text."""
    try:
        await service.cancel_visit(owner_id, visit_id)
    except (EntityNotFoundError, VisitAccessDeniedError) as exc:
        logger.info("Cancel refused (owner=%s, visit=%s): %s", owner_id, visit_id, exc)
        return PlainTextResponse(CANCEL_FAILED)
    return PlainTextResponse(CANCEL_OK)
