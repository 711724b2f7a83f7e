"""Unit tests for the visit workflows and the read-side services."""

import datetime

import pytest

from petclinic.application.schemas import VisitCreateForm, VisitUpdateForm
from petclinic.application.services import OwnerService, VetService, VisitService
from petclinic.domain.exceptions import EntityNotFoundError, VisitAccessDeniedError


# ── New visit ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_owned_pet(visit_service: VisitService):
    owner, pet = await visit_service.get_owned_pet(1, 11)
    assert owner.id == 1
    assert pet.name == "Tom"


@pytest.mark.asyncio
async def test_get_owned_pet_unknown_owner(visit_service: VisitService):
    with pytest.raises(EntityNotFoundError):
        await visit_service.get_owned_pet(99, 10)


@pytest.mark.asyncio
async def test_get_owned_pet_unknown_pet(visit_service: VisitService):
    with pytest.raises(EntityNotFoundError):
        await visit_service.get_owned_pet(1, 999)


@pytest.mark.asyncio
async def test_get_owned_pet_of_other_owner_is_denied(visit_service: VisitService):
    with pytest.raises(VisitAccessDeniedError):
        await visit_service.get_owned_pet(1, 20)


@pytest.mark.asyncio
async def test_create_visit_with_vet(clinic, visit_service: VisitService):
    form = VisitCreateForm(date=datetime.date(2024, 6, 1), description="dental cleaning")

    visit = await visit_service.create_visit(1, 11, form, "2")

    assert visit.id is not None
    stored = clinic.visits[visit.id]
    assert stored.pet_id == 11
    assert stored.description == "dental cleaning"
    assert stored.vet.last_name == "Leary"
    assert stored.aborted is False


@pytest.mark.asyncio
async def test_create_visit_with_malformed_vet_token_is_unassigned(clinic, visit_service: VisitService):
    form = VisitCreateForm(date=datetime.date(2024, 6, 1), description="checkup")

    visit = await visit_service.create_visit(1, 10, form, "abc")

    assert clinic.visits[visit.id].vet is None


@pytest.mark.asyncio
async def test_create_visit_for_foreign_pet_is_denied(clinic, visit_service: VisitService):
    form = VisitCreateForm(description="checkup")

    with pytest.raises(VisitAccessDeniedError):
        await visit_service.create_visit(1, 20, form, "")

    assert clinic.saved == []


# ── Modify ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_visit_for_update(visit_service: VisitService):
    owner, visit = await visit_service.get_visit_for_update(1, 100)
    assert owner.id == 1
    assert visit.id == 100


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("owner_id", "visit_id", "error"),
    [
        (99, 100, EntityNotFoundError),
        (1, 999, EntityNotFoundError),
        (2, 100, VisitAccessDeniedError),
        (1, 101, VisitAccessDeniedError),
    ],
)
async def test_get_visit_for_update_refusals(visit_service: VisitService, owner_id, visit_id, error):
    with pytest.raises(error):
        await visit_service.get_visit_for_update(owner_id, visit_id)


@pytest.mark.asyncio
async def test_update_visit_moves_to_sibling_pet_and_clears_vet(clinic, visit_service: VisitService):
    form = VisitUpdateForm(date=datetime.date(2024, 7, 1), pet_id=11)

    await visit_service.update_visit(1, 100, form, "abc")

    stored = clinic.visits[100]
    assert stored.pet_id == 11
    assert stored.date == datetime.date(2024, 7, 1)
    assert stored.vet is None
    assert stored.description == "rabies shot"


@pytest.mark.asyncio
async def test_update_visit_to_pet_of_other_owner_is_denied(clinic, visit_service: VisitService):
    form = VisitUpdateForm(date=datetime.date(2024, 7, 1), pet_id=20)

    with pytest.raises(VisitAccessDeniedError):
        await visit_service.update_visit(1, 100, form, "2")

    stored = clinic.visits[100]
    assert stored.pet_id == 10
    assert stored.vet.id == 1
    assert clinic.saved == []


@pytest.mark.asyncio
async def test_update_unknown_visit(visit_service: VisitService):
    form = VisitUpdateForm(date=datetime.date(2024, 7, 1), pet_id=10)
    with pytest.raises(EntityNotFoundError):
        await visit_service.update_visit(1, 999, form, "")


# ── Cancel ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_cancel_visit_once(clinic, visit_service: VisitService):
    cancelled = await visit_service.cancel_visit(1, 100)
    assert cancelled.aborted is True
    assert clinic.visits[100].aborted is True

    with pytest.raises(VisitAccessDeniedError):
        await visit_service.cancel_visit(1, 100)


@pytest.mark.asyncio
async def test_cancel_visit_by_other_owner(clinic, visit_service: VisitService):
    with pytest.raises(VisitAccessDeniedError):
        await visit_service.cancel_visit(2, 100)
    assert clinic.visits[100].aborted is False


@pytest.mark.asyncio
async def test_cancel_unknown_visit(visit_service: VisitService):
    with pytest.raises(EntityNotFoundError):
        await visit_service.cancel_visit(1, 999)


# ── Owners & vets ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_owner_with_pets(owner_service: OwnerService):
    owner = await owner_service.get_owner(1)
    assert owner.full_name == "George Franklin"
    assert owner.pet_ids == {10, 11}


@pytest.mark.asyncio
async def test_get_owner_not_found(owner_service: OwnerService):
    with pytest.raises(EntityNotFoundError):
        await owner_service.get_owner(99)


@pytest.mark.asyncio
async def test_list_vets_sorted_by_name(vet_service: VetService):
    vets = await vet_service.list_vets()
    assert [v.last_name for v in vets] == ["Carter", "Leary"]
    assert vets[1].specialties == ["radiology"]
