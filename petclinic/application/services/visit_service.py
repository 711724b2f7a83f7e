"""Application service (use case) for the visit workflows.

Resolves the owner, pet and visit named in a request and hands the
mutation to ``VisitAccessGuard``. Callers treat ``EntityNotFoundError`` and
``VisitAccessDeniedError`` alike, so a client cannot tell a missing visit
from someone else's.
"""

import logging

from petclinic.application.interfaces import OwnerRepository, PetRepository, VisitRepository
from petclinic.application.schemas.visit import VisitCreateForm, VisitUpdateForm
from petclinic.application.services.visit_access_guard import VisitAccessGuard
from petclinic.domain.entities import Owner, Pet, Visit
from petclinic.domain.exceptions import EntityNotFoundError, VisitAccessDeniedError

logger = logging.getLogger(__name__)


class VisitService:
    """Orchestrates visit creation, modification and cancellation."""

    def __init__(
        self,
        owner_repository: OwnerRepository,
        pet_repository: PetRepository,
        visit_repository: VisitRepository,
        guard: VisitAccessGuard,
    ) -> None:
        self._owners = owner_repository
        self._pets = pet_repository
        self._visits = visit_repository
        self._guard = guard

    async def _get_owner(self, owner_id: int) -> Owner:
        owner = await self._owners.get_by_id(owner_id)
        if owner is None:
            raise EntityNotFoundError("Owner", owner_id)
        return owner

    async def _get_visit(self, visit_id: int) -> Visit:
        visit = await self._visits.get_by_id(visit_id)
        if visit is None:
            raise EntityNotFoundError("Visit", visit_id)
        return visit

    async def get_owned_pet(self, owner_id: int, pet_id: int) -> tuple[Owner, Pet]:
        """Return the owner and one of their pets, for the new-visit form."""
        owner = await self._get_owner(owner_id)
        pet = owner.get_pet(pet_id)
        if pet is None:
            if await self._pets.get_by_id(pet_id) is None:
                raise EntityNotFoundError("Pet", pet_id)
            raise VisitAccessDeniedError(owner_id, None)
        return owner, pet

    async def create_visit(
        self,
        owner_id: int,
        pet_id: int,
        form: VisitCreateForm,
        vet_token: str | None,
    ) -> Visit:
        """Book a new visit for one of the owner's pets."""
        _, pet = await self.get_owned_pet(owner_id, pet_id)
        visit = Visit(
            pet_id=pet.id,
            date=form.date,
            description=form.description,
            vet=await self._guard.resolve_vet(vet_token),
        )
        saved = await self._visits.save(visit)
        logger.info("Created visit %s for pet %s (owner %s)", saved.id, pet.id, owner_id)
        return saved

    async def get_visit_for_update(self, owner_id: int, visit_id: int) -> tuple[Owner, Visit]:
        """Return the owner and visit if the owner may modify it."""
        owner = await self._get_owner(owner_id)
        visit = await self._get_visit(visit_id)
        if not await self._guard.check_access(owner, visit):
            raise VisitAccessDeniedError(owner_id, visit_id)
        return owner, visit

    async def update_visit(
        self,
        owner_id: int,
        visit_id: int,
        form: VisitUpdateForm,
        vet_token: str | None,
    ) -> Visit:
        """Change date, pet and vet of a visit the owner has access to."""
        owner = await self._get_owner(owner_id)
        visit = await self._get_visit(visit_id)
        incoming = Visit(
            pet_id=form.pet_id,
            date=form.date,
            vet=await self._guard.resolve_vet(vet_token),
        )
        updated = await self._guard.apply_update(owner, visit, incoming)
        logger.info("Updated visit %s (owner %s)", visit_id, owner_id)
        return updated

    async def cancel_visit(self, owner_id: int, visit_id: int) -> Visit:
        """Abort a visit the owner has access to. One-way."""
        owner = await self._get_owner(owner_id)
        visit = await self._get_visit(visit_id)
        cancelled = await self._guard.cancel(owner, visit)
        logger.info("Cancelled visit %s (owner %s)", visit_id, owner_id)
        return cancelled
