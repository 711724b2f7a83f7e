"""Visit access guard — ownership/state checks and guarded visit mutations.

Every read or write of an existing visit goes through ``check_access``:
the visit's pet must be one of the owner's pets and the visit must not
have been aborted. Mutations are all-or-nothing — a denied request never
touches the stored visit.
"""

import logging
import re

from petclinic.application.interfaces import PetRepository, VetRepository, VisitRepository
from petclinic.domain.entities import Owner, Vet, Visit
from petclinic.domain.exceptions import VisitAccessDeniedError
from petclinic.domain.identifiers import is_storable_id

logger = logging.getLogger(__name__)

_VET_TOKEN = re.compile(r"[+-]?[0-9]+")


class VisitAccessGuard:
    """Decides whether an owner may act on a visit and applies guarded mutations."""

    def __init__(
        self,
        pet_repository: PetRepository,
        visit_repository: VisitRepository,
        vet_repository: VetRepository,
    ) -> None:
        self._pets = pet_repository
        self._visits = visit_repository
        self._vets = vet_repository

    async def check_access(self, owner: Owner, visit: Visit) -> bool:
        """Return True if the visit's pet belongs to ``owner`` and the visit is active.

        Lookup failures never propagate: an unresolvable pet or a failing
        repository both count as "no access".
        """
        if visit.pet_id is None:
            return False
        try:
            pet = await self._pets.get_by_id(visit.pet_id)
        except Exception:
            logger.exception(
                "Pet lookup failed during access check (owner=%s, visit=%s, pet=%s)",
                owner.id, visit.id, visit.pet_id,
            )
            return False
        if pet is None or pet.id is None:
            return False
        return pet.id in owner.pet_ids and visit.is_active

    async def apply_update(self, owner: Owner, existing: Visit, incoming: Visit) -> Visit:
        """Copy date, pet and vet from ``incoming`` onto ``existing`` and persist it.

        Both the stored visit and the requested one must pass the access
        check, so a visit can only be moved to another pet of the same owner.
        ``id``, ``aborted`` and ``description`` of the stored visit are left
        untouched whatever ``incoming`` carries.

        Raises:
            VisitAccessDeniedError: if either access check fails. Nothing is written.
        """
        if not await self.check_access(owner, existing):
            logger.info("Update denied: owner %s has no access to visit %s", owner.id, existing.id)
            raise VisitAccessDeniedError(owner.id, existing.id)
        if not await self.check_access(owner, incoming):
            logger.info(
                "Update denied: owner %s may not move visit %s to pet %s",
                owner.id, existing.id, incoming.pet_id,
            )
            raise VisitAccessDeniedError(owner.id, existing.id)

        existing.vet = incoming.vet
        existing.pet_id = incoming.pet_id
        existing.date = incoming.date
        return await self._visits.save(existing)

    async def cancel(self, owner: Owner, visit: Visit) -> Visit:
        """Mark the visit as aborted and persist it.

        Raises:
            VisitAccessDeniedError: if the access check fails, including when
                the visit is already aborted.
        """
        if not await self.check_access(owner, visit):
            logger.info("Cancel denied: owner %s has no access to visit %s", owner.id, visit.id)
            raise VisitAccessDeniedError(owner.id, visit.id)

        visit.aborted = True
        return await self._visits.save(visit)

    async def resolve_vet(self, token: str | None) -> Vet | None:
        """Resolve a vet-selection token to a vet.

        A token that is not a plain base-10 integer in id range means
        "no vet assigned"; it does not fail the surrounding operation.
        Surrounding whitespace, digit separators and overflowing numbers
        all count as malformed.
        """
        if token is None or not _VET_TOKEN.fullmatch(token):
            logger.debug("Vet token %r is not numeric — leaving visit unassigned", token)
            return None
        vet_id = int(token)
        if not is_storable_id(vet_id):
            logger.debug("Vet token %r is out of id range — leaving visit unassigned", token)
            return None
        return await self._vets.get_by_id(vet_id)
