"""Application service (use case) for reading owners."""

from petclinic.application.interfaces import OwnerRepository
from petclinic.domain.entities import Owner
from petclinic.domain.exceptions import EntityNotFoundError


class OwnerService:
    """Orchestrates owner lookups. Depends on the repository port (DI)."""

    def __init__(self, repository: OwnerRepository):
        self._repository = repository

    async def get_owner(self, owner_id: int) -> Owner:
        owner = await self._repository.get_by_id(owner_id)
        if owner is None:
            raise EntityNotFoundError("Owner", owner_id)
        return owner
