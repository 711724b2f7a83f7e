"""Application service (use case) for vet listings."""

from petclinic.application.interfaces import VetRepository
from petclinic.domain.entities import Vet


class VetService:
    """Read-only access to the clinic's vets. Depends on the repository port (DI)."""

    def __init__(self, repository: VetRepository):
        self._repository = repository

    async def list_vets(self) -> list[Vet]:
        return await self._repository.get_all()
