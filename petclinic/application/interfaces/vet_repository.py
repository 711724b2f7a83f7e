"""Abstract repository interface (port) for Vet lookups."""

from abc import ABC, abstractmethod

from petclinic.domain.entities import Vet


class VetRepository(ABC):
    """Port for vet lookups — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, vet_id: int) -> Vet | None:
        """Retrieve a single vet by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Vet]:
        """Retrieve every vet, ordered by last then first name."""
        ...
