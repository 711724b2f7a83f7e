"""Abstract repository interface (port) for Pet persistence."""

from abc import ABC, abstractmethod

from petclinic.domain.entities import Pet


class PetRepository(ABC):
    """Port for pet lookups — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, pet_id: int) -> Pet | None:
        """Retrieve a single pet by its ID."""
        ...
