"""Abstract repository interface (port) for Owner persistence."""

from abc import ABC, abstractmethod

from petclinic.domain.entities import Owner


class OwnerRepository(ABC):
    """Port for owner persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, owner_id: int) -> Owner | None:
        """Retrieve an owner with its pets (and their visits) loaded."""
        ...
