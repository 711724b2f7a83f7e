"""Abstract repository interface (port) for Visit persistence."""

from abc import ABC, abstractmethod

from petclinic.domain.entities import Visit


class VisitRepository(ABC):
    """Port for visit persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, visit_id: int) -> Visit | None:
        """Retrieve a single visit by its ID."""
        ...

    @abstractmethod
    async def save(self, visit: Visit) -> Visit:
        """Insert the visit when it has no ID yet, otherwise update it."""
        ...
