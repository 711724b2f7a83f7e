from .owner_repository import SQLAlchemyOwnerRepository, SQLAlchemyPetRepository
from .vet_repository import SQLAlchemyVetRepository
from .visit_repository import SQLAlchemyVisitRepository

__all__ = [
    "SQLAlchemyOwnerRepository",
    "SQLAlchemyPetRepository",
    "SQLAlchemyVetRepository",
    "SQLAlchemyVisitRepository",
]
