"""Concrete repository implementations for owners and pets backed by SQLAlchemy."""

from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.application.interfaces import OwnerRepository, PetRepository
from petclinic.domain.entities import Owner, Pet
from petclinic.domain.identifiers import is_storable_id
from petclinic.infrastructure.database.models import OwnerModel, PetModel

from .mappers import owner_to_entity, pet_to_entity


class SQLAlchemyOwnerRepository(OwnerRepository):
    """Implements the OwnerRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, owner_id: int) -> Owner | None:
        if not is_storable_id(owner_id):
            return None
        result = await self._session.get(OwnerModel, owner_id)
        return owner_to_entity(result) if result else None


class SQLAlchemyPetRepository(PetRepository):
    """Implements the PetRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, pet_id: int) -> Pet | None:
        if not is_storable_id(pet_id):
            return None
        result = await self._session.get(PetModel, pet_id)
        return pet_to_entity(result) if result else None
