"""Concrete repository implementation for Vet backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.application.interfaces import VetRepository
from petclinic.domain.entities import Vet
from petclinic.domain.identifiers import is_storable_id
from petclinic.infrastructure.database.models import VetModel

from .mappers import vet_to_entity


class SQLAlchemyVetRepository(VetRepository):
    """Implements the VetRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, vet_id: int) -> Vet | None:
        if not is_storable_id(vet_id):
            return None
        result = await self._session.get(VetModel, vet_id)
        return vet_to_entity(result) if result else None

    async def get_all(self) -> list[Vet]:
        stmt = select(VetModel).order_by(VetModel.last_name, VetModel.first_name)
        result = await self._session.execute(stmt)
        return [vet_to_entity(row) for row in result.scalars().all()]
