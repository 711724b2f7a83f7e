"""Concrete repository implementation for Visit backed by SQLAlchemy."""

from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.application.interfaces import VisitRepository
from petclinic.domain.entities import Visit
from petclinic.domain.identifiers import is_storable_id
from petclinic.infrastructure.database.models import VisitModel

from .mappers import visit_to_entity


class SQLAlchemyVisitRepository(VisitRepository):
    """Implements the VisitRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, visit_id: int) -> Visit | None:
        if not is_storable_id(visit_id):
            return None
        result = await self._session.get(VisitModel, visit_id)
        return visit_to_entity(result) if result else None

    async def save(self, visit: Visit) -> Visit:
        if visit.id is None:
            model = VisitModel()
            self._session.add(model)
        else:
            model = await self._session.get(VisitModel, visit.id)
            if model is None:
                raise ValueError(f"Visit {visit.id} not found in database")

        model.pet_id = visit.pet_id
        model.visit_date = visit.date
        model.description = visit.description
        model.vet_id = visit.vet.id if visit.vet is not None else None
        model.aborted = visit.aborted
        await self._session.flush()
        # Reload so the vet relationship reflects the new vet_id
        await self._session.refresh(model, ["vet"])
        return visit_to_entity(model)
