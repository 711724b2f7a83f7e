"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.application.services import (
    OwnerService,
    VetService,
    VisitAccessGuard,
    VisitService,
)
from petclinic.infrastructure.database.session import get_db_session
from petclinic.infrastructure.database.repositories import (
    SQLAlchemyOwnerRepository,
    SQLAlchemyPetRepository,
    SQLAlchemyVetRepository,
    SQLAlchemyVisitRepository,
)


async def get_owner_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[OwnerService, None]:
    """Provides an OwnerService instance with its repository wired up."""
    yield OwnerService(SQLAlchemyOwnerRepository(session))


async def get_vet_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[VetService, None]:
    """Provides a VetService instance with its repository wired up."""
    yield VetService(SQLAlchemyVetRepository(session))


async def get_visit_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[VisitService, None]:
    """Provides a VisitService whose guard shares the request's session."""
    pet_repository = SQLAlchemyPetRepository(session)
    visit_repository = SQLAlchemyVisitRepository(session)
    guard = VisitAccessGuard(
        pet_repository=pet_repository,
        visit_repository=visit_repository,
        vet_repository=SQLAlchemyVetRepository(session),
    )
    yield VisitService(
        owner_repository=SQLAlchemyOwnerRepository(session),
        pet_repository=pet_repository,
        visit_repository=visit_repository,
        guard=guard,
    )
