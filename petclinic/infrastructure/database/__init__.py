from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import OwnerModel, PetModel, PetTypeModel, SpecialtyModel, VetModel, VisitModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "OwnerModel",
    "PetModel",
    "PetTypeModel",
    "SpecialtyModel",
    "VetModel",
    "VisitModel",
]
