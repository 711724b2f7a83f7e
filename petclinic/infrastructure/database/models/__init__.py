from .owner import OwnerModel, PetModel, PetTypeModel
from .vet import SpecialtyModel, VetModel, vet_specialties
from .visit import VisitModel

__all__ = [
    "OwnerModel",
    "PetModel",
    "PetTypeModel",
    "SpecialtyModel",
    "VetModel",
    "vet_specialties",
    "VisitModel",
]
