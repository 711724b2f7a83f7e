from .owner import Owner
from .pet import Pet
from .vet import Vet
from .visit import Visit

__all__ = [
    "Owner",
    "Pet",
    "Vet",
    "Visit",
]
