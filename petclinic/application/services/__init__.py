from .owner_service import OwnerService
from .vet_service import VetService
from .visit_access_guard import VisitAccessGuard
from .visit_service import VisitService

__all__ = [
    "OwnerService",
    "VetService",
    "VisitAccessGuard",
    "VisitService",
]
