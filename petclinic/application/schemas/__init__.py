from .vet import VetListResponse, VetResponse
from .visit import VisitCreateForm, VisitUpdateForm, form_errors

__all__ = [
    "VetListResponse",
    "VetResponse",
    "VisitCreateForm",
    "VisitUpdateForm",
    "form_errors",
]
