"""Domain entity for visits — a scheduled or completed appointment for a pet."""

from dataclasses import dataclass, field
import datetime

from .vet import Vet


@dataclass
class Visit:
    """A veterinary visit.

    ``aborted`` is a one-way terminal marker: once a visit is cancelled it is
    excluded from any further modification and is never reactivated.
    """

    pet_id: int | None
    description: str = ""
    date: datetime.date = field(default_factory=datetime.date.today)
    vet: Vet | None = None
    id: int | None = None
    aborted: bool = False

    @property
    def is_active(self) -> bool:
        return not self.aborted
