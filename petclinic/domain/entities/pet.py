"""Domain entity for pets."""

from dataclasses import dataclass, field
from datetime import date

from .visit import Visit


@dataclass
class Pet:
    """A pet. Belongs to exactly one owner and owns its visits."""

    name: str
    birth_date: date | None = None
    type: str = ""
    owner_id: int | None = None
    id: int | None = None
    visits: list[Visit] = field(default_factory=list)

    def visits_by_date(self) -> list[Visit]:
        """Visits in chronological order, for display."""
        return sorted(self.visits, key=lambda v: (v.date, v.id or 0))
