"""Domain entity for veterinarians."""

from dataclasses import dataclass, field


@dataclass
class Vet:
    """A veterinarian. Referenced by visits, never owned by them."""

    first_name: str
    last_name: str
    id: int | None = None
    specialties: list[str] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
