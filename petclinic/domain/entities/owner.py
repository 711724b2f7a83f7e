"""Domain entity for pet owners."""

from dataclasses import dataclass, field

from .pet import Pet


@dataclass
class Owner:
    """A pet owner together with the pets they own."""

    first_name: str
    last_name: str
    address: str = ""
    city: str = ""
    telephone: str = ""
    id: int | None = None
    pets: list[Pet] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def pet_ids(self) -> set[int]:
        """Ids of the owned pets — ownership is decided on identity, not equality."""
        return {pet.id for pet in self.pets if pet.id is not None}

    def get_pet(self, pet_id: int) -> Pet | None:
        for pet in self.pets:
            if pet.id == pet_id:
                return pet
        return None
