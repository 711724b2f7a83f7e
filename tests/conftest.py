"""In-memory fakes for the repository ports, shared by unit and integration tests."""

import copy
import datetime

import pytest

from petclinic.application.interfaces import (
    OwnerRepository,
    PetRepository,
    VetRepository,
    VisitRepository,
)
from petclinic.application.services import (
    OwnerService,
    VetService,
    VisitAccessGuard,
    VisitService,
)
from petclinic.domain.entities import Owner, Pet, Vet, Visit


class InMemoryClinic:
    """Backing store for the fake repositories.

    Every read hands out a copy, so a test can tell what was actually
    persisted through ``save`` from what was merely mutated in memory.
    """

    def __init__(self):
        self.owners: dict[int, Owner] = {}
        self.pets: dict[int, Pet] = {}
        self.visits: dict[int, Visit] = {}
        self.vets: dict[int, Vet] = {}
        self.saved: list[Visit] = []
        self._next_visit_id = 1000

    def add_owner(self, owner_id: int, first_name: str, last_name: str) -> Owner:
        owner = Owner(id=owner_id, first_name=first_name, last_name=last_name, city="Madison")
        self.owners[owner_id] = owner
        return owner

    def add_pet(self, pet_id: int, owner_id: int, name: str, type: str = "cat") -> Pet:
        pet = Pet(
            id=pet_id,
            name=name,
            owner_id=owner_id,
            type=type,
            birth_date=datetime.date(2010, 9, 7),
        )
        self.pets[pet_id] = pet
        return pet

    def add_vet(self, vet_id: int, first_name: str, last_name: str, specialties=()) -> Vet:
        vet = Vet(id=vet_id, first_name=first_name, last_name=last_name, specialties=list(specialties))
        self.vets[vet_id] = vet
        return vet

    def add_visit(
        self,
        visit_id: int,
        pet_id: int,
        description: str,
        aborted: bool = False,
        vet: Vet | None = None,
        date: datetime.date = datetime.date(2013, 1, 1),
    ) -> Visit:
        visit = Visit(
            id=visit_id,
            pet_id=pet_id,
            description=description,
            aborted=aborted,
            vet=vet,
            date=date,
        )
        self.visits[visit_id] = visit
        return visit

    def load_pet(self, pet_id: int) -> Pet | None:
        pet = self.pets.get(pet_id)
        if pet is None:
            return None
        loaded = copy.deepcopy(pet)
        loaded.visits = [copy.deepcopy(v) for v in self.visits.values() if v.pet_id == pet_id]
        return loaded

    def load_owner(self, owner_id: int) -> Owner | None:
        owner = self.owners.get(owner_id)
        if owner is None:
            return None
        loaded = copy.deepcopy(owner)
        loaded.pets = [
            self.load_pet(pet.id) for pet in self.pets.values() if pet.owner_id == owner_id
        ]
        return loaded

    def store_visit(self, visit: Visit) -> Visit:
        stored = copy.deepcopy(visit)
        if stored.id is None:
            stored.id = self._next_visit_id
            self._next_visit_id += 1
        self.visits[stored.id] = stored
        self.saved.append(copy.deepcopy(stored))
        return copy.deepcopy(stored)


class FakeOwnerRepository(OwnerRepository):
    def __init__(self, clinic: InMemoryClinic):
        self._clinic = clinic

    async def get_by_id(self, owner_id: int) -> Owner | None:
        return self._clinic.load_owner(owner_id)


class FakePetRepository(PetRepository):
    def __init__(self, clinic: InMemoryClinic):
        self._clinic = clinic

    async def get_by_id(self, pet_id: int) -> Pet | None:
        return self._clinic.load_pet(pet_id)


class FakeVisitRepository(VisitRepository):
    def __init__(self, clinic: InMemoryClinic):
        self._clinic = clinic

    async def get_by_id(self, visit_id: int) -> Visit | None:
        visit = self._clinic.visits.get(visit_id)
        return copy.deepcopy(visit) if visit else None

    async def save(self, visit: Visit) -> Visit:
        return self._clinic.store_visit(visit)


class FakeVetRepository(VetRepository):
    def __init__(self, clinic: InMemoryClinic):
        self._clinic = clinic

    async def get_by_id(self, vet_id: int) -> Vet | None:
        vet = self._clinic.vets.get(vet_id)
        return copy.deepcopy(vet) if vet else None

    async def get_all(self) -> list[Vet]:
        vets = sorted(self._clinic.vets.values(), key=lambda v: (v.last_name, v.first_name))
        return [copy.deepcopy(v) for v in vets]


@pytest.fixture
def clinic() -> InMemoryClinic:
    """Owner#1 owns Leo (#10) and Tom (#11); Owner#2 owns Basil (#20).

    Visit#100 is Leo's active visit, Visit#101 Leo's aborted one,
    Visit#200 Basil's active visit.
    """
    c = InMemoryClinic()
    carter = c.add_vet(1, "James", "Carter")
    c.add_vet(2, "Helen", "Leary", ["radiology"])
    c.add_owner(1, "George", "Franklin")
    c.add_owner(2, "Betty", "Davis")
    c.add_pet(10, owner_id=1, name="Leo")
    c.add_pet(11, owner_id=1, name="Tom")
    c.add_pet(20, owner_id=2, name="Basil", type="hamster")
    c.add_visit(100, pet_id=10, description="rabies shot", vet=carter)
    c.add_visit(101, pet_id=10, description="spayed", aborted=True, date=datetime.date(2013, 1, 4))
    c.add_visit(200, pet_id=20, description="checkup")
    return c


@pytest.fixture
def guard(clinic: InMemoryClinic) -> VisitAccessGuard:
    return VisitAccessGuard(
        pet_repository=FakePetRepository(clinic),
        visit_repository=FakeVisitRepository(clinic),
        vet_repository=FakeVetRepository(clinic),
    )


@pytest.fixture
def visit_service(clinic: InMemoryClinic, guard: VisitAccessGuard) -> VisitService:
    return VisitService(
        owner_repository=FakeOwnerRepository(clinic),
        pet_repository=FakePetRepository(clinic),
        visit_repository=FakeVisitRepository(clinic),
        guard=guard,
    )


@pytest.fixture
def owner_service(clinic: InMemoryClinic) -> OwnerService:
    return OwnerService(FakeOwnerRepository(clinic))


@pytest.fixture
def vet_service(clinic: InMemoryClinic) -> VetService:
    return VetService(FakeVetRepository(clinic))
