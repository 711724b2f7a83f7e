"""ORM model → domain entity mapping shared by the repositories."""

from petclinic.domain.entities import Owner, Pet, Vet, Visit
from petclinic.infrastructure.database.models import OwnerModel, PetModel, VetModel, VisitModel


def vet_to_entity(model: VetModel) -> Vet:
    return Vet(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        specialties=[s.name for s in model.specialties],
    )


def visit_to_entity(model: VisitModel) -> Visit:
    return Visit(
        id=model.id,
        pet_id=model.pet_id,
        date=model.visit_date,
        description=model.description,
        vet=vet_to_entity(model.vet) if model.vet is not None else None,
        aborted=model.aborted,
    )


def pet_to_entity(model: PetModel) -> Pet:
    return Pet(
        id=model.id,
        name=model.name,
        birth_date=model.birth_date,
        type=model.type.name if model.type is not None else "",
        owner_id=model.owner_id,
        visits=[visit_to_entity(v) for v in model.visits],
    )


def owner_to_entity(model: OwnerModel) -> Owner:
    return Owner(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        address=model.address,
        city=model.city,
        telephone=model.telephone,
        pets=[pet_to_entity(p) for p in model.pets],
    )
