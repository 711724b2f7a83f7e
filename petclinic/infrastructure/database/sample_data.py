"""Sample clinic data loaded into an empty database on startup.

Idempotent: nothing is inserted once any owner exists.
"""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.infrastructure.database.models import (
    OwnerModel,
    PetModel,
    PetTypeModel,
    SpecialtyModel,
    VetModel,
    VisitModel,
)

logger = logging.getLogger(__name__)

_SPECIALTIES = ("radiology", "surgery", "dentistry")

# (first name, last name, specialties)
_VETS = (
    ("James", "Carter", ()),
    ("Helen", "Leary", ("radiology",)),
    ("Linda", "Douglas", ("surgery", "dentistry")),
    ("Rafael", "Ortega", ("surgery",)),
    ("Henry", "Stevens", ("radiology",)),
    ("Sharon", "Jenkins", ()),
)

_PET_TYPES = ("cat", "dog", "lizard", "snake", "bird", "hamster")

# (first name, last name, address, city, telephone, [(pet name, birth date, type)])
_OWNERS = (
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023", [
        ("Leo", date(2010, 9, 7), "cat"),
    ]),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749", [
        ("Basil", date(2012, 8, 6), "hamster"),
    ]),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763", [
        ("Rosy", date(2011, 4, 17), "dog"),
        ("Jewel", date(2010, 3, 7), "dog"),
    ]),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198", [
        ("Iggy", date(2010, 11, 30), "lizard"),
    ]),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765", [
        ("George", date(2010, 1, 20), "snake"),
    ]),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654", [
        ("Samantha", date(2012, 9, 4), "cat"),
        ("Max", date(2012, 9, 4), "cat"),
    ]),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387", [
        ("Lucky", date(2011, 8, 6), "bird"),
    ]),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683", [
        ("Mulligan", date(2007, 2, 24), "dog"),
    ]),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435", [
        ("Freddy", date(2010, 3, 9), "bird"),
    ]),
    ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487", [
        ("Lucky", date(2010, 6, 24), "dog"),
        ("Sly", date(2012, 6, 8), "cat"),
    ]),
)

# (pet name, owner last name, visit date, description)
_VISITS = (
    ("Samantha", "Coleman", date(2013, 1, 1), "rabies shot"),
    ("Max", "Coleman", date(2013, 1, 2), "rabies shot"),
    ("Max", "Coleman", date(2013, 1, 3), "neutered"),
    ("Samantha", "Coleman", date(2013, 1, 4), "spayed"),
)


async def seed_sample_data(session: AsyncSession) -> bool:
    """Insert the sample clinic. Returns False when the database already has owners."""
    owner_count = await session.scalar(select(func.count()).select_from(OwnerModel))
    if owner_count:
        logger.debug("Owners already present — skipping sample data")
        return False

    specialties = {name: SpecialtyModel(name=name) for name in _SPECIALTIES}
    for first_name, last_name, vet_specialties in _VETS:
        session.add(
            VetModel(
                first_name=first_name,
                last_name=last_name,
                specialties=[specialties[s] for s in vet_specialties],
            )
        )

    pet_types = {name: PetTypeModel(name=name) for name in _PET_TYPES}
    session.add_all(pet_types.values())

    pets: dict[tuple[str, str], PetModel] = {}
    for first_name, last_name, address, city, telephone, owned in _OWNERS:
        owner = OwnerModel(
            first_name=first_name,
            last_name=last_name,
            address=address,
            city=city,
            telephone=telephone,
        )
        for pet_name, birth_date, type_name in owned:
            pet = PetModel(name=pet_name, birth_date=birth_date, type=pet_types[type_name])
            owner.pets.append(pet)
            pets[(pet_name, last_name)] = pet
        session.add(owner)

    for pet_name, owner_last_name, visit_date, description in _VISITS:
        pets[(pet_name, owner_last_name)].visits.append(
            VisitModel(visit_date=visit_date, description=description)
        )

    await session.flush()
    logger.info(
        "Seeded sample data: %d vets, %d owners, %d pets, %d visits",
        len(_VETS), len(_OWNERS), len(pets), len(_VISITS),
    )
    return True
