"""
Sample data for the PetClinic store.

The reference data (pet types, specialties, vets) and the sample owners,
pets and visits of the PetClinic demo. Ids are fixed so the data set can be
referred to by id.
"""

from datetime import date

from sqlalchemy import func, text
from sqlalchemy.orm import Session

from .logging_config import get_logger
from .models import Owner, Pet, PetType, Specialty, Vet, Visit

logger = get_logger(__name__)

# (id, first_name, last_name)
VETS = [
    (1, "James", "Carter"),
    (2, "Helen", "Leary"),
    (3, "Linda", "Douglas"),
    (4, "Rafael", "Ortega"),
    (5, "Henry", "Stevens"),
    (6, "Sharon", "Jenkins"),
]

# (id, name)
SPECIALTIES = [
    (1, "radiology"),
    (2, "surgery"),
    (3, "dentistry"),
]

# (vet_id, specialty_id)
VET_SPECIALTIES = [
    (2, 1),
    (3, 2),
    (3, 3),
    (4, 2),
    (5, 1),
]

# (id, name)
PET_TYPES = [
    (1, "cat"),
    (2, "dog"),
    (3, "lizard"),
    (4, "snake"),
    (5, "bird"),
    (6, "hamster"),
]

# (id, first_name, last_name, address, city, telephone)
OWNERS = [
    (1, "George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023"),
    (2, "Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749"),
    (3, "Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763"),
    (4, "Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198"),
    (5, "Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765"),
    (6, "Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654"),
    (7, "Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387"),
    (8, "Maria", "Escobito", "345 Maple St.", "Madison", "6085557683"),
    (9, "David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435"),
    (10, "Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487"),
]

# (id, name, birth_date, type_id, owner_id)
PETS = [
    (1, "Leo", date(2010, 9, 7), 1, 1),
    (2, "Basil", date(2012, 8, 6), 6, 2),
    (3, "Rosy", date(2011, 4, 17), 2, 3),
    (4, "Jewel", date(2010, 3, 7), 2, 3),
    (5, "Iggy", date(2010, 11, 30), 3, 4),
    (6, "George", date(2010, 1, 20), 4, 5),
    (7, "Samantha", date(2012, 9, 4), 1, 6),
    (8, "Max", date(2012, 9, 4), 1, 6),
    (9, "Lucky", date(2011, 8, 6), 5, 7),
    (10, "Mulligan", date(2007, 2, 24), 2, 8),
    (11, "Freddy", date(2010, 3, 9), 5, 9),
    (12, "Lucky", date(2010, 6, 24), 2, 10),
    (13, "Sly", date(2012, 6, 8), 1, 10),
]

# (id, pet_id, visit_date, description)
VISITS = [
    (1, 7, date(2013, 1, 1), "rabies shot"),
    (2, 8, date(2013, 1, 2), "rabies shot"),
    (3, 8, date(2013, 1, 3), "neutered"),
    (4, 7, date(2013, 1, 4), "spayed"),
]


def populate_sample_data(db: Session) -> bool:
    """
    Load the sample data set into the session.

    Does nothing when pet types already exist. The caller commits.

    Args:
        db: SQLAlchemy database session

    Returns:
        True if data was loaded, False if the store was already populated
    """
    if db.query(PetType).first() is not None:
        logger.info("Sample data already present, skipping")
        return False

    specialties = {sid: Specialty(id=sid, name=name) for sid, name in SPECIALTIES}
    vets = {
        vid: Vet(id=vid, first_name=first, last_name=last) for vid, first, last in VETS
    }
    for vet_id, specialty_id in VET_SPECIALTIES:
        vets[vet_id].add_specialty(specialties[specialty_id])

    db.add_all(PetType(id=tid, name=name) for tid, name in PET_TYPES)
    db.add_all(specialties.values())
    db.add_all(vets.values())
    db.add_all(
        Owner(
            id=oid,
            first_name=first,
            last_name=last,
            address=address,
            city=city,
            telephone=telephone,
        )
        for oid, first, last, address, city, telephone in OWNERS
    )
    db.flush()

    db.add_all(
        Pet(id=pid, name=name, birth_date=birth_date, type_id=type_id, owner_id=owner_id)
        for pid, name, birth_date, type_id, owner_id in PETS
    )
    db.flush()

    db.add_all(
        Visit(id=vid, pet_id=pet_id, date=visit_date, description=description)
        for vid, pet_id, visit_date, description in VISITS
    )
    db.flush()
    _sync_sequences(db)
    # Collections loaded during the inserts above are stale
    db.expire_all()

    logger.info(
        "Sample data loaded",
        owners=len(OWNERS),
        pets=len(PETS),
        vets=len(VETS),
        visits=len(VISITS),
    )
    return True


def _sync_sequences(db: Session) -> None:
    """Move PostgreSQL id sequences past the explicitly inserted ids."""
    if db.get_bind().dialect.name != "postgresql":
        return
    for model in (Vet, Specialty, PetType, Owner, Pet, Visit):
        table = model.__tablename__
        max_id = db.query(func.max(model.id)).scalar() or 1
        db.execute(
            text("SELECT setval(pg_get_serial_sequence(:table, 'id'), :max_id)"),
            {"table": table, "max_id": max_id},
        )
