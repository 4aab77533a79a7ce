"""
SQLAlchemy implementation of the clinic repositories.

Each repository is constructed with a session. Saves flush, so ids are
assigned immediately, but never commit or roll back the session: the
caller's unit of work decides.
"""

import logging
from typing import List, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from ..domain.exceptions import (
    DataIntegrityException,
    EntityNotFoundException,
    RepositoryException,
)
from ..models import Owner, Pet, PetType, Vet, Visit
from .clinic_repository import (
    IOwnerRepository,
    IPetRepository,
    IVetRepository,
    IVisitRepository,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")


class SqlAlchemyRepository:
    """Shared session handling for the clinic repositories."""

    def __init__(self, db: Session):
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def _save(self, entity: E) -> E:
        """
        Add and flush an entity inside the current transaction.

        The flush runs in a savepoint; a failure undoes only this save and
        leaves earlier work of the caller's transaction in place.
        """
        name = type(entity).__name__
        state = inspect(entity)
        if state.identity is not None and state.identity != (entity.id,):
            raise DataIntegrityException(
                name, f"id changed from {state.identity[0]} to {entity.id}"
            )

        try:
            with self.db.begin_nested():
                self.db.add(entity)
                self.db.flush()
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error saving {name}: {e}")
            raise RepositoryException("save", str(e))


class SqlAlchemyOwnerRepository(SqlAlchemyRepository, IOwnerRepository):
    """SQLAlchemy implementation for owner persistence."""

    def find_by_last_name(self, last_name: str) -> List[Owner]:
        """Find owners by last name prefix, pets included."""
        return (
            self.db.query(Owner)
            .options(selectinload(Owner.pets))
            .filter(Owner.last_name.startswith(last_name, autoescape=True))
            .order_by(Owner.last_name, Owner.id)
            .all()
        )

    def find_by_id(self, owner_id: int) -> Owner:
        """Find owner by id, pets included."""
        owner = (
            self.db.query(Owner)
            .options(selectinload(Owner.pets))
            .filter(Owner.id == owner_id)
            .first()
        )
        if owner is None:
            raise EntityNotFoundException("Owner", owner_id)
        return owner

    def save(self, owner: Owner) -> Owner:
        """Save owner; new pets already saved are picked up on reload."""
        self._save(owner)
        logger.debug(f"Saved owner {owner.id}")
        return owner


class SqlAlchemyPetRepository(SqlAlchemyRepository, IPetRepository):
    """SQLAlchemy implementation for pet persistence."""

    def find_pet_types(self) -> List[PetType]:
        """Get all pet types ordered by name."""
        return self.db.query(PetType).order_by(PetType.name).all()

    def find_by_id(self, pet_id: int) -> Pet:
        """Find pet by id with its owner and type."""
        pet = (
            self.db.query(Pet)
            .options(joinedload(Pet.owner), selectinload(Pet.visits))
            .filter(Pet.id == pet_id)
            .first()
        )
        if pet is None:
            raise EntityNotFoundException("Pet", pet_id)
        return pet

    def save(self, pet: Pet) -> Pet:
        """Save pet."""
        self._save(pet)
        logger.debug(f"Saved pet {pet.id}")
        return pet


class SqlAlchemyVisitRepository(SqlAlchemyRepository, IVisitRepository):
    """SQLAlchemy implementation for visit persistence."""

    def find_by_pet_id(self, pet_id: int) -> List[Visit]:
        """Get visits of a pet, oldest first."""
        return (
            self.db.query(Visit)
            .filter(Visit.pet_id == pet_id)
            .order_by(Visit.date, Visit.id)
            .all()
        )

    def save(self, visit: Visit) -> Visit:
        """Save visit."""
        self._save(visit)
        logger.debug(f"Saved visit {visit.id} for pet {visit.pet_id}")
        return visit


class SqlAlchemyVetRepository(SqlAlchemyRepository, IVetRepository):
    """SQLAlchemy implementation for vet lookups."""

    def find_all(self) -> List[Vet]:
        """Get all vets with specialties sorted by name."""
        return (
            self.db.query(Vet)
            .options(selectinload(Vet.specialties))
            .order_by(Vet.id)
            .all()
        )
