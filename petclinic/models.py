"""
Database models for the PetClinic domain.

This module defines the SQLAlchemy ORM models for owners, their pets and
visits, and the veterinarians with their specialties. The table layout
follows the PetClinic sample schema.
"""

import datetime
from bisect import bisect_left
from typing import Any, Optional

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String, Table
from sqlalchemy.orm import declarative_base, relationship

Base: Any = declarative_base()


class BaseEntity:
    """
    Identity shared by every entity.

    The id is assigned by the store on first save.
    """

    id = Column(Integer, primary_key=True, index=True)

    @property
    def is_new(self) -> bool:
        """True until the store has assigned an id."""
        return self.id is None


class NamedEntity(BaseEntity):
    """Entity carrying a display name (pet types, specialties, pets)."""

    def __str__(self) -> str:
        return self.name or ""


class Person(BaseEntity):
    """Entity carrying a first and last name (owners, vets)."""

    first_name = Column(String(30))
    last_name = Column(String(30))

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", Integer, ForeignKey("vets.id"), primary_key=True),
    Column("specialty_id", Integer, ForeignKey("specialties.id"), primary_key=True),
)


class Specialty(NamedEntity, Base):
    """A veterinary specialisation, e.g. radiology."""

    __tablename__ = "specialties"

    name = Column(String(80), index=True)

    def __repr__(self) -> str:
        return f"<Specialty id={self.id} name={self.name!r}>"


class Vet(Person, Base):
    """
    A veterinarian.

    Attributes:
        specialties: Deduplicated specialties, kept sorted by name
    """

    __tablename__ = "vets"

    specialties = relationship(
        Specialty,
        secondary=vet_specialties,
        order_by=Specialty.name,
        lazy="selectin",
    )

    @property
    def nr_of_specialties(self) -> int:
        return len(self.specialties)

    def add_specialty(self, specialty: Specialty) -> None:
        """
        Add a specialty, keeping the collection deduplicated and sorted by name.

        Args:
            specialty: Specialty to add
        """
        if specialty in self.specialties:
            return
        if specialty.id is not None and any(
            s.id == specialty.id for s in self.specialties
        ):
            return
        names = [s.name or "" for s in self.specialties]
        self.specialties.insert(bisect_left(names, specialty.name or ""), specialty)

    def __repr__(self) -> str:
        return f"<Vet id={self.id} name={self.full_name!r}>"


class PetType(NamedEntity, Base):
    """Reference classification for pets (cat, dog, snake, ...)."""

    __tablename__ = "types"

    name = Column(String(80), index=True)

    def __repr__(self) -> str:
        return f"<PetType id={self.id} name={self.name!r}>"


class Owner(Person, Base):
    """
    A clinic customer who owns pets.

    Attributes:
        address: Street address
        city: City
        telephone: Digits only, up to 10 characters
        pets: Pets of this owner, loaded sorted by name
    """

    __tablename__ = "owners"
    __table_args__ = (Index("idx_owners_last_name", "last_name"),)

    address = Column(String(255))
    city = Column(String(80))
    telephone = Column(String(20))

    pets = relationship(
        "Pet",
        back_populates="owner",
        order_by="Pet.name",
        lazy="selectin",
    )

    def add_pet(self, pet: "Pet") -> None:
        """
        Attach a pet to this owner.

        Only unsaved pets are appended to the collection; the owner reference
        is always set.
        """
        if pet.is_new and pet not in self.pets:
            self.pets.append(pet)
        pet.owner = self

    def get_pet(self, name: str, ignore_new: bool = False) -> Optional["Pet"]:
        """
        Return the pet with the given name, or None.

        Args:
            name: Pet name, compared case-insensitively
            ignore_new: Skip pets that have not been saved yet
        """
        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if (pet.name or "").lower() == wanted:
                return pet
        return None

    def __repr__(self) -> str:
        return (
            f"<Owner id={self.id} name={self.full_name!r} "
            f"city={self.city!r} pets={len(self.pets)}>"
        )


class Visit(BaseEntity, Base):
    """
    A recorded clinic visit.

    The visit refers to its pet only by id; the pet owns the visit.
    """

    __tablename__ = "visits"

    pet_id = Column(Integer, ForeignKey("pets.id"), nullable=False, index=True)
    date = Column("visit_date", Date)
    description = Column(String(255))

    def __init__(self, **kwargs):
        kwargs.setdefault("date", datetime.date.today())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Visit id={self.id} pet_id={self.pet_id} date={self.date}>"


class Pet(NamedEntity, Base):
    """
    An animal belonging to an owner.

    Attributes:
        birth_date: Date of birth
        type: The pet's PetType (required)
        owner: Owning Owner
        visits: Visits of this pet, most recent first
    """

    __tablename__ = "pets"

    name = Column(String(30), index=True)
    birth_date = Column(Date)
    type_id = Column(Integer, ForeignKey("types.id"), nullable=False)
    owner_id = Column(Integer, ForeignKey("owners.id"), index=True)

    type = relationship(PetType, lazy="joined")
    owner = relationship(Owner, back_populates="pets")
    visits = relationship(
        Visit,
        order_by=[Visit.date.desc(), Visit.id.desc()],
        lazy="selectin",
    )

    def add_visit(self, visit: Visit) -> None:
        """Record a visit for this pet."""
        if visit not in self.visits:
            self.visits.append(visit)
        visit.pet_id = self.id

    def __repr__(self) -> str:
        return f"<Pet id={self.id} name={self.name!r} type={self.type}>"


