"""
Clinic repository interfaces (Abstract Base Classes).

Define the contracts for owner, pet, visit and vet persistence
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import Owner, Pet, PetType, Vet, Visit


class IOwnerRepository(ABC):
    """
    Abstract repository interface for owners.

    Owners are returned together with their pets.
    """

    @abstractmethod
    def find_by_last_name(self, last_name: str) -> List[Owner]:
        """
        Find owners whose last name starts with the given prefix.

        Args:
            last_name: Last name prefix

        Returns:
            Matching owners, possibly empty
        """
        pass

    @abstractmethod
    def find_by_id(self, owner_id: int) -> Owner:
        """
        Find an owner by id.

        Raises:
            EntityNotFoundException: If no owner has that id
        """
        pass

    @abstractmethod
    def save(self, owner: Owner) -> Owner:
        """
        Insert a new owner or persist changes to an existing one.

        Args:
            owner: Owner to persist; receives its id on insert

        Returns:
            The saved owner
        """
        pass


class IPetRepository(ABC):
    """Abstract repository interface for pets and pet types."""

    @abstractmethod
    def find_pet_types(self) -> List[PetType]:
        """
        Get all pet types.

        Returns:
            Pet types ordered by name
        """
        pass

    @abstractmethod
    def find_by_id(self, pet_id: int) -> Pet:
        """
        Find a pet by id.

        Raises:
            EntityNotFoundException: If no pet has that id
        """
        pass

    @abstractmethod
    def save(self, pet: Pet) -> Pet:
        """
        Insert a new pet or persist name/type/birth date changes.

        Args:
            pet: Pet to persist; receives its id on insert

        Returns:
            The saved pet
        """
        pass


class IVisitRepository(ABC):
    """Abstract repository interface for visits."""

    @abstractmethod
    def find_by_pet_id(self, pet_id: int) -> List[Visit]:
        """
        Get all visits of a pet.

        Args:
            pet_id: Pet id

        Returns:
            Visits of the pet, possibly empty
        """
        pass

    @abstractmethod
    def save(self, visit: Visit) -> Visit:
        """
        Insert a new visit or persist changes to an existing one.

        Args:
            visit: Visit to persist; receives its id on insert

        Returns:
            The saved visit
        """
        pass


class IVetRepository(ABC):
    """Abstract repository interface for veterinarians."""

    @abstractmethod
    def find_all(self) -> List[Vet]:
        """
        Get all vets with their specialties.

        Returns:
            Vets, each with specialties sorted by name
        """
        pass
