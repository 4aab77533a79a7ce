"""
Business logic service layer.

Orchestrates the clinic repositories: validated owner registration, adding
pets and visits, and reference data lookups.
"""

from typing import List

from sqlalchemy.orm import Session

from .domain.entity_utils import get_by_id
from .domain.exceptions import ValidationException
from .logging_config import get_logger
from .models import Owner, Pet, PetType, Vet, Visit
from .repositories.clinic_repository import (
    IOwnerRepository,
    IPetRepository,
    IVetRepository,
    IVisitRepository,
)
from .repositories.sqlalchemy_repository import (
    SqlAlchemyOwnerRepository,
    SqlAlchemyPetRepository,
    SqlAlchemyVetRepository,
    SqlAlchemyVisitRepository,
)
from .schemas import OwnerForm, PetForm, VisitForm

logger = get_logger(__name__)


class ClinicService:
    """
    Clinic operations over the four repositories.

    New children are persisted in two explicit steps: the child is saved
    first, then its parent.
    """

    def __init__(
        self,
        owners: IOwnerRepository,
        pets: IPetRepository,
        visits: IVisitRepository,
        vets: IVetRepository,
    ):
        """
        Initialize clinic service.

        Args:
            owners: Owner repository
            pets: Pet and pet type repository
            visits: Visit repository
            vets: Vet repository
        """
        self.owners = owners
        self.pets = pets
        self.visits = visits
        self.vets = vets

    # Owners

    def find_owners(self, last_name: str = "") -> List[Owner]:
        """Find owners by last name prefix; an empty prefix lists everyone."""
        return self.owners.find_by_last_name(last_name.strip())

    def get_owner(self, owner_id: int) -> Owner:
        return self.owners.find_by_id(owner_id)

    def register_owner(self, form: OwnerForm) -> Owner:
        """
        Create a new owner.

        Args:
            form: Validated owner data

        Returns:
            The saved owner with its generated id
        """
        owner = Owner(**form.model_dump())
        self.owners.save(owner)
        logger.info("Owner registered", owner_id=owner.id, last_name=owner.last_name)
        return owner

    def update_owner(self, owner_id: int, form: OwnerForm) -> Owner:
        """Overwrite an existing owner's details."""
        owner = self.owners.find_by_id(owner_id)
        for field, value in form.model_dump().items():
            setattr(owner, field, value)
        self.owners.save(owner)
        logger.info("Owner updated", owner_id=owner.id)
        return owner

    # Pets

    def pet_types(self) -> List[PetType]:
        return self.pets.find_pet_types()

    def get_pet(self, pet_id: int) -> Pet:
        return self.pets.find_by_id(pet_id)

    def add_pet(self, owner_id: int, form: PetForm) -> Pet:
        """
        Add a new pet to an owner.

        Args:
            owner_id: Owner id
            form: Validated pet data

        Returns:
            The saved pet with its generated id

        Raises:
            EntityNotFoundException: If the owner or the pet type is unknown
            ValidationException: If the owner already has a pet with that name
        """
        owner = self.owners.find_by_id(owner_id)
        pet_type = get_by_id(self.pets.find_pet_types(), PetType, form.type_id)

        if owner.get_pet(form.name, ignore_new=True) is not None:
            raise ValidationException("name", form.name, "already exists")

        pet = Pet(name=form.name, birth_date=form.birth_date, type=pet_type)
        owner.add_pet(pet)

        self.pets.save(pet)
        self.owners.save(owner)
        logger.info("Pet added", owner_id=owner.id, pet_id=pet.id, name=pet.name)
        return pet

    def update_pet(self, pet_id: int, form: PetForm) -> Pet:
        """
        Update a pet's name, birth date and type.

        Raises:
            EntityNotFoundException: If the pet or the pet type is unknown
            ValidationException: If another pet of the owner has the new name
        """
        pet = self.pets.find_by_id(pet_id)
        pet_type = get_by_id(self.pets.find_pet_types(), PetType, form.type_id)

        if pet.owner is not None:
            namesake = pet.owner.get_pet(form.name, ignore_new=True)
            if namesake is not None and namesake.id != pet.id:
                raise ValidationException("name", form.name, "already exists")

        pet.name = form.name
        pet.birth_date = form.birth_date
        pet.type = pet_type
        self.pets.save(pet)
        logger.info("Pet updated", pet_id=pet.id)
        return pet

    # Visits

    def add_visit(self, pet_id: int, form: VisitForm) -> Visit:
        """
        Record a visit for a pet.

        Raises:
            EntityNotFoundException: If the pet is unknown
        """
        pet = self.pets.find_by_id(pet_id)
        visit = Visit(date=form.visit_date(), description=form.description)
        pet.add_visit(visit)

        self.visits.save(visit)
        self.pets.save(pet)
        logger.info("Visit added", pet_id=pet.id, visit_id=visit.id)
        return visit

    def visits_for_pet(self, pet_id: int) -> List[Visit]:
        return self.visits.find_by_pet_id(pet_id)

    # Vets

    def list_vets(self) -> List[Vet]:
        return self.vets.find_all()


def build_clinic_service(db: Session) -> ClinicService:
    """
    Wire the SQLAlchemy repositories onto one session.

    Args:
        db: SQLAlchemy database session shared by all repositories

    Returns:
        Ready-to-use clinic service
    """
    return ClinicService(
        owners=SqlAlchemyOwnerRepository(db),
        pets=SqlAlchemyPetRepository(db),
        visits=SqlAlchemyVisitRepository(db),
        vets=SqlAlchemyVetRepository(db),
    )
