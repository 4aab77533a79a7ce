"""
Repository layer - Data access abstractions.

This layer provides interfaces for entity persistence and retrieval,
hiding implementation details from the clinic service.
"""

from .clinic_repository import (
    IOwnerRepository,
    IPetRepository,
    IVetRepository,
    IVisitRepository,
)
from .sqlalchemy_repository import (
    SqlAlchemyOwnerRepository,
    SqlAlchemyPetRepository,
    SqlAlchemyVetRepository,
    SqlAlchemyVisitRepository,
)

__all__ = [
    "IOwnerRepository",
    "IPetRepository",
    "IVetRepository",
    "IVisitRepository",
    "SqlAlchemyOwnerRepository",
    "SqlAlchemyPetRepository",
    "SqlAlchemyVetRepository",
    "SqlAlchemyVisitRepository",
]
