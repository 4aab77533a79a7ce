"""
Input forms for the clinic service.

Pydantic models validating user-supplied owner, pet and visit data before
it reaches the entity model.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Form(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class OwnerForm(_Form):
    """Owner data; every field is required."""

    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=80)
    telephone: str = Field(..., description="Up to 10 digits")

    @field_validator("telephone")
    @classmethod
    def validate_telephone(cls, v: str) -> str:
        """Telephone must be numeric, at most 10 digits."""
        if not v.isdigit() or len(v) > 10:
            raise ValueError("numeric value out of bounds (<10 digits>.<0 digits> expected)")
        return v


class PetForm(_Form):
    """Pet data; the type is referenced by id."""

    name: str = Field(..., min_length=1, max_length=30)
    birth_date: datetime.date
    type_id: int = Field(..., gt=0)


class VisitForm(_Form):
    """Visit data; the date defaults to today."""

    description: str = Field(..., min_length=1, max_length=255)
    date: Optional[datetime.date] = None

    def visit_date(self) -> datetime.date:
        return self.date or datetime.date.today()
