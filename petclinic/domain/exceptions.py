"""
Custom exceptions for the PetClinic domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database drivers, etc.).
"""

from typing import Any, Optional


class PetClinicException(Exception):
    """Base exception for all PetClinic errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundException(PetClinicException):
    """Raised when a lookup by id finds no matching record."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            message=f"{entity} not found: id={entity_id}",
            details={"entity": entity, "id": entity_id},
        )


class RepositoryException(PetClinicException):
    """Raised when the underlying store fails during an operation."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Repository {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )


class DataIntegrityException(PetClinicException):
    """Raised when data integrity constraints are violated."""

    def __init__(self, entity: str, reason: str):
        message = f"Data integrity error for {entity}: {reason}"
        super().__init__(message=message, details={"entity": entity, "reason": reason})


class ValidationException(PetClinicException):
    """Raised when a business rule rejects input."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )
