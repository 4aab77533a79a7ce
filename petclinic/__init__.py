"""
PetClinic persistence layer.

Entity model and repositories for owners, pets, visits and vets.
"""

__version__ = "1.0.0"
