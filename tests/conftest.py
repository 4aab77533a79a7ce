"""
Test configuration and fixtures
"""

import os

# Set test environment variables BEFORE importing petclinic modules
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest
from sqlalchemy.orm import sessionmaker

from petclinic.database import create_db_engine
from petclinic.models import Base
from petclinic.repositories import (
    SqlAlchemyOwnerRepository,
    SqlAlchemyPetRepository,
    SqlAlchemyVetRepository,
    SqlAlchemyVisitRepository,
)
from petclinic.seed import populate_sample_data
from petclinic.services import build_clinic_service

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_db_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def empty_db():
    """Create fresh, empty tables for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def session_factory(empty_db):
    """Session factory over tables holding the sample data"""
    db = TestingSessionLocal()
    try:
        populate_sample_data(db)
        db.commit()
    finally:
        db.close()
    return TestingSessionLocal


@pytest.fixture(scope="function")
def db_session(session_factory):
    """Session over the sample data; rolled back after the test"""
    db = session_factory()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture
def owners(db_session):
    return SqlAlchemyOwnerRepository(db_session)


@pytest.fixture
def pets(db_session):
    return SqlAlchemyPetRepository(db_session)


@pytest.fixture
def visits(db_session):
    return SqlAlchemyVisitRepository(db_session)


@pytest.fixture
def vets(db_session):
    return SqlAlchemyVetRepository(db_session)


@pytest.fixture
def clinic(db_session):
    return build_clinic_service(db_session)
