"""
Tests for the alembic migration.

Runs the revision against a temporary SQLite file and compares the result
with the ORM metadata.
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session

from petclinic.models import Base, Owner, Pet, PetType, Vet, Visit
from petclinic.repositories import SqlAlchemyOwnerRepository

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'migrated.db'}"


@pytest.fixture
def alembic_config(database_url):
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


@pytest.fixture
def migrated_engine(alembic_config, database_url):
    command.upgrade(alembic_config, "head")
    engine = create_engine(database_url)
    yield engine
    engine.dispose()


class TestMigrations:
    """Test the schema revision"""

    def test_tables_match_models(self, migrated_engine):
        """Test every mapped table exists with the mapped columns"""
        inspector = inspect(migrated_engine)

        for table in Base.metadata.sorted_tables:
            columns = {c["name"] for c in inspector.get_columns(table.name)}
            assert columns == {c.name for c in table.columns}, table.name

    def test_indexes_match_models(self, migrated_engine):
        """Test the revision creates the indexes the models declare"""
        inspector = inspect(migrated_engine)

        for table in Base.metadata.sorted_tables:
            indexes = {ix["name"] for ix in inspector.get_indexes(table.name)}
            assert indexes == {ix.name for ix in table.indexes}, table.name

    def test_sample_data_loaded(self, migrated_engine):
        """Test the revision loads the sample data"""
        with Session(bind=migrated_engine) as db:
            assert db.query(Owner).count() == 10
            assert db.query(Pet).count() == 13
            assert db.query(Visit).count() == 4
            assert db.query(Vet).count() == 6
            assert db.query(PetType).count() == 6

    def test_repositories_work_on_migrated_schema(self, migrated_engine):
        """Test repositories read the migrated data"""
        with Session(bind=migrated_engine) as db:
            owners = SqlAlchemyOwnerRepository(db)
            assert len(owners.find_by_last_name("Davis")) == 2
            assert owners.find_by_id(1).pets[0].type.name == "cat"

    def test_downgrade_drops_tables(self, alembic_config, migrated_engine):
        """Test downgrading to base removes the clinic tables"""
        command.downgrade(alembic_config, "base")

        tables = set(inspect(migrated_engine).get_table_names())
        assert not tables & set(Base.metadata.tables)
