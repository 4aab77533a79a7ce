"""Create PetClinic schema and load sample data

Revision ID: 001_create_petclinic_schema
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

from petclinic import seed

revision = "001_create_petclinic_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the clinic tables and insert reference and sample data."""
    vets = op.create_table(
        "vets",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(length=30), nullable=True),
        sa.Column("last_name", sa.String(length=30), nullable=True),
    )
    op.create_index(op.f("ix_vets_id"), "vets", ["id"])

    specialties = op.create_table(
        "specialties",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=80), nullable=True),
    )
    op.create_index(op.f("ix_specialties_id"), "specialties", ["id"])
    op.create_index(op.f("ix_specialties_name"), "specialties", ["name"])

    vet_specialties = op.create_table(
        "vet_specialties",
        sa.Column("vet_id", sa.Integer(), sa.ForeignKey("vets.id"), primary_key=True),
        sa.Column(
            "specialty_id",
            sa.Integer(),
            sa.ForeignKey("specialties.id"),
            primary_key=True,
        ),
    )

    types = op.create_table(
        "types",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=80), nullable=True),
    )
    op.create_index(op.f("ix_types_id"), "types", ["id"])
    op.create_index(op.f("ix_types_name"), "types", ["name"])

    owners = op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(length=30), nullable=True),
        sa.Column("last_name", sa.String(length=30), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=80), nullable=True),
        sa.Column("telephone", sa.String(length=20), nullable=True),
    )
    op.create_index(op.f("ix_owners_id"), "owners", ["id"])
    op.create_index("idx_owners_last_name", "owners", ["last_name"])

    pets = op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=30), nullable=True),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("type_id", sa.Integer(), sa.ForeignKey("types.id"), nullable=False),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("owners.id"), nullable=True),
    )
    op.create_index(op.f("ix_pets_id"), "pets", ["id"])
    op.create_index(op.f("ix_pets_name"), "pets", ["name"])
    op.create_index(op.f("ix_pets_owner_id"), "pets", ["owner_id"])

    visits = op.create_table(
        "visits",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("pet_id", sa.Integer(), sa.ForeignKey("pets.id"), nullable=False),
        sa.Column("visit_date", sa.Date(), nullable=True),
        sa.Column("description", sa.String(length=255), nullable=True),
    )
    op.create_index(op.f("ix_visits_id"), "visits", ["id"])
    op.create_index(op.f("ix_visits_pet_id"), "visits", ["pet_id"])

    op.bulk_insert(
        vets,
        [{"id": i, "first_name": f, "last_name": l} for i, f, l in seed.VETS],
    )
    op.bulk_insert(specialties, [{"id": i, "name": n} for i, n in seed.SPECIALTIES])
    op.bulk_insert(
        vet_specialties,
        [{"vet_id": v, "specialty_id": s} for v, s in seed.VET_SPECIALTIES],
    )
    op.bulk_insert(types, [{"id": i, "name": n} for i, n in seed.PET_TYPES])
    op.bulk_insert(
        owners,
        [
            {
                "id": i,
                "first_name": first,
                "last_name": last,
                "address": address,
                "city": city,
                "telephone": telephone,
            }
            for i, first, last, address, city, telephone in seed.OWNERS
        ],
    )
    op.bulk_insert(
        pets,
        [
            {"id": i, "name": n, "birth_date": b, "type_id": t, "owner_id": o}
            for i, n, b, t, o in seed.PETS
        ],
    )
    op.bulk_insert(
        visits,
        [
            {"id": i, "pet_id": p, "visit_date": d, "description": desc}
            for i, p, d, desc in seed.VISITS
        ],
    )

    if op.get_bind().dialect.name == "postgresql":
        for table in ("vets", "specialties", "types", "owners", "pets", "visits"):
            op.execute(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT MAX(id) FROM {table}))"
            )


def downgrade() -> None:
    """Drop the clinic tables."""
    op.drop_table("visits")
    op.drop_table("pets")
    op.drop_table("owners")
    op.drop_table("types")
    op.drop_table("vet_specialties")
    op.drop_table("specialties")
    op.drop_table("vets")
