"""
Command line entry point for the PetClinic store.

Usage:
    petclinic init-db            # Create tables and load the sample data
    petclinic init-db --drop     # Recreate tables from scratch
    petclinic owners Davis       # List owners whose last name starts with Davis
    petclinic vets               # List vets and their specialties
"""

import argparse
import sys
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from . import database
from .config import settings
from .domain.exceptions import PetClinicException
from .logging_config import setup_logging
from .services import build_clinic_service


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="petclinic", description=settings.APP_NAME)
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create the database schema")
    init_parser.add_argument(
        "--drop", action="store_true", help="Drop existing tables first"
    )
    init_parser.add_argument(
        "--no-seed", action="store_true", help="Do not load the sample data"
    )

    owners_parser = subparsers.add_parser("owners", help="Find owners by last name")
    owners_parser.add_argument(
        "last_name", nargs="?", default="", help="Last name prefix (default: all)"
    )

    subparsers.add_parser("vets", help="List veterinarians")
    return parser


def _list_owners(db: Session, last_name: str) -> int:
    owners = build_clinic_service(db).find_owners(last_name)
    if not owners:
        print(f"No owners found for '{last_name}'")
        return 0
    for owner in owners:
        pets = ", ".join(pet.name or "" for pet in owner.pets) or "-"
        print(f"{owner.id:>4}  {owner.full_name:<25} {owner.city or '':<15} {pets}")
    return 0


def _list_vets(db: Session) -> int:
    for vet in build_clinic_service(db).list_vets():
        specialties = ", ".join(s.name or "" for s in vet.specialties) or "none"
        print(f"{vet.id:>4}  {vet.full_name:<25} {specialties}")
    return 0


def main(
    argv: Optional[List[str]] = None,
    session_factory: Optional[Callable[[], Session]] = None,
) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])
        session_factory: Session factory (defaults to the configured one)

    Returns:
        Process exit code
    """
    args = _build_parser().parse_args(argv)
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    try:
        if args.command == "init-db":
            bind = None
            if session_factory is not None:
                with session_factory() as session:
                    bind = session.get_bind()
            database.init_db(bind=bind, seed=not args.no_seed, drop=args.drop)
            print("Database initialized")
            return 0

        with database.unit_of_work(session_factory) as db:
            if args.command == "owners":
                return _list_owners(db, args.last_name)
            return _list_vets(db)
    except PetClinicException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
