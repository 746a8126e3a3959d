"""Utility script to create a user with a given role in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from dramaturgy.application.use_cases.users import create_user
from dramaturgy.domain.entities import UserRole
from dramaturgy.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a user for The Dramaturgy API.",
    )
    parser.add_argument("--username", required=True, help="Unique public handle")
    parser.add_argument("--email", required=True, help="Unique e-mail address")
    parser.add_argument("--name", default=None, help="Display name (optional)")
    parser.add_argument(
        "--role",
        default=UserRole.REGULAR.value,
        choices=[role.value for role in UserRole],
        help="Role granted to the user (default: REGULAR)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("A password is required.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            username=args.username,
            email=args.email,
            password=password,
            role=args.role,
            name=args.name,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the user to the database: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Username: {user.username}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role.value}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
