"""Utility script to seed the starter automation rules for a user."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from orisai.application.use_cases.automation import create_default_automation_rules
from orisai.config import configure_logging
from orisai.infrastructure.database import SessionLocal, initialize_database


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for rule seeding."""

    parser = argparse.ArgumentParser(
        description="Create the default automation rules for a user.",
    )
    parser.add_argument(
        "--user-id",
        type=int,
        required=True,
        help="Identifier of the user that will own the rules",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Seed the default rules using the provided command line arguments."""

    args = parse_args(argv)
    configure_logging()
    initialize_database()

    session = SessionLocal()
    try:
        rules = create_default_automation_rules(session, args.user_id)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the default rules: {exc}") from exc
    finally:
        session.close()

    if not rules:
        print(f"User {args.user_id} already has automation rules; nothing to do.")
        return

    print(f"Created {len(rules)} automation rules for user {args.user_id}:")
    for rule in rules:
        state = "active" if rule.is_active else "inactive"
        print(f"  [{rule.priority:>3}] {rule.name} -> {rule.action} ({state})")


if __name__ == "__main__":
    main()
