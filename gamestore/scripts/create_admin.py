"""
Create the first admin account. Run from project root:
  python -m gamestore.scripts.create_admin --email admin@gamestore.com --name "Admin User" --password <password>
Does nothing if the email is already registered.
"""
import argparse
import logging
import sys

from pydantic import EmailStr, TypeAdapter, ValidationError

from gamestore.core.config import get_settings
from gamestore.core.database import SessionLocal
from gamestore.core.logging_config import configure_logging
from gamestore.core.security import (
    NAME_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    hash_password,
)
from gamestore.models import Role, User

logger = logging.getLogger(__name__)

_EMAIL = TypeAdapter(EmailStr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a GameStore admin account.")
    parser.add_argument("--email", default="admin@gamestore.com", help="Admin email")
    parser.add_argument("--name", default="Admin User", help=f"Display name (1-{NAME_MAX_LEN} chars)")
    parser.add_argument(
        "--password",
        required=True,
        help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)",
    )
    args = parser.parse_args(argv)
    configure_logging(get_settings().LOG_LEVEL)

    try:
        email = _EMAIL.validate_python(args.email.strip()).lower()
    except ValidationError:
        logger.error("Invalid email: %r", args.email)
        return 1
    name = args.name.strip()
    if not name or len(name) > NAME_MAX_LEN:
        logger.error("Invalid name length.")
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        logger.error("Password must be %s-%s characters.", PASSWORD_MIN_LEN, PASSWORD_MAX_LEN)
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            logger.info("Admin user already exists: email=%s role=%s", existing.email, existing.role)
            return 0
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(args.password),
            role=Role.ADMIN.value,
        )
        db.add(user)
        db.commit()
        logger.info("Admin user created: email=%s; change the password after first login.", email)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
