"""
Reset the database to sample data. Run from project root:

  python -m gamestore.scripts.seed        # wipe orders/games/users, then import samples
  python -m gamestore.scripts.seed -d     # wipe only
"""

import argparse
import logging
import sys

from sqlalchemy.orm import Session

from gamestore.core.config import get_settings
from gamestore.core.database import SessionLocal
from gamestore.core.logging_config import configure_logging
from gamestore.core.security import hash_password
from gamestore.models import Game, Genre, Order, OrderItem, Role, User

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"name": "Admin User", "email": "admin@gamestore.com", "password": "admin123", "role": Role.ADMIN},
    {"name": "John Doe", "email": "john@example.com", "password": "123456", "role": Role.USER},
    {"name": "Jane Smith", "email": "jane@example.com", "password": "123456", "role": Role.USER},
]

SAMPLE_GAMES = [
    {
        "title": "The Legend of Zelda: Breath of the Wild",
        "description": "Explore a vast open world of Hyrule and uncover its secrets.",
        "price": 59.99,
        "genre": Genre.ADVENTURE,
        "platform": "Nintendo Switch",
        "rating": 4.9,
    },
    {
        "title": "Elden Ring",
        "description": "A fantasy action RPG set in the Lands Between.",
        "price": 59.99,
        "genre": Genre.RPG,
        "platform": "PC",
        "rating": 4.8,
    },
    {
        "title": "Forza Horizon 5",
        "description": "Open-world racing across the landscapes of Mexico.",
        "price": 49.99,
        "genre": Genre.RACING,
        "platform": "Xbox Series X",
        "rating": 4.7,
    },
    {
        "title": "Civilization VI",
        "description": "Build an empire to stand the test of time in this turn-based strategy classic.",
        "price": 29.99,
        "genre": Genre.STRATEGY,
        "platform": "PC",
        "rating": 4.5,
    },
    {
        "title": "Resident Evil 4",
        "description": "Survival horror remake following Leon S. Kennedy's rescue mission.",
        "price": 39.99,
        "genre": Genre.HORROR,
        "platform": "PlayStation 5",
        "rating": 4.6,
    },
    {
        "title": "Street Fighter 6",
        "description": "The next evolution of the legendary fighting game series.",
        "price": 59.99,
        "genre": Genre.FIGHTING,
        "platform": "PlayStation 5",
        "rating": 4.4,
    },
    {
        "title": "Celeste",
        "description": "A tight platformer about climbing a mountain and facing your demons.",
        "price": 19.99,
        "genre": Genre.PLATFORMER,
        "platform": "PC",
        "rating": 4.8,
    },
    {
        "title": "Portal 2",
        "description": "Solve physics puzzles with a portal gun in Aperture Science.",
        "price": 9.99,
        "genre": Genre.PUZZLE,
        "platform": "PC",
        "rating": 4.9,
    },
]


def destroy_data(db: Session) -> None:
    """Delete all orders, games and users (children first)."""
    db.query(OrderItem).delete(synchronize_session=False)
    db.query(Order).delete(synchronize_session=False)
    db.query(Game).delete(synchronize_session=False)
    db.query(User).delete(synchronize_session=False)
    db.commit()


def import_data(db: Session) -> tuple[int, int]:
    """Replace all data with the sample users and games. Returns (users, games) created."""
    destroy_data(db)
    users = [
        User(
            name=u["name"],
            email=u["email"],
            password_hash=hash_password(u["password"]),
            role=u["role"].value,
        )
        for u in SAMPLE_USERS
    ]
    db.add_all(users)
    db.flush()
    admin = users[0]
    games = [
        Game(**{**g, "genre": g["genre"].value}, created_by=admin.id) for g in SAMPLE_GAMES
    ]
    db.add_all(games)
    db.commit()
    return len(users), len(games)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed or wipe GameStore sample data.")
    parser.add_argument("-d", "--destroy", action="store_true", help="Only delete existing data")
    args = parser.parse_args(argv)
    configure_logging(get_settings().LOG_LEVEL)

    db = SessionLocal()
    try:
        if args.destroy:
            destroy_data(db)
            logger.info("All data destroyed")
            return 0
        users_created, games_created = import_data(db)
        logger.info("Seed completed: users=%s games=%s", users_created, games_created)
        logger.info("Sample admin account: %s", SAMPLE_USERS[0]["email"])
        return 0
    except Exception as e:
        db.rollback()
        logger.exception("Seed failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
