"""Shared base class for API tests: fresh schema and TestClient per test."""

import unittest

from fastapi.testclient import TestClient

from gamestore.core.database import SessionLocal, engine
from gamestore.core.security import create_access_token, hash_password
from gamestore.main import app
from gamestore.models import Base, Game, Order, User


class ApiTestCase(unittest.TestCase):
    """Creates all tables before each test and drops them after."""

    def setUp(self) -> None:
        Base.metadata.create_all(engine)
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(engine)

    def make_user(
        self,
        email: str = "buyer@example.com",
        role: str = "user",
        password: str = "secret123",
        name: str = "Buyer",
    ) -> int:
        """Insert a user directly; returns its id."""
        with SessionLocal() as db:
            user = User(
                name=name,
                email=email,
                password_hash=hash_password(password),
                role=role,
            )
            db.add(user)
            db.commit()
            return user.id

    def make_admin(self, email: str = "admin@example.com") -> int:
        return self.make_user(email=email, role="admin", name="Admin")

    def make_game(self, created_by: int | None = None, **fields: object) -> int:
        """Insert a game directly; returns its id."""
        values = {
            "title": "Test Game",
            "description": "A game used in tests.",
            "price": 19.99,
            "genre": "Action",
            "image": "https://img.example.com/cover.png",
            "stock": 10,
            "rating": 0,
        }
        values.update(fields)
        with SessionLocal() as db:
            game = Game(created_by=created_by, **values)
            db.add(game)
            db.commit()
            return game.id

    def auth(self, user_id: int) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(sub=user_id)}"}

    def stock_of(self, game_id: int) -> int:
        with SessionLocal() as db:
            return db.get(Game, game_id).stock

    def count_orders(self) -> int:
        with SessionLocal() as db:
            return db.query(Order).count()

    def count_users(self) -> int:
        with SessionLocal() as db:
            return db.query(User).count()
