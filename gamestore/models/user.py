"""ORM model for store accounts (auth and RBAC)."""

from sqlalchemy import Column, Integer, String

from gamestore.models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """
    Store account for JWT authentication and role-based access control.

    role: 'admin' or 'user'. email is stored lowercase and is the only unique field.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    email = Column(String(254), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
    avatar = Column(String(1024), nullable=True)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
