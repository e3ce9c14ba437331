"""Closed value sets shared by ORM models and API schemas."""

from enum import Enum


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    RPG = "RPG"
    STRATEGY = "Strategy"
    SPORTS = "Sports"
    RACING = "Racing"
    SIMULATION = "Simulation"
    PUZZLE = "Puzzle"
    HORROR = "Horror"
    FIGHTING = "Fighting"
    PLATFORMER = "Platformer"
    SHOOTER = "Shooter"
    OTHER = "Other"


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class PaymentMethod(str, Enum):
    COD = "COD"
    MARKED_PAID = "Marked Paid"
