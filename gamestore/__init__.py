"""GameStore API: accounts, game catalog, orders and image upload."""

SERVICE_NAME = "GameStore API"
__version__ = "1.0.0"
