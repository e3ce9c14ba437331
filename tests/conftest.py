"""
Pytest configuration: point the app at in-memory SQLite and test credentials
before any gamestore module reads its settings.
"""
import os

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["CLOUDINARY_CLOUD_NAME"] = "demo-cloud"
os.environ["CLOUDINARY_API_KEY"] = "123456789"
os.environ["CLOUDINARY_API_SECRET"] = "test-api-secret"

import gamestore.core.security as security  # noqa: E402

# Cheap hashes keep the API tests fast; verification is unaffected.
security.BCRYPT_ROUNDS = 4
