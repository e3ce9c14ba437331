"""Unit tests for gamestore.core.security: bcrypt hashing and JWT tokens."""

import unittest
from datetime import timedelta

import jwt

from gamestore.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    def test_hash_verifies_only_the_original_password(self) -> None:
        hashed = hash_password("correct horse")
        self.assertNotEqual(hashed, "correct horse")
        self.assertTrue(verify_password("correct horse", hashed))
        self.assertFalse(verify_password("battery staple", hashed))

    def test_malformed_hash_does_not_verify(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))


class TestAccessToken(unittest.TestCase):
    def test_token_carries_only_user_id(self) -> None:
        payload = decode_access_token(create_access_token(sub=42))
        self.assertEqual(payload["sub"], "42")
        self.assertEqual(set(payload), {"sub", "exp", "iat"})

    def test_default_expiry_is_thirty_days(self) -> None:
        payload = decode_access_token(create_access_token(sub=1))
        self.assertEqual(payload["exp"] - payload["iat"], 30 * 24 * 60 * 60)

    def test_expired_token_raises(self) -> None:
        token = create_access_token(sub=1, expires_delta=timedelta(seconds=-1))
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_token_signed_with_other_secret_raises(self) -> None:
        forged = jwt.encode({"sub": "1"}, "some-other-secret", algorithm="HS256")
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(forged)


if __name__ == "__main__":
    unittest.main()
