"""Tests for bcrypt password helpers."""

import pytest

from modules.users.passwords import (
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)

ROUNDS = 4


class TestHashPassword:

    def test_hash_is_not_the_password(self):
        hashed = hash_password("secret1", ROUNDS)
        assert hashed != "secret1"
        assert hashed.startswith("$2")

    def test_hashes_are_salted(self):
        assert hash_password("secret1", ROUNDS) != hash_password("secret1", ROUNDS)

    def test_uses_requested_cost(self):
        assert hash_password("secret1", 5).split("$")[2] == "05"

    def test_blank_password_is_refused(self):
        with pytest.raises(ValueError):
            hash_password("", ROUNDS)

    def test_long_passwords_are_accepted(self):
        """bcrypt only reads 72 bytes; longer input must not raise."""
        hashed = hash_password("x" * 100, ROUNDS)
        assert verify_password("x" * 100, hashed)


class TestVerifyPassword:

    def test_correct_password(self):
        assert verify_password("secret1", hash_password("secret1", ROUNDS)) is True

    def test_wrong_password(self):
        assert verify_password("secret2", hash_password("secret1", ROUNDS)) is False

    def test_empty_inputs_never_match(self):
        hashed = hash_password("secret1", ROUNDS)
        assert verify_password("", hashed) is False
        assert verify_password("secret1", "") is False

    def test_malformed_hash_never_matches(self):
        assert verify_password("secret1", "not-a-bcrypt-hash") is False

    def test_non_ascii_password(self):
        hashed = hash_password("pässwörd", ROUNDS)
        assert verify_password("pässwörd", hashed) is True
        assert verify_password("passwort", hashed) is False


class TestAsyncWrappers:

    @pytest.mark.asyncio
    async def test_roundtrip(self):
        hashed = await hash_password_async("secret1", ROUNDS)
        assert await verify_password_async("secret1", hashed) is True
        assert await verify_password_async("nope", hashed) is False
