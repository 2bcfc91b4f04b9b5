"""
Unit Tests for Password Operations
==================================
Tests for configuration, salts, rehash checks and the sync/async helpers.
"""

import pytest


FAST_PARAMS = dict(time_cost=1, memory_cost=1024, parallelism=1)


class TestConfig:
    """Tests for hashing configuration."""

    def test_defaults(self):
        """Default config matches the documented parameters."""
        from argon2id_core.password import DEFAULT_CONFIG

        assert DEFAULT_CONFIG.time_cost == 1
        assert DEFAULT_CONFIG.memory_cost == 65536
        assert DEFAULT_CONFIG.parallelism == 4
        assert DEFAULT_CONFIG.salt_length == 16
        assert DEFAULT_CONFIG.digest_length == 32

    def test_from_env(self, monkeypatch):
        """ARGON2ID_* variables override defaults."""
        from argon2id_core.password import HashConfig

        monkeypatch.setenv("ARGON2ID_TIME_COST", "3")
        monkeypatch.setenv("ARGON2ID_PARALLELISM", "2")
        monkeypatch.delenv("ARGON2ID_MEMORY_COST", raising=False)

        config = HashConfig.from_env()

        assert config.time_cost == 3
        assert config.parallelism == 2
        assert config.memory_cost == 65536

    @pytest.mark.parametrize(
        "kwargs",
        [{"parallelism": 0}, {"parallelism": 256}, {"time_cost": 0}, {"salt_length": 0}, {"memory_cost": 2**32}],
    )
    def test_invalid_config(self, kwargs):
        """Out-of-range parameters are rejected."""
        from argon2id_core.password import HashConfig

        with pytest.raises(ValueError):
            HashConfig(**kwargs)

    def test_new_honours_config(self):
        """Records carry the configured parameters."""
        from argon2id_core.password import HashConfig, new

        record = new("secret", config=HashConfig(salt_length=8, digest_length=24, **FAST_PARAMS))

        assert len(record.salt) == 8
        assert len(record.digest) == 24
        assert record.memory_cost == 1024
        assert record.compare("secret") is True


class TestSalt:
    """Tests for salt generation."""

    def test_generate_salt_length(self):
        """Salts have the requested length."""
        from argon2id_core.password import generate_salt

        assert len(generate_salt()) == 16
        assert len(generate_salt(32)) == 32

    def test_random_source_failure(self, monkeypatch):
        """Entropy failures surface as RandomSourceError."""
        import os
        from argon2id_core.password import new
        from argon2id_core.exceptions import RandomSourceError

        def broken(n):
            raise OSError("no entropy")

        monkeypatch.setattr(os, "urandom", broken)

        with pytest.raises(RandomSourceError) as exc_info:
            new("secret")

        assert isinstance(exc_info.value.cause, OSError)


class TestNeedsRehash:
    """Tests for rehash detection."""

    def _record(self, **overrides):
        from argon2id_core.password import HashRecord, VERSION

        fields = dict(
            digest=b"d" * 32,
            salt=b"s" * 16,
            memory_cost=65536,
            time_cost=1,
            parallelism=4,
            version=VERSION,
        )
        fields.update(overrides)
        return HashRecord(**fields)

    def test_current_record(self):
        """A record with default parameters is current."""
        from argon2id_core.password import needs_rehash

        record = self._record()

        assert needs_rehash(record) is False
        assert needs_rehash(record.serialize()) is False

    @pytest.mark.parametrize(
        "overrides",
        [
            {"time_cost": 2},
            {"memory_cost": 32768},
            {"parallelism": 2},
            {"salt": b"s" * 8},
            {"digest": b"d" * 16},
            {"version": "16"},
        ],
    )
    def test_outdated_record(self, overrides):
        """Any parameter differing from the config triggers a rehash."""
        from argon2id_core.password import needs_rehash

        assert needs_rehash(self._record(**overrides)) is True

    def test_custom_config(self):
        """The target config can be supplied."""
        from argon2id_core.password import HashConfig, needs_rehash

        record = self._record(time_cost=3)

        assert needs_rehash(record, HashConfig(time_cost=3)) is False

    @pytest.mark.parametrize("token", ["", "garbage", "$argon2i$v=19$m=1,t=1,p=1$c2FsdA$ZGln"])
    def test_unparseable_token(self, token):
        """Tokens that cannot be parsed need a rehash."""
        from argon2id_core.password import needs_rehash

        assert needs_rehash(token) is True


class TestSyncOps:
    """Tests for token-level sync helpers."""

    def test_hash_and_verify(self):
        """Should hash and verify a password."""
        from argon2id_core.password import HashConfig, hash_password_sync, verify_password_sync

        token = hash_password_sync("secret", HashConfig(**FAST_PARAMS))

        assert token.startswith("$argon2id$v=19$m=1024,t=1,p=1$")
        assert verify_password_sync("secret", token) is True
        assert verify_password_sync("wrong", token) is False

    def test_hash_uses_defaults(self):
        """Without a config the default parameters are used."""
        from argon2id_core.password import hash_password_sync

        assert hash_password_sync("secret").startswith("$argon2id$v=19$m=65536,t=1,p=4$")

    @pytest.mark.parametrize("token", ["", "garbage", "$argon2i$v=19$m=1,t=1,p=1$c2FsdA$ZGln"])
    def test_verify_bad_token(self, token):
        """Unparseable tokens never verify."""
        from argon2id_core.password import verify_password_sync

        assert verify_password_sync("secret", token) is False

    def test_verify_rejected_parameters(self):
        """Parameters argon2 refuses to hash with don't verify."""
        from argon2id_core.password import verify_password_sync

        assert verify_password_sync("secret", "$argon2id$v=19$m=1,t=1,p=4$c2FsdHNhbHQ$ZGlnZXN0") is False

    def test_verify_lone_surrogate(self):
        """Passwords with unpaired surrogates verify instead of raising."""
        from argon2id_core.password import HashConfig, hash_password_sync, verify_password_sync

        token = hash_password_sync("secret", HashConfig(**FAST_PARAMS))

        assert verify_password_sync("\udcff", token) is False
        assert verify_password_sync("secret", token) is True

    def test_verify_empty_password(self):
        """Empty passwords are refused."""
        from argon2id_core.password import HashConfig, hash_password_sync, verify_password_sync

        token = hash_password_sync("secret", HashConfig(**FAST_PARAMS))

        assert verify_password_sync("", token) is False

    def test_verify_and_upgrade_outdated(self):
        """A valid but outdated token gets a new default-parameter token."""
        from argon2id_core.password import (
            HashConfig,
            hash_password_sync,
            needs_rehash,
            verify_and_upgrade_sync,
            verify_password_sync,
        )

        old = hash_password_sync("secret", HashConfig(**FAST_PARAMS))

        valid, new_token = verify_and_upgrade_sync("secret", old)

        assert valid is True
        assert new_token is not None
        assert needs_rehash(new_token) is False
        assert verify_password_sync("secret", new_token) is True

    def test_verify_and_upgrade_current(self):
        """A current token needs no upgrade."""
        from argon2id_core.password import HashConfig, hash_password_sync, verify_and_upgrade_sync

        config = HashConfig(**FAST_PARAMS)
        token = hash_password_sync("secret", config)

        assert verify_and_upgrade_sync("secret", token, config) == (True, None)

    def test_verify_and_upgrade_wrong_password(self):
        """Wrong passwords are never upgraded."""
        from argon2id_core.password import HashConfig, hash_password_sync, verify_and_upgrade_sync

        token = hash_password_sync("secret", HashConfig(**FAST_PARAMS))

        assert verify_and_upgrade_sync("wrong", token) == (False, None)


class TestAsyncOps:
    """Tests for executor-backed async helpers."""

    @pytest.mark.asyncio
    async def test_hash_and_verify(self):
        """Should hash and verify without blocking the loop."""
        from argon2id_core.password import HashConfig, hash_password, verify_password

        token = await hash_password("secret", HashConfig(**FAST_PARAMS))

        assert token[:10] == "$argon2id$"
        assert await verify_password("secret", token) is True
        assert await verify_password("wrong", token) is False

    @pytest.mark.asyncio
    async def test_verify_empty_inputs(self):
        """Empty password or token is rejected."""
        from argon2id_core.password import verify_password

        assert await verify_password("", "$argon2id$") is False
        assert await verify_password("secret", "") is False

    @pytest.mark.asyncio
    async def test_verify_and_upgrade(self):
        """Should return a new token for outdated parameters."""
        from argon2id_core.password import HashConfig, hash_password, verify_and_upgrade

        config = HashConfig(**FAST_PARAMS)
        token = await hash_password("secret", config)

        assert await verify_and_upgrade("secret", token, config) == (True, None)

        valid, new_token = await verify_and_upgrade("secret", token, HashConfig(time_cost=2, memory_cost=1024, parallelism=1))
        assert valid is True
        assert new_token.startswith("$argon2id$v=19$m=1024,t=2,p=1$")
