"""Password hasher tests."""

import pytest

from design_studio.services.passwords import PasswordHasher


@pytest.fixture(scope="module")
def hasher():
    return PasswordHasher(rounds=4)


def test_hash_is_not_plaintext(hasher):
    digest = hasher.hash("s3cret")
    assert digest != "s3cret"
    assert digest.startswith("$2")


def test_hash_is_salted(hasher):
    """Test hashing the same password twice gives different digests."""
    assert hasher.hash("s3cret") != hasher.hash("s3cret")


def test_verify(hasher):
    digest = hasher.hash("s3cret")
    assert hasher.verify("s3cret", digest) is True
    assert hasher.verify("S3cret", digest) is False
    assert hasher.verify("", digest) is False


def test_cost_factor_is_encoded(hasher):
    assert hasher.hash("s3cret").split("$")[2] == "04"


@pytest.mark.parametrize("digest", ["", None, "plaintext", "$2b$04$tooshort", "$argon2id$v=19$x"])
def test_verify_malformed_digest_returns_false(hasher, digest):
    assert hasher.verify("s3cret", digest) is False


def test_verify_dummy_is_always_false(hasher):
    assert hasher.verify_dummy("dummy-password-for-timing") is False
